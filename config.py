"""Solver settings, environment overrides and logging setup."""

import logging
import os
from dataclasses import dataclass

from search import PROGRESS_INTERVAL
from state import HEURISTICS

DEFAULT_HEURISTIC = "nearest_target"
DEFAULT_MAX_STATES = 1_000_000
SOLVE_TIMEOUT = 60  # seconds
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class SolverConfig:
    heuristic: str = DEFAULT_HEURISTIC
    max_states: int | None = DEFAULT_MAX_STATES
    progress_interval: int = PROGRESS_INTERVAL
    solve_timeout: float = SOLVE_TIMEOUT
    log_level: str = "INFO"

    def __post_init__(self):
        if self.heuristic not in HEURISTICS:
            raise ValueError(
                f"Unknown heuristic {self.heuristic!r}; "
                f"choose from {sorted(HEURISTICS)}"
            )

    @classmethod
    def from_env(cls, environ=None) -> "SolverConfig":
        """Build a config from SOKOBOT_* environment variables.

        SOKOBOT_MAX_STATES=0 disables the node limit.
        """
        env = os.environ if environ is None else environ
        max_states = int(env.get("SOKOBOT_MAX_STATES", DEFAULT_MAX_STATES))
        return cls(
            heuristic=env.get("SOKOBOT_HEURISTIC", DEFAULT_HEURISTIC),
            max_states=max_states or None,
            solve_timeout=float(env.get("SOKOBOT_SOLVE_TIMEOUT", SOLVE_TIMEOUT)),
            log_level=env.get("SOKOBOT_LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level="INFO"):
    """Set up root logging for the command-line and server entry points."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
