"""Tests for the Flask API."""

import time
import unittest

from app import app, jobs
from config import SolverConfig


def client():
    app.config["TESTING"] = True
    return app.test_client()


def wait_for(job_id, timeout=10.0):
    """Poll a job until it leaves the 'searching' state."""
    deadline = time.monotonic() + timeout
    c = client()
    while True:
        data = c.get(f"/api/solve/{job_id}").get_json()
        if data["status"] != "searching" or time.monotonic() > deadline:
            return data
        time.sleep(0.02)


class TestLevels(unittest.TestCase):

    def test_catalog(self):
        resp = client().get("/api/levels")
        self.assertEqual(resp.status_code, 200)
        levels = {entry["name"]: entry for entry in resp.get_json()}
        self.assertIn("Test 1", levels)
        self.assertEqual(levels["Corridor"]["boxes"], 1)
        self.assertEqual(levels["Test 2"]["boxes"], 4)
        self.assertEqual(levels["Corridor"]["rows"][1], "■@aT□■")


class TestSolve(unittest.TestCase):

    def setUp(self):
        app.config["SOLVER"] = SolverConfig()

    def test_solve_named_puzzle(self):
        resp = client().post("/api/solve", json={"name": "Corridor"})
        self.assertEqual(resp.status_code, 200)
        data = resp.get_json()
        self.assertEqual(data["status"], "ok")

        result = wait_for(data["job_id"])
        self.assertEqual(result["status"], "solved")
        self.assertEqual(result["pushes"], 1)
        self.assertEqual(result["actions"], ["PUSH 'a' RIGHT"])
        self.assertEqual(len(result["boards"]), 2)

    def test_solve_level_text(self):
        resp = client().post("/api/solve", json={
            "level": "#######\n#     #\n# a  T#\n# @   #\n#######",
            "heuristic": "assignment",
        })
        result = wait_for(resp.get_json()["job_id"])
        self.assertEqual(result["status"], "solved")
        self.assertEqual(result["pushes"], 3)
        self.assertEqual(result["boards"][0].split("\n")[2], "■□a□□T■")

    def test_no_solution(self):
        resp = client().post("/api/solve", json={"name": "Sealed Box"})
        result = wait_for(resp.get_json()["job_id"])
        self.assertEqual(result["status"], "no_solution")
        self.assertIsNone(result["pushes"])

    def test_limit_reported_as_error(self):
        app.config["SOLVER"] = SolverConfig(max_states=1)
        resp = client().post("/api/solve", json={"name": "Two Down"})
        result = wait_for(resp.get_json()["job_id"])
        self.assertEqual(result["status"], "error")
        self.assertIn("stopped", result["message"])
        self.assertEqual(result["states_explored"], 1)

    def test_requires_json(self):
        resp = client().post("/api/solve", data="nope")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.get_json()["status"], "error")

    def test_missing_level(self):
        resp = client().post("/api/solve", json={"level": ""})
        self.assertEqual(resp.status_code, 400)

    def test_invalid_level(self):
        resp = client().post("/api/solve", json={"level": ["■■■", "■a■", "■■■"]})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("no player", resp.get_json()["message"])

    def test_level_rows_not_strings(self):
        resp = client().post("/api/solve", json={"level": [1, 2]})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("must be strings", resp.get_json()["message"])

    def test_body_must_be_object(self):
        resp = client().post("/api/solve", json=["x"])
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.get_json()["status"], "error")

    def test_unknown_heuristic(self):
        resp = client().post("/api/solve",
                             json={"name": "Corridor", "heuristic": "nope"})
        self.assertEqual(resp.status_code, 400)

    def test_unknown_puzzle(self):
        resp = client().post("/api/solve", json={"name": "Nope"})
        self.assertEqual(resp.status_code, 404)

    def test_unknown_job(self):
        resp = client().get("/api/solve/doesnotexist")
        self.assertEqual(resp.status_code, 404)
        self.assertNotIn("doesnotexist", jobs)


if __name__ == "__main__":
    unittest.main(verbosity=2)
