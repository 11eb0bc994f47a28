import unittest

try:
    from api import app
except ModuleNotFoundError:
    app = None

try:
    from fastapi.testclient import TestClient
except (ImportError, RuntimeError):
    TestClient = None


@unittest.skipIf(app is None or TestClient is None, "fastapi stack is not available in this environment")
class TestApiIntegration(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(app)

    def test_health_endpoint(self) -> None:
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})

    def test_reach_endpoint_returns_count_and_grid_format(self) -> None:
        response = self.client.post("/reach", json={"grid": [[1, 0], [0, 0]], "steps": 1})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["count"], 3)
        self.assertEqual(body["strategy"], "explore")
        self.assertEqual(body["source_cells"], 1)
        self.assertEqual(body["grid_rows"], ["1 0", "0 0"])
        self.assertIsNone(body["trace"])

    def test_reach_endpoint_accepts_ragged_grid(self) -> None:
        response = self.client.post("/reach", json={"grid": [[1, 0, 0], [0, 0], [0]], "steps": 2})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["count"], 6)

    def test_reach_endpoint_uses_shortcut_for_large_bounds(self) -> None:
        grid = [[0, 0, 0, 0] for _ in range(5)]
        grid[3][0] = 1
        response = self.client.post("/reach", json={"grid": grid, "steps": 7})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["count"], 20)
        self.assertEqual(body["strategy"], "shortcut")

    def test_reach_endpoint_can_disable_shortcut(self) -> None:
        grid = [[0, 0, 0, 0] for _ in range(5)]
        grid[3][0] = 1
        response = self.client.post("/reach", json={"grid": grid, "steps": 7, "use_shortcut": False})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["count"], 20)
        self.assertEqual(body["strategy"], "explore")

    def test_reach_endpoint_with_trace_includes_trace(self) -> None:
        response = self.client.post("/reach", json={"grid": [[1, 0], [0]], "steps": 2, "trace": True})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(len(body["trace"]) > 0)
        self.assertTrue(any("Expand" in line for line in body["trace"]))

    def test_reach_endpoint_returns_400_on_negative_steps(self) -> None:
        response = self.client.post("/reach", json={"grid": [[1]], "steps": -1})

        self.assertEqual(response.status_code, 400)
        self.assertIn("detail", response.json())

    def test_reach_endpoint_rejects_missing_grid(self) -> None:
        response = self.client.post("/reach", json={"steps": 1})
        self.assertEqual(response.status_code, 422)


if __name__ == "__main__":
    unittest.main()
