import unittest
from fastapi.testclient import TestClient

from backend.app.main import app


def blank():
    return [[0] * 7 for _ in range(6)]


class TestMoveAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_difficulties(self):
        response = self.client.get("/difficulties")
        self.assertEqual(response.status_code, 200)
        by_name = {d["name"]: d for d in response.json()}
        self.assertEqual(set(by_name), {"easy", "medium", "hard"})
        self.assertEqual(by_name["hard"]["depth"], 6)
        self.assertFalse(by_name["easy"]["use_opening_book"])

    def test_opening_move(self):
        response = self.client.post("/ai/move", json={
            "board": blank(),
            "difficulty": "medium",
            "player": 1,
            "request_id": "abc",
        })
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["column"], 3)
        self.assertEqual(data["request_id"], "abc")
        self.assertFalse(data["fallback"])
        self.assertEqual(data["thoughts"][0]["reason"], "opening book move")
        self.assertEqual(data["evaluations"], 1)

    def test_search_thoughts_are_ranked(self):
        board = blank()
        board[5][0] = 1
        response = self.client.post("/ai/move", json={"board": board, "difficulty": "medium"})
        self.assertEqual(response.status_code, 200)
        scores = [t["score"] for t in response.json()["thoughts"]]
        self.assertEqual(len(scores), 7)
        self.assertEqual(scores, sorted(scores, reverse=True))
        leaves = sum(t["evaluations"] for t in response.json()["thoughts"])
        self.assertEqual(response.json()["evaluations"], leaves)
        self.assertGreater(leaves, 0)

    def test_full_board(self):
        board = [[1 if (r // 2 + c) % 2 == 0 else 2 for c in range(7)] for r in range(6)]
        response = self.client.post("/ai/move", json={"board": board, "difficulty": "hard"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["column"], -1)
        self.assertEqual(response.json()["thoughts"], [])
        self.assertEqual(response.json()["evaluations"], 0)

    def test_rejects_bad_shape(self):
        response = self.client.post("/ai/move", json={"board": blank()[:5], "difficulty": "easy"})
        self.assertEqual(response.status_code, 422)

    def test_rejects_bad_cell(self):
        board = blank()
        board[5][0] = 3
        response = self.client.post("/ai/move", json={"board": board})
        self.assertEqual(response.status_code, 422)

    def test_rejects_floating_piece(self):
        board = blank()
        board[2][4] = 1
        response = self.client.post("/ai/move", json={"board": board})
        self.assertEqual(response.status_code, 422)

    def test_rejects_unknown_difficulty_and_player(self):
        response = self.client.post("/ai/move", json={"board": blank(), "difficulty": "insane"})
        self.assertEqual(response.status_code, 422)
        response = self.client.post("/ai/move", json={"board": blank(), "player": 3})
        self.assertEqual(response.status_code, 422)


if __name__ == '__main__':
    unittest.main()
