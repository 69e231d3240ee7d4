import unittest

from backend.app.engine.game import ConnectFour


class TestConnectFour(unittest.TestCase):
    def test_turns_alternate(self):
        game = ConnectFour()
        self.assertTrue(game.drop_piece(3))
        self.assertEqual(game.current_turn, 2)
        self.assertEqual(game.board[5][3], 1)

    def test_vertical_win_ends_game(self):
        game = ConnectFour()
        for col in [0, 1, 0, 1, 0, 1, 0]:
            game.drop_piece(col)
        self.assertEqual(game.winner, 1)
        # No moves after a win
        self.assertFalse(game.drop_piece(2))

    def test_invalid_columns(self):
        game = ConnectFour()
        self.assertFalse(game.drop_piece(-1))
        self.assertFalse(game.drop_piece(7))
        for _ in range(6):
            game.drop_piece(5)
        self.assertFalse(game.is_valid_move(5))
        self.assertNotIn(5, game.get_valid_moves())

    def test_visual_board(self):
        game = ConnectFour()
        game.drop_piece(0)
        lines = game.get_visual_board().splitlines()
        self.assertEqual(lines[0], " 0 1 2 3 4 5 6")
        self.assertEqual(lines[-1], "|X|.|.|.|.|.|.|")
        self.assertFalse(game.is_draw())


if __name__ == '__main__':
    unittest.main()
