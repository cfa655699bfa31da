import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from text_maze.config import clamp_to_view, parse_size

class TestConfig(unittest.TestCase):
    def test_parse_size(self):
        self.assertEqual(parse_size("20 x 12"), (20, 12))
        self.assertEqual(parse_size("20x12"), (20, 12))
        self.assertEqual(parse_size("  7 X 3 "), (7, 3))

    def test_parse_size_invalid(self):
        for bad in ["20", "20 x", "a x b", "1 x 5", "5 x 1", "2 x 3 x 4", ""]:
            with self.subTest(size=bad):
                with self.assertRaises(ValueError):
                    parse_size(bad)

    def test_clamp_to_view(self):
        self.assertEqual(clamp_to_view(15, 10, 80, 24), (15, 10))
        self.assertEqual(clamp_to_view(50, 40, 80, 30), (39, 28))
        self.assertEqual(clamp_to_view(50, 40, 4, 3), (2, 2))

if __name__ == '__main__':
    unittest.main()
