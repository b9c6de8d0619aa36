"""Tests for grid snapping and cell keys."""

import unittest

from voxelhand.voxel_space.coord_mapper import WorldPosition
from voxelhand.voxel_space.grid import cell_key, clamp, parse_cell_key, snap, snap_position


class TestSnap(unittest.TestCase):

    def test_nearest_cell(self):
        self.assertEqual(snap(0.4), 0)
        self.assertEqual(snap(0.6), 1)
        self.assertEqual(snap(-1.4), -1)
        self.assertEqual(snap(-1.6), -2)

    def test_half_rounds_up(self):
        """Halves go toward +inf, not to even."""
        self.assertEqual(snap(0.5, 1), 1)
        self.assertEqual(snap(2.5, 1), 3)
        self.assertEqual(snap(1.5, 1), 2)
        self.assertEqual(snap(-0.5, 1), 0)
        self.assertEqual(snap(-2.5, 1), -2)

    def test_no_negative_zero(self):
        self.assertEqual(str(snap(-0.5)), "0.0")
        self.assertEqual(str(snap(-0.2)), "0.0")

    def test_cell_size(self):
        self.assertEqual(snap(1.3, 0.5), 1.5)
        self.assertEqual(snap(1.2, 0.5), 1.0)
        self.assertEqual(snap(7, 4), 8)
        self.assertEqual(snap(6, 4), 8)

    def test_idempotent(self):
        for size in (0.5, 1, 2, 3):
            for v in (-7.3, -2.5, -0.5, 0, 0.49, 0.5, 1.75, 2.5, 13.1):
                once = snap(v, size)
                self.assertEqual(snap(once, size), once, (v, size))

    def test_bad_cell_size(self):
        with self.assertRaises(ValueError):
            snap(1.0, 0)
        with self.assertRaises(ValueError):
            snap(1.0, -1)

    def test_snap_position(self):
        self.assertEqual(snap_position(0.5, 1.4, -2.6), WorldPosition(1, 1, -3))
        self.assertEqual(snap_position(1.3, 0.2, 0.8, 0.5), WorldPosition(1.5, 0, 1))


class TestClamp(unittest.TestCase):

    def test_within_bounds(self):
        for v in (-10, -1, 0, 0.3, 1, 10):
            self.assertTrue(0 <= clamp(v, 0, 1) <= 1)

    def test_degenerate_range(self):
        for v in (-3, 0, 2.5, 99):
            self.assertEqual(clamp(v, 2.5, 2.5), 2.5)


class TestCellKey(unittest.TestCase):

    def test_format(self):
        self.assertEqual(cell_key(1, 0, -2), "1,0,-2")
        self.assertEqual(cell_key(1.0, 0.0, -2.0), "1,0,-2")

    def test_half_integers(self):
        self.assertEqual(cell_key(0.5, -1.5, 2), "0.5,-1.5,2")

    def test_equal_triples_equal_keys(self):
        self.assertEqual(cell_key(-0.0, 0, 3.0), cell_key(0, 0.0, 3))

    def test_distinct_cells_distinct_keys(self):
        cells = [(x / 2, y / 2, z / 2) for x in range(-3, 4) for y in range(-3, 4) for z in range(-3, 4)]
        keys = {cell_key(*c) for c in cells}
        self.assertEqual(len(keys), len(cells))

    def test_parse_round_trip(self):
        self.assertEqual(parse_cell_key(cell_key(2, 0.5, -3)), WorldPosition(2, 0.5, -3))

    def test_parse_malformed(self):
        with self.assertRaises(ValueError):
            parse_cell_key("1,2")
        with self.assertRaises(ValueError):
            parse_cell_key("a,b,c")


if __name__ == "__main__":
    unittest.main()
