"""Tests for the growth-profiling helpers in demo.py."""

import sys
import os
import unittest

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from demo import measure_growth, amortized_cost, measure_insert_position_cost


class TestMeasureGrowth(unittest.TestCase):
    def test_shapes_and_sizes(self):
        profile = measure_growth(50, 4)
        for key in ("size", "capacity", "copies", "resized"):
            self.assertEqual(profile[key].shape, (50,))
        np.testing.assert_array_equal(profile["size"], np.arange(1, 51))
        self.assertTrue(np.all(profile["capacity"] >= profile["size"]))

    def test_resize_points_follow_growth_law(self):
        profile = measure_growth(30, 2)
        resize_at = np.flatnonzero(profile["resized"])
        np.testing.assert_array_equal(profile["size"][resize_at], [3, 7, 15])
        np.testing.assert_array_equal(profile["capacity"][resize_at], [6, 14, 30])

    def test_copies_count_moved_elements(self):
        profile = measure_growth(10, 0)
        # 0 -> 2 at size 1, 2 -> 6 at size 3, 6 -> 14 at size 7
        self.assertEqual(profile["copies"][-1], 0 + 2 + 6)

    def test_no_growth_within_capacity(self):
        profile = measure_growth(16)
        self.assertFalse(profile["resized"].any())
        self.assertEqual(profile["copies"][-1], 0)


class TestAmortizedCost(unittest.TestCase):
    def test_bounded(self):
        for cap in (0, 1, 16):
            cost = amortized_cost(measure_growth(1000, cap))
            self.assertGreaterEqual(cost.min(), 1.0)
            self.assertLess(cost.max(), 3.0)


class TestInsertPositionCost(unittest.TestCase):
    def test_front_middle_back(self):
        shifts = measure_insert_position_cost(100, [0.0, 0.5, 1.0])
        np.testing.assert_array_equal(shifts, [100, 50, 0])


if __name__ == "__main__":
    unittest.main()
