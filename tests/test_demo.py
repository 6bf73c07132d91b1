import sys
import os
import unittest

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import demo
from keyed_heap import reverse_order


class TestDemoMeasurements(unittest.TestCase):
    def setUp(self):
        self.keys = np.random.default_rng(0).permutation(256).tolist()

    def test_build_cost_is_below_insert_bound(self):
        n = len(self.keys)
        self.assertLessEqual(demo.build_cost(self.keys), 5 * n)
        self.assertGreater(demo.insert_cost(self.keys), 0)

    def test_heap_sort_cost_for_both_orders(self):
        self.assertGreater(demo.heap_sort_cost(self.keys), 0)
        self.assertGreater(demo.heap_sort_cost(self.keys, reverse_order), 0)

    def test_kth_cost_grows_with_k(self):
        self.assertLess(demo.kth_cost(self.keys, 1), demo.kth_cost(self.keys, 64))


if __name__ == "__main__":
    unittest.main()
