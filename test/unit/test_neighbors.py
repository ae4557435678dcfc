import unittest

import numpy as np

from rrt_planning.local.neighbors import NearestNeighbors


class TestNearestNeighbors(unittest.TestCase):

    def test_invalid_model(self):
        with self.assertRaises(ValueError):
            NearestNeighbors(2, model_type="BallTree")

    def test_empty_query(self):
        with self.assertRaises(ValueError):
            NearestNeighbors(2).nearest([0, 0])

    def test_overflowing_distances_return_lowest_index(self):
        nn = NearestNeighbors(2)
        nn.append([0, 0])
        nn.append([1, 1])
        self.assertEqual(nn.nearest([1e200, 1e200]), 0)

    def test_append_grows_past_initial_capacity(self):
        nn = NearestNeighbors(2)
        for i in range(100):
            nn.append([i, -i])
        self.assertEqual(len(nn), 100)
        np.testing.assert_array_equal(nn.X[57], [57, -57])
        self.assertEqual(nn.nearest([41.2, -40.9]), 41)

    def test_kdtree_refits_on_threshold(self):
        nn = NearestNeighbors(2, model_type="KDTree", refit_threshold=10)
        for i in range(9):
            nn.append([i, 0])
        self.assertIsNone(nn.model)
        nn.append([9, 0])
        self.assertIsNotNone(nn.model)
        self.assertEqual(nn.n_fitted, 10)
        nn.append([10, 0])
        self.assertEqual(nn.n_fitted, 10)
        self.assertEqual(nn.nearest([10.2, 0]), 10)
        self.assertEqual(nn.nearest([3.1, 0.5]), 3)

    def test_kdtree_agrees_with_linear_scan(self):
        rng = np.random.RandomState(0)
        points = rng.uniform(-5, 5, size=(500, 4))
        queries = rng.uniform(-6, 6, size=(100, 4))
        linear = NearestNeighbors(4)
        kdtree = NearestNeighbors(4, model_type="KDTree", refit_threshold=16, model_kwargs={"leaf_size": 10})
        for point in points:
            linear.append(point)
            kdtree.append(point)
        for query in queries:
            self.assertEqual(linear.nearest(query), kdtree.nearest(query))

    def test_kdtree_ties_go_to_lowest_index(self):
        nn = NearestNeighbors(2, model_type="KDTree", refit_threshold=4)
        for point in ([3, 3], [1, 0], [0, 1], [-1, 0], [0, -1], [1, 0]):
            nn.append(point)
        self.assertEqual(nn.n_fitted, 4)
        self.assertEqual(nn.nearest([0, 0]), 1)
        self.assertEqual(nn.nearest([1, 0]), 1)
        nn.fit()
        self.assertEqual(nn.nearest([0, 0]), 1)
        self.assertEqual(nn.nearest([1, 0]), 1)


if __name__ == '__main__':
    unittest.main()
