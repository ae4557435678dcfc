import unittest

import numpy as np

from rrt_planning.local.evaluation import SubdivisionPathIterator, subdivision_evaluate
from rrt_planning.local.interpolation import cumulative_distance, parametric_lerp, resolution_lerp


class TestInterpolation(unittest.TestCase):

    def test_parametric_lerp(self):
        path = parametric_lerp(np.array([0, 0]), np.array([10, 10]), 11)
        self.assertEqual(path.shape, (11, 2))
        np.testing.assert_array_almost_equal(path[3], [3, 3])
        np.testing.assert_array_equal(path[0], [0, 0])
        np.testing.assert_array_equal(path[-1], [10, 10])

    def test_parametric_lerp_needs_two_steps(self):
        with self.assertRaises(ValueError):
            parametric_lerp([0], [1], 1)

    def test_resolution_lerp_spacing(self):
        path = resolution_lerp([0, 0], [3, 4], 0.3)
        spacing = np.linalg.norm(np.diff(path, axis=0), axis=1)
        self.assertTrue(np.all(spacing <= 0.3 + 1e-12))
        np.testing.assert_array_almost_equal(path[-1], [3, 4])

    def test_resolution_lerp_zero_length(self):
        path = resolution_lerp([1, 1], [1, 1], 0.1)
        self.assertEqual(len(path), 2)

    def test_cumulative_distance(self):
        test = np.array([[0, 1], [1, 2], [3, 3], [6, 5]])
        expected = np.sqrt(2) + np.sqrt(5) + np.sqrt(13)
        self.assertAlmostEqual(cumulative_distance(test), expected)
        self.assertEqual(cumulative_distance([[1, 2]]), 0.0)


class TestSubdivisionEvaluation(unittest.TestCase):

    def test_subdivision_order(self):
        order = list(SubdivisionPathIterator(list("abcdefghijk")))
        self.assertEqual(order, list("fcibehkadgj"))
        self.assertEqual(list(SubdivisionPathIterator([1, 2, 3, 4, 5, 6, 7, 8])), [5, 3, 7, 2, 4, 6, 8, 1])

    def test_subdivision_evaluate(self):
        visited = []

        def eval_fn(point):
            visited.append(point)
            return point != 4
        self.assertFalse(subdivision_evaluate(eval_fn, [1, 2, 3, 4, 5, 6, 7, 8]))
        self.assertEqual(visited, [5, 3, 7, 2, 4])
        self.assertTrue(subdivision_evaluate(lambda point: True, [1, 2, 3]))


if __name__ == '__main__':
    unittest.main()
