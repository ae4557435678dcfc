import unittest
from unittest.mock import Mock

from rrt_planning.geometric.obstacles import Ball, Box, obstacle_collision_fn
from rrt_planning.geometric.state_space import R2, R3, RealVectorSpace
from rrt_planning.sampling.samplers import UniformSampler
from rrt_planning.sampling.state_validity import StateValidityChecker


class TestUniformSampler(unittest.TestCase):

    def test_within_limits(self):
        sampler = UniformSampler(seed=1)
        limits = [(-2, 2), (0, 0.5), (10, 11)]
        for _ in range(200):
            sample = sampler.sample(limits)
            self.assertEqual(len(sample), 3)
            for value, (lower, upper) in zip(sample, limits):
                self.assertTrue(lower <= value <= upper)

    def test_seed_is_reproducible(self):
        a = UniformSampler(seed=7)
        b = UniformSampler(seed=7)
        self.assertEqual([a.sample([(0, 1)] * 2) for _ in range(5)], [b.sample([(0, 1)] * 2) for _ in range(5)])


class TestStateSpace(unittest.TestCase):

    def test_r2_defaults(self):
        space = R2(sampler=UniformSampler(seed=0))
        self.assertEqual(space.dimension, 2)
        self.assertEqual(space.get_bounds(), [(0, 10), (0, 10)])
        self.assertTrue(space.contains(space.sample()))

    def test_r3_custom_limits(self):
        space = R3(limits=[['x', (-4, 4)], ['y', (-4, 4)], ['z', (-4, 4)]])
        self.assertEqual(len(space.sample()), 3)
        self.assertFalse(space.contains([0, 0, 5]))
        self.assertFalse(space.contains([0, 0]))

    def test_invalid_limits(self):
        with self.assertRaises(ValueError):
            RealVectorSpace([['x', (1, 0)]])
        with self.assertRaises(ValueError):
            RealVectorSpace([])


class TestStateValidityChecker(unittest.TestCase):

    def test_needs_a_function(self):
        with self.assertRaises(ValueError):
            StateValidityChecker()

    def test_all_functions_must_pass(self):
        svc = StateValidityChecker(self_col_func=lambda q: q[0] > 0, col_func=lambda q: q[1] > 0,
                                   validity_funcs=[lambda q: q[0] < 10])
        self.assertTrue(svc.validate([1, 1]))
        self.assertFalse(svc.validate([-1, 1]))
        self.assertFalse(svc.validate([1, -1]))
        self.assertFalse(svc.validate([11, 1]))

    def test_short_circuits_on_first_failure(self):
        col_func = Mock(return_value=True)
        svc = StateValidityChecker(col_func=col_func, validity_funcs=[lambda q: False])
        self.assertFalse(svc.validate([0, 0]))
        col_func.assert_not_called()


class TestObstacles(unittest.TestCase):

    def test_box_interior_is_strict(self):
        box = Box([-1, -1], [1, 1])
        self.assertTrue(box.contains([0.5, -0.99]))
        self.assertFalse(box.contains([1.0, 0.0]))
        self.assertFalse(box.contains([1.2, 0.0]))
        self.assertAlmostEqual(box.distance([4, 5]), 5.0)
        self.assertEqual(box.distance([0, 0]), 0.0)

    def test_box_margin(self):
        box = Box.from_center([0, 0, 0], [0.05, 0.25, 0.15])
        self.assertTrue(box.contains([0.1, 0, 0], margin=0.1))
        self.assertFalse(box.contains([0.2, 0, 0], margin=0.1))

    def test_bad_box(self):
        with self.assertRaises(ValueError):
            Box([1, 1], [0, 0])
        with self.assertRaises(ValueError):
            Box([0, 0], [1, 1, 1])

    def test_ball(self):
        ball = Ball([0, 0], 1.0)
        self.assertTrue(ball.contains([0.5, 0.5]))
        self.assertFalse(ball.contains([1.0, 0.0]))
        self.assertTrue(ball.contains([1.05, 0.0], margin=0.1))
        self.assertAlmostEqual(ball.distance([3, 0]), 2.0)

    def test_collision_fn(self):
        col_fn = obstacle_collision_fn([Box([-1, -1], [1, 1]), Ball([3, 3], 0.5)])
        self.assertTrue(col_fn([-1.2, 0.0]))
        self.assertFalse(col_fn([0.0, 0.0]))
        self.assertFalse(col_fn([3.1, 3.1]))


if __name__ == '__main__':
    unittest.main()
