"""
Simple geometric obstacles for point robots in R^n, and a helper turning them into a collision function
usable by StateValidityChecker.
"""
import numpy as np

__all__ = ['Box', 'Ball', 'obstacle_collision_fn']


class Box():
    """
    Axis aligned box. A point is inside when it is strictly between the lower and upper corners in every
    dimension, so the boundary itself is free.
    """

    def __init__(self, lower, upper):
        self.lower = np.asarray(lower, dtype=float)
        self.upper = np.asarray(upper, dtype=float)
        if self.lower.shape != self.upper.shape:
            raise ValueError("Box corners must have the same dimension.")
        if np.any(self.lower > self.upper):
            raise ValueError("Box lower corner must not exceed its upper corner.")

    @classmethod
    def from_center(cls, center, half_extents):
        center = np.asarray(center, dtype=float)
        half_extents = np.asarray(half_extents, dtype=float)
        return cls(center - half_extents, center + half_extents)

    def distance(self, q):
        """Euclidean distance from q to the box, zero inside."""
        q = np.asarray(q, dtype=float)
        outside = np.maximum(self.lower - q, 0.0) + np.maximum(q - self.upper, 0.0)
        return float(np.linalg.norm(outside))

    def contains(self, q, margin=0.0):
        q = np.asarray(q, dtype=float)
        if margin > 0.0:
            return self.distance(q) < margin
        return bool(np.all((q > self.lower) & (q < self.upper)))


class Ball():

    def __init__(self, center, radius):
        if radius < 0:
            raise ValueError("Ball radius must be non-negative.")
        self.center = np.asarray(center, dtype=float)
        self.radius = radius

    def distance(self, q):
        return max(0.0, float(np.linalg.norm(np.asarray(q, dtype=float) - self.center)) - self.radius)

    def contains(self, q, margin=0.0):
        return float(np.linalg.norm(np.asarray(q, dtype=float) - self.center)) < self.radius + margin


def obstacle_collision_fn(obstacles, margin=0.0):
    """
    Builds a collision function that is True when q keeps at least margin clearance from every obstacle.

    Args:
        obstacles (list): Objects with a contains(q, margin) method.
        margin (float): Required clearance, e.g. the radius of the moving body.

    Returns:
        func: The collision function.
    """
    obstacles = list(obstacles)

    def col_fn(q):
        return not any(obstacle.contains(q, margin) for obstacle in obstacles)
    return col_fn
