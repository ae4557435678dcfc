import math

import numpy as np


def cumulative_distance(local_path):
    """
    Calculates the cumulative euclidean distance of a sequence of vectors.
    The distance between each consecutive point is calculated and summed.

    Args:
        local_path (array-like): Sequence of vectors representing a path.

    Returns:
        float: The cumulative euclidean distance. Zero for paths of fewer than two points.
    """
    local_path = np.asarray(local_path, dtype=float)
    if len(local_path) < 2:
        return 0.0
    return float(np.sum(np.sqrt(np.sum(np.diff(local_path, axis=0)**2, 1))))


def parametric_lerp(q0, q1, steps):
    """
    Directly interpolates between q0 and q1, element-wise parametrically via the discretized interval
    determined by the number of steps. Both ends are included.

    Args:
        q0 (ndarray): Numpy vector representing the starting point.
        q1 (ndarray): Numpy vector representing the ending point.
        steps (int): Number of discrete points, at least 2.

    Returns:
        ndarray: steps x D array of the interpolation between q0 and q1.
    """
    if steps < 2:
        raise ValueError("parametric_lerp needs at least 2 steps, got {}.".format(steps))
    q0 = np.asarray(q0, dtype=float)
    q1 = np.asarray(q1, dtype=float)
    times = np.linspace(0.0, 1.0, steps)
    return q0 + np.outer(times, q1 - q0)


def resolution_lerp(q0, q1, resolution):
    """
    Interpolates between q0 and q1 so that consecutive points are at most resolution apart.
    """
    if resolution <= 0:
        raise ValueError("Interpolation resolution must be positive.")
    length = float(np.linalg.norm(np.asarray(q1, dtype=float) - np.asarray(q0, dtype=float)))
    steps = max(2, int(math.ceil(length / resolution)) + 1)
    return parametric_lerp(q0, q1, steps)
