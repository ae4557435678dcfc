import numpy as np

from rrt_planning.planners.exceptions import DimensionMismatch


def as_config(value, dim=None, what="configuration"):
    """
    Converts an array-like into a 1-D float configuration, checking its dimension.

    Args:
        value (array-like): The configuration.
        dim (int, optional): The required dimension. Not checked if None.
        what (str): Name used in the error message.

    Returns:
        ndarray: 1-D float array.

    Raises:
        ValueError: If the configuration is not 1-D or holds non-finite values.
        DimensionMismatch: If the configuration has the wrong length.
    """
    q = np.asarray(value, dtype=float)
    if q.ndim != 1:
        raise ValueError("A {} must be a 1-D sequence of numbers, got an array of shape {}.".format(what, q.shape))
    if dim is not None and q.shape[0] != dim:
        raise DimensionMismatch(dim, q.shape[0], what=what)
    if not np.all(np.isfinite(q)):
        raise ValueError("A {} must only hold finite values, got {}.".format(what, q.tolist()))
    return q


def steer(q_from, q_target, step_length):
    """
    Moves from q_from toward q_target by at most step_length.

    Returns:
        ndarray, float: The candidate configuration and the distance from q_from to q_target. If the distance
        is within step_length the candidate is q_target itself.
    """
    diff = q_target - q_from
    dist = float(np.linalg.norm(diff))
    if dist <= step_length:
        return np.array(q_target, dtype=float), dist
    return q_from + diff * (step_length / dist), dist
