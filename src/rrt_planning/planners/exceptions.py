"""
Failure modes reported by the planners. All of them are terminal; nothing is retried internally.
"""

__all__ = ['PlanningException', 'EndpointInCollision', 'IterationLimitExceeded', 'DimensionMismatch']


class PlanningException(Exception):
    pass


class EndpointInCollision(PlanningException):
    """
    The start or goal configuration is rejected by the free space predicate.

    Attributes:
        endpoint (str): Either 'start' or 'goal'.
        config (list): The offending configuration.
    """

    def __init__(self, endpoint, config):
        self.endpoint = endpoint
        self.config = list(config)
        super().__init__("{} configuration {} is in collision.".format(endpoint.capitalize(), self.config))


class IterationLimitExceeded(PlanningException):
    """
    The iteration budget ran out before the two trees met. This does not mean no path exists.
    """

    def __init__(self, iterations, tree_sizes=None):
        self.iterations = iterations
        self.tree_sizes = tree_sizes
        msg = "No path found after {} iterations".format(iterations)
        if tree_sizes is not None:
            msg += " (tree sizes: {})".format(tree_sizes)
        super().__init__(msg + ".")


class DimensionMismatch(PlanningException, ValueError):

    def __init__(self, expected, actual, what="configuration"):
        self.expected = expected
        self.actual = actual
        super().__init__("Expected a {} of dimension {}, got dimension {}.".format(what, expected, actual))
