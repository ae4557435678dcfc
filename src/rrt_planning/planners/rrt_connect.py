import numpy as np

from rrt_planning.log import Logger
from rrt_planning.planners.exceptions import DimensionMismatch, EndpointInCollision, IterationLimitExceeded
from rrt_planning.planners.tree import ExtendStatus, Tree
from rrt_planning.planners.utils import as_config

__all__ = ['RRTConnect', 'dual_rrt_connect']


class RRTConnect():
    """
    Dual tree RRT-Connect. One tree grows from the start and one from the goal. Every round the growing tree
    extends a single step toward a random sample, then the other tree greedily connects toward the new node.
    The trees swap roles after every round that does not join them.

    Args:
        is_free (func): Free space predicate over configurations.
        sample (func): Returns a random configuration.
        params (dict, optional): Planner parameters:
            step_length (float): Extension length. Defaults to 0.1.
            iters (int): Maximum number of rounds. Defaults to 1000.
            nearest (str): "linear" or "KDTree". Defaults to "linear".
            refit_threshold (int): KDTree refit interval. Defaults to 32.
            leaf_size (int): KDTree leaf size. Defaults to 40.
            collision_step (float): If given, extensions are also checked along the segment at this
                resolution instead of only at their end. Defaults to None.
            log_level (str): Logger level. Defaults to 'info'.
        logger (Logger, optional): Logger to use instead of a new one.
    """

    def __init__(self, is_free, sample, params=None, logger=None):
        params = params if params is not None else {}
        self.is_free = is_free
        self.sample = sample
        self.step_length = params.get('step_length', .1)
        self.iters = params.get('iters', 1000)
        self.nearest = params.get('nearest', 'linear')
        self.refit_threshold = params.get('refit_threshold', 32)
        self.leaf_size = params.get('leaf_size', 40)
        self.collision_step = params.get('collision_step', None)
        if self.step_length <= 0:
            raise ValueError("step_length must be positive, got {}.".format(self.step_length))
        if self.iters < 0:
            raise ValueError("iters must be non-negative, got {}.".format(self.iters))
        if self.nearest not in ('linear', 'KDTree'):
            raise ValueError("nearest must be 'linear' or 'KDTree', got {}.".format(self.nearest))
        if self.collision_step is not None and self.collision_step <= 0:
            raise ValueError("collision_step must be positive, got {}.".format(self.collision_step))
        self.log = logger if logger is not None else Logger(name="RRTConnect", handlers=['logging'],
                                                            level=params.get('log_level', 'info'))
        self.log.info("step_length: {}, iters: {}, nearest: {}, collision_step: {}".format(
            self.step_length, self.iters, self.nearest, self.collision_step))
        self.start_tree = None
        self.goal_tree = None
        self.iterations = 0

    def plan(self, start_q, goal_q):
        """
        Searches for a free path from start_q to goal_q.

        Args:
            start_q (array-like): Starting configuration.
            goal_q (array-like): Goal configuration.

        Returns:
            list: Configurations from start_q to goal_q, each at most step_length from the next.

        Raises:
            DimensionMismatch: Start, goal or a sample disagree on dimension.
            EndpointInCollision: Start or goal is not free.
            IterationLimitExceeded: The trees did not meet within the iteration budget.
        """
        start_q = as_config(start_q, what="start configuration")
        goal_q = as_config(goal_q, len(start_q), what="goal configuration")
        if not self.is_free(start_q):
            raise EndpointInCollision('start', start_q)
        if not self.is_free(goal_q):
            raise EndpointInCollision('goal', goal_q)
        self.log.debug("Initializing trees...")
        self._initialize_trees(start_q, goal_q)
        self.iterations = 0
        if np.array_equal(start_q, goal_q):
            self.log.info("Start and goal are identical.")
            return [start_q.tolist()]

        growing, other = self.start_tree, self.goal_tree
        for _ in range(self.iters):
            self.iterations += 1
            q_rand = self._random_config()
            result = growing.extend(q_rand, self.step_length, self.is_free, self.collision_step)
            if result.status is not ExtendStatus.TRAPPED:
                q_new = growing[result.index].value
                self.log.debug("Tree '{}' extended to {}".format(growing.name, q_new))
                connection = other.connect(q_new, self.step_length, self.is_free, self.collision_step)
                if connection.status is ExtendStatus.REACHED:
                    path = self._extract_path(growing, result.index, other, connection.index)
                    self.log.info("Trees connected after {} iterations, path of {} configurations "
                                  "(tree sizes: start {}, goal {}).".format(
                                      self.iterations, len(path), len(self.start_tree), len(self.goal_tree)))
                    return path
            growing, other = other, growing

        self.log.info("Max iterations reached...no feasible plan.")
        raise IterationLimitExceeded(self.iters, {'start': len(self.start_tree), 'goal': len(self.goal_tree)})

    def reset_planner(self):
        self.start_tree = None
        self.goal_tree = None
        self.iterations = 0

    def _initialize_trees(self, start_q, goal_q):
        model_kwargs = {'leaf_size': self.leaf_size}
        self.start_tree = Tree('start', len(start_q), nearest=self.nearest, model_kwargs=model_kwargs,
                               refit_threshold=self.refit_threshold)
        self.goal_tree = Tree('goal', len(goal_q), nearest=self.nearest, model_kwargs=model_kwargs,
                              refit_threshold=self.refit_threshold)
        self.start_tree.add_node(start_q)
        self.goal_tree.add_node(goal_q)

    def _random_config(self):
        q_rand = self.sample()
        try:
            return as_config(q_rand, self.start_tree.dim, what="sampled configuration")
        except DimensionMismatch:
            self.log.err("Sampler produced {} for a {}-dimensional problem.".format(q_rand, self.start_tree.dim))
            raise

    def _extract_path(self, growing, new_index, other, reach_index):
        # the connecting node sits on the new node, so it is dropped from the other half
        path = list(reversed(growing.path_to_root(new_index))) + other.path_to_root(reach_index)[1:]
        if growing.name == 'goal':
            path.reverse()
        return [q.tolist() for q in path]


def dual_rrt_connect(start, goal, is_free, sample, step_length, max_iterations, **params):
    """
    Searches for a free path from start to goal with a dual tree RRT-Connect.

    Args:
        start (array-like): Starting configuration.
        goal (array-like): Goal configuration, same dimension as start.
        is_free (func): Free space predicate over configurations.
        sample (func): Returns a random configuration of the same dimension.
        step_length (float): Extension length, positive.
        max_iterations (int): Maximum number of rounds.
        **params: Further RRTConnect parameters (nearest, collision_step, log_level, ...).

    Returns:
        list: Configurations from start to goal.
    """
    params = dict(params, step_length=step_length, iters=max_iterations)
    return RRTConnect(is_free, sample, params=params).plan(start, goal)
