"""
Class for different sampling strategies.
"""
import random

__all__ = ['UniformSampler']


class UniformSampler():

    """
    Uniformly samples at random each dimension given the provided limits.

    Args:
        seed (int, optional): Seed for the sampler's own random number generator.
    """

    def __init__(self, seed=None):
        self.rng = random.Random(seed)

    def sample(self, dimension_limits):
        """
        Samples a random sample.

        Args:
            dimension_limits (list): (lower, upper) pair per dimension.

        Returns:
            list: Random sample.
        """
        return [self.rng.uniform(limit[0], limit[1]) for limit in dimension_limits]
