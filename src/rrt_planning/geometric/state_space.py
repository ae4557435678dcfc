from rrt_planning.sampling.samplers import UniformSampler

__all__ = ['RealVectorSpace', 'R2', 'R3']


class RealVectorSpace():
    """
    A bounded real vector space. Limits are given as a list of [name, (lower, upper)] pairs, one per dimension.

    Args:
        limits (list): Named limits per dimension.
        sampler (object, optional): Object with a sample(dimension_limits) method. Defaults to a UniformSampler.
    """

    def __init__(self, limits, sampler=None):
        if len(limits) == 0:
            raise ValueError("A state space needs at least one dimension.")
        for name, (lower, upper) in limits:
            if lower > upper:
                raise ValueError("Lower limit of '{}' is greater than its upper limit.".format(name))
        self.limits = limits
        self.sampler = sampler if sampler is not None else UniformSampler()

    @property
    def dimension(self):
        return len(self.limits)

    def get_bounds(self):
        return [limit[1] for limit in self.limits]

    def sample(self):
        return self.sampler.sample(self.get_bounds())

    def contains(self, q):
        if len(q) != self.dimension:
            return False
        return all(lower <= value <= upper for value, (lower, upper) in zip(q, self.get_bounds()))


class R2(RealVectorSpace):

    def __init__(self, limits=None, sampler=None):
        super().__init__([['x', (0, 10)], ['y', (0, 10)]] if limits is None else limits, sampler=sampler)


class R3(RealVectorSpace):

    def __init__(self, limits=None, sampler=None):
        super().__init__([['x', (0, 10)], ['y', (0, 10)], ['z', (0, 10)]] if limits is None else limits,
                         sampler=sampler)
