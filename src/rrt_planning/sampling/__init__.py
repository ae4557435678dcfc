from rrt_planning.sampling.samplers import UniformSampler
from rrt_planning.sampling.state_validity import StateValidityChecker

__all__ = ['UniformSampler', 'StateValidityChecker']
