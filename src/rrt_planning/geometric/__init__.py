from rrt_planning.geometric.state_space import RealVectorSpace, R2, R3
from rrt_planning.geometric.obstacles import Box, Ball, obstacle_collision_fn

__all__ = ['RealVectorSpace', 'R2', 'R3', 'Box', 'Ball', 'obstacle_collision_fn']
