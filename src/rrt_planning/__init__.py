"""
Sampling based motion planning with a dual tree RRT-Connect.
"""
from rrt_planning.planners import (RRTConnect, dual_rrt_connect, Tree, Node, ExtendStatus, ExtendResult,
                                   PlanningException, EndpointInCollision, IterationLimitExceeded,
                                   DimensionMismatch)
from rrt_planning.log import Logger

__version__ = '0.1'
