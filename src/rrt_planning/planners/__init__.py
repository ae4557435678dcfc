from rrt_planning.planners.exceptions import PlanningException, EndpointInCollision, IterationLimitExceeded, DimensionMismatch
from rrt_planning.planners.tree import Node, Tree, ExtendStatus, ExtendResult
from rrt_planning.planners.rrt_connect import RRTConnect, dual_rrt_connect
