from rrt_planning.local.neighbors import NearestNeighbors
from rrt_planning.local.interpolation import cumulative_distance, parametric_lerp, resolution_lerp
from rrt_planning.local.evaluation import SubdivisionPathIterator, subdivision_evaluate
