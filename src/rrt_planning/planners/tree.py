from collections import namedtuple
from enum import Enum

import igraph as ig

from rrt_planning.local.evaluation import subdivision_evaluate
from rrt_planning.local.interpolation import resolution_lerp
from rrt_planning.local.neighbors import NearestNeighbors
from rrt_planning.planners.utils import as_config, steer

__all__ = ['Node', 'Tree', 'ExtendStatus', 'ExtendResult']


class ExtendStatus(Enum):
    REACHED = 'reached'
    ADVANCED = 'advanced'
    TRAPPED = 'trapped'


class ExtendResult(namedtuple('ExtendResult', ['status', 'index', 'distance'])):
    """
    Outcome of a single extension.

    Attributes:
        status (ExtendStatus): REACHED when the new node sits exactly on the target, ADVANCED when it stopped
            a full step short of it, TRAPPED when the candidate was not free.
        index (int): Index of the appended node, None when trapped.
        distance (float): Distance from the new node to the target. When trapped, the distance from the
            source node to the target.
    """
    __slots__ = ()

    @property
    def advanced(self):
        return self.status is not ExtendStatus.TRAPPED

    @property
    def reached_target(self):
        return self.status is ExtendStatus.REACHED


class Node():

    __slots__ = ('value', 'parent')

    def __init__(self, value, parent=None):
        self.value = value
        self.parent = parent

    def __repr__(self):
        return "Node(value={}, parent={})".format(list(self.value), self.parent)


class Tree():
    """
    Append-only tree of configurations. Each node refers to its parent by index, and the parent index is
    always lower than the node's own, so following parents always ends at the root (index 0).

    Args:
        name (str): Which endpoint the tree is rooted at, i.e. 'start' or 'goal'.
        dim (int): Dimension of the configurations.
        nearest (str, optional): Nearest neighbor model, "linear" or "KDTree". Defaults to "linear".
        model_kwargs (dict, optional): Keyword args for the KDTree. Defaults to None.
        refit_threshold (int, optional): KDTree refit interval in appended nodes. Defaults to 32.
    """

    def __init__(self, name, dim, nearest="linear", model_kwargs=None, refit_threshold=32):
        self.name = name
        self.dim = dim
        self.vertices = []
        self.nn = NearestNeighbors(dim, model_type=nearest, refit_threshold=refit_threshold,
                                   model_kwargs=model_kwargs)

    def __len__(self):
        return len(self.vertices)

    def __getitem__(self, index):
        return self.vertices[index]

    @property
    def values(self):
        return self.nn.X

    def add_node(self, value, parent=None):
        """
        Appends a node. Free space and step length are the caller's responsibility.

        Args:
            value (array-like): The configuration.
            parent (int, optional): Index of the parent node. Only the root may omit it.

        Returns:
            int: Index of the new node.
        """
        q = as_config(value, self.dim)
        index = len(self.vertices)
        if parent is None:
            if index != 0:
                raise ValueError("Only the root node of tree '{}' may be added without a parent.".format(self.name))
        elif not 0 <= parent < index:
            raise ValueError("Parent index {} is invalid for new node {} of tree '{}'.".format(parent, index, self.name))
        self.vertices.append(Node(q, parent))
        self.nn.append(q)
        return index

    def nearest(self, target):
        """
        Index of the node closest to target in Euclidean distance. Ties go to the lowest index.
        """
        return self.nn.nearest(as_config(target, self.dim))

    def extend_toward(self, from_index, target, step_length, is_free, collision_step=None):
        """
        Tries to add one node stepping from node from_index toward target.

        The candidate is target itself when it lies within step_length, otherwise the point step_length away
        in the direction of target. By default is_free is only called on the candidate. When collision_step
        is given, points along the segment from the source node are checked as well, at most collision_step
        apart.

        Args:
            from_index (int): Index of the node to extend from.
            target (array-like): Configuration to extend toward.
            step_length (float): Maximum extension length, positive.
            is_free (func): Free space predicate.
            collision_step (float, optional): Segment checking resolution. Defaults to None.

        Returns:
            ExtendResult: The outcome.
        """
        if step_length <= 0:
            raise ValueError("step_length must be positive, got {}.".format(step_length))
        q_target = as_config(target, self.dim)
        q_from = self.vertices[from_index].value
        q_new, dist = steer(q_from, q_target, step_length)
        if collision_step is None:
            free = is_free(q_new)
        else:
            local_path = resolution_lerp(q_from, q_new, collision_step)[1:]
            local_path[-1] = q_new
            free = subdivision_evaluate(is_free, local_path)
        if not free:
            return ExtendResult(ExtendStatus.TRAPPED, None, dist)
        new_index = self.add_node(q_new, parent=from_index)
        if dist <= step_length:
            return ExtendResult(ExtendStatus.REACHED, new_index, 0.0)
        return ExtendResult(ExtendStatus.ADVANCED, new_index, dist - step_length)

    def extend(self, target, step_length, is_free, collision_step=None):
        return self.extend_toward(self.nearest(target), target, step_length, is_free, collision_step)

    def connect(self, target, step_length, is_free, collision_step=None):
        """
        Extends toward target until it is reached or an extension is trapped.
        """
        while True:
            result = self.extend(target, step_length, is_free, collision_step)
            if result.status is not ExtendStatus.ADVANCED:
                return result

    def path_to_root(self, index):
        """
        Configurations from node index up to the root, both included.
        """
        path = []
        cur = index
        while cur is not None:
            node = self.vertices[cur]
            path.append(node.value)
            cur = node.parent
        return path

    def as_graph(self):
        """
        Exports the tree as a directed igraph Graph with edges from parent to child. Vertex ids match node
        indices and each vertex carries its configuration in the 'value' attribute.
        """
        graph = ig.Graph(directed=True)
        graph['name'] = self.name
        graph.add_vertices(len(self.vertices))
        if len(self.vertices) > 0:
            graph.vs['value'] = [list(node.value) for node in self.vertices]
        graph.add_edges([(node.parent, idx) for idx, node in enumerate(self.vertices) if node.parent is not None])
        return graph
