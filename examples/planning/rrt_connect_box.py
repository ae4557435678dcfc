from functools import partial

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection, PatchCollection
from matplotlib.patches import Rectangle

from rrt_planning import RRTConnect
from rrt_planning.geometric.state_space import R2
from rrt_planning.sampling import StateValidityChecker, UniformSampler


def plot_rrt_connect(found_path, trees, obstacles, limits):
    fig, ax = plt.subplots()
    for tree, color in zip(trees, ['green', 'blue']):
        graph = tree.as_graph()
        edges = [(graph.vs[e[0]]['value'], graph.vs[e[1]]['value']) for e in graph.get_edgelist()]
        ax.add_collection(LineCollection(edges, colors=color, linestyle='solid', alpha=.3, zorder=1))
    x, y = zip(*found_path)
    ax.plot(x, y, zorder=2, color='red', linewidth=3, linestyle='--', label='RRT-Connect path')
    ax.scatter(found_path[0][0], found_path[0][1], color='green', s=150, zorder=3)
    ax.scatter(found_path[-1][0], found_path[-1][1], color='blue', s=150, zorder=3)
    ax.add_collection(PatchCollection(obstacles, alpha=0.4))
    ax.set_xlim(limits[0])
    ax.set_ylim(limits[1])
    ax.set_aspect('equal')
    ax.set_title('Dual RRT-Connect')
    ax.legend()
    plt.show()


def box_collision(sample, coordinates=[[-1, -1], [1, 1]]):
    x_inside = coordinates[0][0] < sample[0] < coordinates[1][0]
    y_inside = coordinates[0][1] < sample[1] < coordinates[1][1]
    return not (x_inside and y_inside)


if __name__ == "__main__":

    #########################
    # State space selection #
    #########################
    r2_space = R2(limits=[['x', (-2, 2)], ['y', (-2, 2)]], sampler=UniformSampler())

    ##############################
    # State Validity Formulation #
    ##############################
    col_fn = partial(box_collision, coordinates=[[-1, -1], [1, 1]])
    svc = StateValidityChecker(self_col_func=None, col_func=col_fn, validity_funcs=None)

    ##############################################
    # Build the planner and call the plan method #
    ##############################################
    planner = RRTConnect(svc.validate, r2_space.sample, params={'step_length': .2, 'iters': 1000, 'log_level': 'debug'})
    path = planner.plan(np.array([-1.2, 0.0]), np.array([1.2, 0.0]))
    print(path)

    plot_rrt_connect(path, [planner.start_tree, planner.goal_tree], [Rectangle((-1, -1), 2, 2)], r2_space.get_bounds())
