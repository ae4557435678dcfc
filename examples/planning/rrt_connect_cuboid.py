"""
Moves a small ball from one corner of a thin cuboid to the opposite corner, keeping clearance from the cuboid,
and plots the path in 3D.
"""
import matplotlib.pyplot as plt

from rrt_planning import dual_rrt_connect
from rrt_planning.geometric import Box, R3, obstacle_collision_fn
from rrt_planning.local.interpolation import cumulative_distance

BALL_RADIUS = 0.05
PREDICTION = 0.1


if __name__ == "__main__":
    cuboid = Box.from_center([0, 0, 0], [0.05, 0.25, 0.15])
    is_feasible = obstacle_collision_fn([cuboid], margin=BALL_RADIUS + PREDICTION)
    space = R3(limits=[['x', (-4, 4)], ['y', (-4, 4)], ['z', (-4, 4)]])

    start = [0.2, 0.2, 0.2]
    goal = [-0.2, -0.2, -0.2]
    path = dual_rrt_connect(start, goal, is_feasible, space.sample, 0.05, 1000)
    print("{} configurations, length {:.3f}".format(len(path), cumulative_distance(path)))

    fig = plt.figure()
    ax = fig.add_subplot(projection='3d')
    x, y, z = zip(*path)
    ax.plot(x, y, z, color='red', marker='o', markersize=3)
    lx, ly, lz = cuboid.lower
    ux, uy, uz = cuboid.upper
    ax.bar3d(lx, ly, lz, ux - lx, uy - ly, uz - lz, color='gray', alpha=0.4)
    ax.set_title('Ball around cuboid')
    plt.show()
