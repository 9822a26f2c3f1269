import math
import random
from collections import namedtuple

ATTRACTOR_PADDING = 300.0
GRID_PADDING = 200.0
ORBIT_RADIUS = 30.0
COLOR_DISTANCE = 100.0

# radius = MIN_RADIUS + min(RADIUS_SCALE / dist, MAX_GROWTH)
MIN_RADIUS = 2.0
RADIUS_SCALE = 1000.0
MAX_GROWTH = 50.0

WHITE = (1.0, 1.0, 1.0, 1.0)

DrawCommand = namedtuple("DrawCommand", "x y radius color")


class Rect:
    """Axis-aligned rectangle, origin at the window center, y pointing up."""

    def __init__(self, left, right, bottom, top):
        self.left = left
        self.right = right
        self.bottom = bottom
        self.top = top

    @classmethod
    def from_size(cls, width, height):
        return cls(-width / 2, width / 2, -height / 2, height / 2)

    def pad(self, amount):
        return Rect(self.left + amount, self.right - amount,
                    self.bottom + amount, self.top - amount)

    @property
    def width(self):
        return self.right - self.left

    @property
    def height(self):
        return self.top - self.bottom

    def __repr__(self):
        return f"Rect({self.left}, {self.right}, {self.bottom}, {self.top})"


def range_map(value, in_min, in_max, out_min, out_max):
    return out_min + (value - in_min) / (in_max - in_min) * (out_max - out_min)


def angle_between(ax, ay, bx, by):
    """Signed angle rotating (ax, ay) onto (bx, by), in (-pi, pi]."""
    return math.atan2(ax * by - ay * bx, ax * bx + ay * by)


def orbit_offset(cx, cy, tx, ty):
    # bearing is taken from the origin, not from the node
    bearing = angle_between(cx, cy, tx, ty)
    return cx + math.sin(bearing) * ORBIT_RADIUS, cy + math.cos(bearing) * ORBIT_RADIUS


class Point:
    def __init__(self, x, y, boundary: Rect):
        self.x = x
        self.y = y
        self.min_x = boundary.left
        self.max_x = boundary.right
        self.min_y = boundary.bottom
        self.max_y = boundary.top

    def update(self, elapsed: float):
        self.x = range_map(math.sin(elapsed / 1.4), -1.0, 1.0, self.min_x, self.max_x)
        self.y = range_map(math.sin(elapsed / 2.0), -1.0, 1.0, self.min_y, self.max_y)


class Node:
    def __init__(self, center, x, y, radius):
        self.center = center
        self.x = x
        self.y = y
        self.radius = radius
        self.color = WHITE

    def update(self, target: Point, rng: random.Random):
        cx, cy = self.center
        self.x, self.y = orbit_offset(cx, cy, target.x, target.y)

        dist = math.hypot(self.x - target.x, self.y - target.y)
        # dist == 0 clamps to MAX_GROWTH
        growth = RADIUS_SCALE / dist if dist else math.inf
        self.radius = MIN_RADIUS + min(growth, MAX_GROWTH)

        if dist < COLOR_DISTANCE:
            self.color = (rng.random(), rng.random(), rng.random(), 1.0)
        else:
            self.color = WHITE


def create_nodes(rows: int, cols: int, win: Rect, target: Point, radius: float):
    if rows < 2 or cols < 2:
        raise ValueError(f"grid needs at least 2 rows and 2 cols, got {rows}x{cols}")

    win_p = win.pad(GRID_PADDING)
    x_gap = win_p.width / (cols - 1)
    y_gap = win_p.height / (rows - 1)

    nodes = []
    for row in range(rows):
        for col in range(cols):
            # row walks x and col walks y
            x_center = win_p.left + row * x_gap
            y_center = win_p.bottom + col * y_gap
            x, y = orbit_offset(x_center, y_center, target.x, target.y)
            nodes.append(Node((x_center, y_center), x, y, radius))
    return nodes


def step(point: Point, nodes, elapsed: float, rng: random.Random):
    point.update(elapsed)
    for node in nodes:
        node.update(point, rng)


def draw_commands(nodes):
    return [DrawCommand(n.x, n.y, n.radius, n.color) for n in nodes]
