"""Scene geometry and view controls for displaying the gas box."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

OPENGL_MAJOR_VERSION = 3
OPENGL_MINOR_VERSION = 3
N_DIMENSIONS = 3
WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 1024
WINDOW_TITLE = "gas experiment"
POINT_SIZE = 2.0
LINE_WIDTH = 2.5
N_LINES_IN_CIRCLE = 32

SCALE = 0.9
ZOOM_STEP = 1.05
RADIUS_STEP = 1.05
DEFAULT_SCALE = 0.5
DEFAULT_RADIUS = 0.1

_F32 = np.float32


def box_vertices() -> np.ndarray:
    """Line-segment endpoints of the front, right, left and back faces of the box."""
    s = SCALE
    edges = [
        # front face
        (-s, -s, s), (s, -s, s),
        (-s, -s, s), (-s, s, s),
        (s, s, s), (s, -s, s),
        (s, s, s), (-s, s, s),
        # right face
        (s, -s, s), (s, s, s),
        (s, s, s), (s, s, -s),
        (s, s, -s), (s, -s, -s),
        (s, -s, -s), (s, -s, s),
        # left face
        (-s, -s, s), (-s, s, s),
        (-s, s, s), (-s, s, -s),
        (-s, s, -s), (-s, -s, -s),
        (-s, -s, -s), (-s, -s, s),
        # back face
        (-s, s, -s), (s, s, -s),
        (s, s, -s), (s, -s, -s),
        (s, -s, -s), (-s, -s, -s),
        (-s, -s, -s), (-s, s, -s),
    ]
    return np.array(edges, dtype=_F32)


def hole_circle(radius: float) -> np.ndarray:
    """Line-segment endpoints outlining the hole of *radius* in the left wall."""
    step = _F32(2.0 * math.pi / N_LINES_IN_CIRCLE)
    start = (-SCALE, 0.0, radius)
    points = [start]
    for i in range(1, N_LINES_IN_CIRCLE):
        angle = float(step * _F32(i))
        point = (-SCALE, math.sin(angle) * radius, math.cos(angle) * radius)
        points.extend((point, point))
    points.append(start)
    return np.array(points, dtype=_F32)


def scene_lines(radius: float) -> np.ndarray:
    """All line-segment endpoints of the scene: box edges then the hole outline."""
    return np.concatenate((box_vertices(), hole_circle(radius)))


def controls_text() -> str:
    """The help text listing the keyboard controls."""
    return (
        "Quit:      Q\n"
        "Rotate +X: Z\n"
        "Rotate +Y: X\n"
        "Rotate +Z: C\n"
        "Rotate -X: A\n"
        "Rotate -Y: S\n"
        "Rotate -Z: D\n"
        "Zoom in:   +\n"
        "Zoom out:  -\n"
        "Radius+:   1\n"
        "Radius-:   2\n"
    )


def _axis_rotation(degrees: int, axis: int) -> np.ndarray:
    theta = math.radians(degrees)
    c, s = math.cos(theta), math.sin(theta)
    i, j = [k for k in range(3) if k != axis]
    matrix = np.eye(4)
    matrix[i, i] = c
    matrix[j, j] = c
    if axis == 1:
        matrix[i, j] = s
        matrix[j, i] = -s
    else:
        matrix[i, j] = -s
        matrix[j, i] = s
    return matrix


@dataclass
class ViewState:
    """Rotation angles in degrees, zoom, hole radius and the quit request."""

    angle_x: int = 0
    angle_y: int = 0
    angle_z: int = 0
    scale: float = DEFAULT_SCALE
    radius: float = DEFAULT_RADIUS
    should_close: bool = False

    def handle_key(self, key: str) -> bool:
        """Apply the control bound to *key*; return False for unbound keys."""
        key = key.lower()
        if key == "q":
            self.should_close = True
        elif key == "z":
            self.angle_x += 1
        elif key == "x":
            self.angle_y += 1
        elif key == "c":
            self.angle_z += 1
        elif key == "a":
            self.angle_x -= 1
        elif key == "s":
            self.angle_y -= 1
        elif key == "d":
            self.angle_z -= 1
        elif key == "=":
            self.scale *= ZOOM_STEP
        elif key == "-":
            self.scale /= ZOOM_STEP
        elif key == "1":
            self.radius *= RADIUS_STEP
        elif key == "2":
            self.radius /= RADIUS_STEP
        else:
            return False
        return True

    def rotation_matrix(self) -> np.ndarray:
        """The 4x4 rotation ``Rx @ Ry @ Rz`` for the current angles."""
        matrix = (
            _axis_rotation(self.angle_x, 0)
            @ _axis_rotation(self.angle_y, 1)
            @ _axis_rotation(self.angle_z, 2)
        )
        return matrix.astype(_F32)