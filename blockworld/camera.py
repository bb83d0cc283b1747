"""A first-person perspective camera.

Matrices are stored row-major in the usual mathematical convention, so a
column vector ``v`` is transformed with ``matrix @ v``.
"""

import math
from dataclasses import dataclass, replace

import numpy as np

PITCH_LIMIT = 89.9999
WORLD_UP = (0.0, 1.0, 0.0)


@dataclass
class CameraOptions:
    """Position, orientation (degrees) and projection settings.

    Yaw 0 looks along +x, 90 along +z, 180 along -x and 270 along -z.
    """

    pos: tuple = (0.0, 0.0, 0.0)
    yaw: float = 0.0
    pitch: float = 0.0
    fov: float = 45.0
    near: float = 0.1
    far: float = 1000.0
    aspect: float = 1920.0 / 1080.0


def _normalize(vector):
    return vector / np.linalg.norm(vector)


def _perspective(fov_radians, aspect, near, far):
    focal = 1.0 / math.tan(fov_radians / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = focal / aspect
    matrix[1, 1] = focal
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def _look_at(eye, center, up):
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    matrix = np.identity(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -np.dot(s, eye)
    matrix[1, 3] = -np.dot(u, eye)
    matrix[2, 3] = np.dot(f, eye)
    return matrix


class Camera:
    """Holds camera options and the view/projection matrices derived from them.

    The matrices stay zero until :meth:`configure` is first called.
    """

    def __init__(self, options=None):
        self._options = replace(options) if options is not None else CameraOptions()
        self._view = np.zeros((4, 4))
        self._projection = np.zeros((4, 4))
        self._forward = np.zeros(3)

    @property
    def options(self):
        return replace(self._options)

    @property
    def position(self):
        return tuple(self._options.pos)

    @property
    def forward(self):
        return self._forward.copy()

    @property
    def view_matrix(self):
        return self._view.copy()

    @property
    def projection_matrix(self):
        return self._projection.copy()

    def configure(self, options):
        """Apply new options, clamp pitch, wrap yaw and recompute the matrices."""
        options = replace(options, pos=tuple(float(c) for c in options.pos))
        options.pitch = min(max(options.pitch, -PITCH_LIMIT), PITCH_LIMIT)
        if options.yaw > 360:
            options.yaw = 0.0
        if options.yaw < 0:
            options.yaw = 360.0
        self._options = options
        self._calculate_matrices()

    def _calculate_matrices(self):
        opts = self._options
        yaw = math.radians(opts.yaw)
        pitch = math.radians(opts.pitch)

        self._forward = _normalize(np.array([math.cos(yaw), 0.0, math.sin(yaw)]))
        self._projection = _perspective(
            math.radians(opts.fov), opts.aspect, opts.near, opts.far
        )

        look_at = _normalize(
            np.array(
                [
                    math.cos(pitch) * math.cos(yaw),
                    math.sin(pitch),
                    math.sin(yaw) * math.cos(pitch),
                ]
            )
        )
        local_right = np.cross(look_at, np.array(WORLD_UP))
        local_up = np.cross(local_right, look_at)
        eye = np.array(opts.pos, dtype=float)
        self._view = _look_at(eye, eye + look_at, local_up)