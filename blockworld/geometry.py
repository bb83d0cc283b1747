"""Vertex layout, buffer geometry and box/quad mesh builders."""

import math
from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np


class GLType(IntEnum):
    """OpenGL data and uniform type identifiers."""

    UNKNOWN = 0
    BYTE = 0x1400
    UNSIGNED_BYTE = 0x1401
    SHORT = 0x1402
    UNSIGNED_SHORT = 0x1403
    INT = 0x1404
    UNSIGNED_INT = 0x1405
    FLOAT = 0x1406
    DOUBLE = 0x140A
    HALF_FLOAT = 0x140B
    FLOAT_VEC2 = 0x8B50
    FLOAT_VEC3 = 0x8B51
    FLOAT_VEC4 = 0x8B52
    FLOAT_MAT4 = 0x8B5C
    SAMPLER_2D = 0x8B5E

    @classmethod
    def from_gl_enum(cls, value):
        """Map a raw uniform/attribute type to a known type, or ``UNKNOWN``."""
        if value in _SHADER_VARIABLE_TYPES:
            return cls(value)
        return cls.UNKNOWN


_SHADER_VARIABLE_TYPES = frozenset(
    {
        GLType.SAMPLER_2D,
        GLType.FLOAT_MAT4,
        GLType.FLOAT_VEC2,
        GLType.FLOAT_VEC3,
        GLType.FLOAT_VEC4,
        GLType.INT,
        GLType.FLOAT,
    }
)

_TYPE_SIZES = {
    GLType.BYTE: 1,
    GLType.UNSIGNED_BYTE: 1,
    GLType.SHORT: 2,
    GLType.UNSIGNED_SHORT: 2,
    GLType.INT: 4,
    GLType.UNSIGNED_INT: 4,
    GLType.HALF_FLOAT: 2,
    GLType.FLOAT: 4,
    GLType.DOUBLE: 8,
}


def sizeof_gl_type(gl_type):
    """Return the size in bytes of one component of ``gl_type`` (0 if unknown)."""
    return _TYPE_SIZES.get(gl_type, 0)


@dataclass(frozen=True)
class Vertex:
    pos: tuple = (0.0, 0.0, 0.0)
    normal: tuple = (0.0, 0.0, 0.0)
    uv: tuple = (0.0, 0.0)


@dataclass(frozen=True)
class BufferAttribute:
    type: GLType = GLType.FLOAT
    count: int = 0


VERTEX_ATTRIBUTES = (
    BufferAttribute(GLType.FLOAT, 3),  # position
    BufferAttribute(GLType.FLOAT, 3),  # normal
    BufferAttribute(GLType.FLOAT, 2),  # uv
)


@dataclass
class BufferGeometry:
    """A list of vertices, optionally indexed, with their attribute layout."""

    is_indexed: bool = False
    attributes: list = field(default_factory=lambda: list(VERTEX_ATTRIBUTES))
    vertices: list = field(default_factory=list)
    elements: list = field(default_factory=list)

    def stride(self):
        """Bytes occupied by one vertex according to ``attributes``."""
        return sum(sizeof_gl_type(a.type) * a.count for a in self.attributes)

    def vertex_data(self):
        """Interleaved position/normal/uv data as a float32 array of shape (n, 8)."""
        rows = [(*v.pos, *v.normal, *v.uv) for v in self.vertices]
        return np.array(rows, dtype=np.float32).reshape(-1, 8)

    def element_data(self):
        """Element indices as a uint32 array."""
        return np.array(self.elements, dtype=np.uint32)


_ZERO_UV = (0.0, 0.0, 0.0, 0.0)


@dataclass
class BoxOptions:
    """Box corners and the uv rectangle of each face; a zero rectangle omits the face."""

    p1: tuple = (0.0, 0.0, 0.0)
    p2: tuple = (1.0, 1.0, 1.0)
    xp: tuple = _ZERO_UV
    xn: tuple = _ZERO_UV
    yp: tuple = _ZERO_UV
    yn: tuple = _ZERO_UV
    zp: tuple = _ZERO_UV
    zn: tuple = _ZERO_UV


def _normalize(vector):
    length = float(np.linalg.norm(vector))
    if length == 0.0 or math.isnan(length):
        return np.full(3, math.nan)
    return vector / length


def _triangle_normal(p1, p2, p3):
    p1, p2, p3 = (np.asarray(p, dtype=float) for p in (p1, p2, p3))
    return _normalize(_normalize(np.cross(p1 - p2, p1 - p3)))


def add_quad(geometry, vertices, uv):
    """Append a quad (two triangles) with a flat normal and uv rectangle."""
    v1, v2, v3, v4 = (tuple(float(c) for c in v) for v in vertices)
    u_min, v_min, u_max, v_max = (float(c) for c in uv)
    normal = tuple(float(c) for c in _triangle_normal(v1, v2, v3))

    a = Vertex(v1, normal, (u_min, v_min))
    b = Vertex(v2, normal, (u_min, v_max))
    c = Vertex(v3, normal, (u_max, v_max))
    d = Vertex(v4, normal, (u_max, v_min))

    if geometry.is_indexed:
        base = len(geometry.vertices)
        geometry.vertices.extend((a, b, c, d))
        geometry.elements.extend(
            (base, base + 1, base + 2, base + 2, base + 3, base)
        )
    else:
        geometry.vertices.extend((a, b, c, c, d, a))


def add_cube(geometry, options):
    """Append the faces of an axis-aligned box that have a non-zero uv rectangle."""
    p1 = tuple(float(c) for c in options.p1)
    p2 = tuple(float(c) for c in options.p2)

    a = (p1[0], p2[1], p2[2])
    b = (p1[0], p1[1], p2[2])
    c = (p2[0], p1[1], p2[2])
    d = p2
    e = (p2[0], p2[1], p1[2])
    f = (p1[0], p2[1], p1[2])
    g = p1
    h = (p2[0], p1[1], p1[2])

    faces = (
        (options.xp, (d, c, h, e)),  # right
        (options.xn, (f, g, b, a)),  # left
        (options.yp, (f, a, d, e)),  # top
        (options.yn, (b, g, h, c)),  # bottom
        (options.zp, (a, b, c, d)),  # front
        (options.zn, (e, h, g, f)),  # back
    )
    for uv, corners in faces:
        if any(float(component) != 0.0 for component in uv):
            add_quad(geometry, corners, uv)