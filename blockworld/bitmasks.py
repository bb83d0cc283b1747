"""Packing of per-vertex colour, light level and rotation into bit fields."""

import sys
from dataclasses import dataclass

# 16-bit masks
MASK_TEXTURE_ID = 0b1111_1111_1111_0000
MASK_FACE_NORMAL = 0b0000_0000_0000_1110
MASK_BIOME_BLEND = 0b0000_0000_0000_0001

# 32-bit masks
MASK_RGB = 0b1111_1111_1111_1111_1111_1111_0000_0000
MASK_LIGHT_LEVEL = 0b0000_0000_0000_0000_0000_0000_1111_0000
MASK_ROTATION = 0b0000_0000_0000_0000_0000_0000_0000_1100


@dataclass(frozen=True)
class VertexInfo:
    rgb: int
    light_level: int
    rotation: int


def pack_vertex_info(rgb, light_level, rotation):
    """Pack colour, light level and rotation into one 32-bit value."""
    return (
        ((rgb << 8) & MASK_RGB)
        | ((light_level << 4) & MASK_LIGHT_LEVEL)
        | ((rotation << 2) & MASK_ROTATION)
    )


def unpack_vertex_info(value):
    """Split a packed 32-bit value back into its fields."""
    return VertexInfo(
        rgb=(value & MASK_RGB) >> 8,
        light_level=(value & MASK_LIGHT_LEVEL) >> 4,
        rotation=(value & MASK_ROTATION) >> 2,
    )


def main(argv=None):
    """Show a colour packed together with a light level and rotation."""
    color = 0xF0000F
    print(f"thecolor={color:x}")
    info = unpack_vertex_info(pack_vertex_info(color, 13, 3))
    sys.stdout.write(f"{info.rgb:x},{info.light_level:x},{info.rotation:x}\n")
    return 0