"""Chunks of blocks, terrain generation, chunk meshes and the world."""

import itertools
import math

from blockworld.blocks import (
    AIR,
    BEDROCK,
    BIRCH_PLANKS,
    DIRT,
    GRASS_BLOCK,
    STONE,
    BlockMap,
    BlockType,
)
from blockworld.constants import (
    CHUNK_HEIGHT_VARIANCE,
    CHUNK_OCTAVES,
    CHUNK_SMOOTHING,
    CHUNK_WATER_LINE,
)
from blockworld.geometry import BoxOptions, BufferGeometry, add_cube
from blockworld.mathutil import map_range

CHUNK_WIDTH = 16
CHUNK_HEIGHT = 256

_ZERO_UV = (0.0, 0.0, 0.0, 0.0)
_chunk_ids = itertools.count(1)

_NEIGHBOURS = (
    ("xp", (1, 0, 0)),
    ("xn", (-1, 0, 0)),
    ("yp", (0, 1, 0)),
    ("yn", (0, -1, 0)),
    ("zp", (0, 0, 1)),
    ("zn", (0, 0, -1)),
)


class Chunk:
    """A column of CHUNK_WIDTH x CHUNK_HEIGHT x CHUNK_WIDTH block ids."""

    def __init__(self, pos=(0.0, 0.0, 0.0)):
        self.id = next(_chunk_ids)
        self._pos = tuple(float(c) for c in pos)
        self.width = CHUNK_WIDTH
        self.height = CHUNK_HEIGHT
        self._data = []

    @property
    def pos(self):
        return self._pos

    @property
    def data(self):
        return tuple(self._data)

    @property
    def size(self):
        return self.width * self.width * self.height

    def generate(self, block_map, noise):
        """Fill the chunk with terrain.

        ``noise(octaves, x, z)`` returns fractal noise in ``[-1, 1]`` that sets
        the surface height of each column.
        """
        bedrock = block_map.get_block_id(BEDROCK)
        stone = block_map.get_block_id(STONE)
        dirt = block_map.get_block_id(DIRT)
        grass = block_map.get_block_id(GRASS_BLOCK)
        birch = block_map.get_block_id(BIRCH_PLANKS)
        air = block_map.get_block_id(AIR)

        data = [0] * self.size
        pos_x, _, pos_z = self._pos
        for x in range(self.width):
            for z in range(self.width):
                value = noise(
                    CHUNK_OCTAVES,
                    (pos_x + x) / CHUNK_SMOOTHING,
                    (pos_z + z) / CHUNK_SMOOTHING,
                )
                rando = map_range(value, -1, 1, 0, 1)
                max_height = CHUNK_WATER_LINE + int(
                    math.floor(CHUNK_HEIGHT_VARIANCE * rando)
                )
                surface = birch if x == 0 and z == 0 else grass
                for y in range(self.height):
                    if y == 0:
                        block_id = bedrock
                    elif y < max_height - 3:
                        block_id = stone
                    elif y < max_height - 2:
                        block_id = dirt
                    elif y < max_height - 1:
                        block_id = surface
                    else:
                        block_id = air
                    data[self.get_index_from_location((x, y, z))] = block_id
        self._data = data

    def get_id_from_index(self, index):
        """Return the block id stored at ``index``, or -1 when out of range."""
        if 0 <= index < len(self._data):
            return self._data[index]
        return -1

    def get_id_from_location(self, loc):
        return self.get_id_from_index(self.get_index_from_location(loc))

    def get_location_from_index(self, index):
        """Return the local ``(x, y, z)`` of a data index."""
        layer = self.width * self.width
        y, remainder = divmod(index, layer)
        z, x = divmod(remainder, self.width)
        return (x, y, z)

    def get_index_from_location(self, loc):
        """Return the data index of a local location, or -1 when outside."""
        x, y, z = (int(c) for c in loc)
        if (
            x < 0
            or y < 0
            or z < 0
            or x >= self.width
            or z >= self.width
            or y >= self.height
        ):
            return -1
        return y * self.width * self.width + z * self.width + x


def _face_uv(chunk, block_map, atlas, pos, offset, face):
    neighbour = tuple(p + o for p, o in zip(pos, offset))
    adjacent = block_map.get_block(chunk.get_id_from_location(neighbour))
    if adjacent is None or adjacent.is_transparent:
        rect = atlas.get_rect_by_name(face.texture)
        return tuple(rect.uv) if rect is not None else _ZERO_UV
    return _ZERO_UV


def add_block_geometry(geometry, chunk, block_map, atlas, pos, block):
    """Append the faces of ``block`` at ``pos`` that are not hidden by a neighbour."""
    if block.type == BlockType.NULL:
        return
    pos = tuple(int(c) for c in pos)
    uvs = {
        side: _face_uv(chunk, block_map, atlas, pos, offset, getattr(block, side))
        for side, offset in _NEIGHBOURS
    }
    add_cube(
        geometry,
        BoxOptions(p1=pos, p2=tuple(c + 1 for c in pos), **uvs),
    )


def build_chunk_geometry(chunk, block_map, atlas):
    """Build the non-indexed mesh of every visible block face in ``chunk``."""
    geometry = BufferGeometry(is_indexed=False)
    for index, block_id in enumerate(chunk.data):
        block = block_map.get_block(block_id)
        if block is not None:
            add_block_geometry(
                geometry,
                chunk,
                block_map,
                atlas,
                chunk.get_location_from_index(index),
                block,
            )
    return geometry


class World:
    """A set of chunks addressed by world coordinates."""

    def __init__(self, block_map=None, chunks=()):
        self.block_map = block_map if block_map is not None else BlockMap()
        self._chunks = list(chunks)

    @property
    def chunks(self):
        return tuple(self._chunks)

    def add_chunk(self, chunk):
        self._chunks.append(chunk)

    def get_block(self, loc):
        """Return the block at world location ``loc``, or None if no chunk holds it."""
        for chunk in self._chunks:
            local = tuple(
                int(math.floor(c - p)) for c, p in zip(loc, chunk.pos)
            )
            index = chunk.get_index_from_location(local)
            if index >= 0:
                return self.block_map.get_block(chunk.get_id_from_index(index))
        return None