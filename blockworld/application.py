"""The application: builds the texture atlas, the terrain and its meshes."""

import math
import sys

from blockworld.assets import get_root_path
from blockworld.blocks import BlockMap
from blockworld.chunk import CHUNK_WIDTH, Chunk, build_chunk_geometry
from blockworld.constants import CHUNK_RADIUS, CHUNK_SEED
from blockworld.options import (
    ApplicationOptions,
    HelpRequested,
    parse_application_options,
)
from blockworld.textures import TextureAtlas

ATLAS_SIZE = (1024, 1024)
MINECRAFT_TEXTURES = ("minecraft:block/", "/minecraft/assets/minecraft/textures/block")
EXTRA_TEXTURES = ("textures:block/", "/textures/block")

_MASK32 = 0xFFFFFFFF


def _lattice(seed, xi, zi):
    h = (xi * 374761393 + zi * 668265263 + seed * 2147483647) & _MASK32
    h = ((h ^ (h >> 13)) * 1274126177) & _MASK32
    h ^= h >> 16
    return h / _MASK32 * 2.0 - 1.0


def _smooth(t):
    return t * t * (3.0 - 2.0 * t)


def _value_noise(seed, x, z):
    x0, z0 = math.floor(x), math.floor(z)
    tx, tz = _smooth(x - x0), _smooth(z - z0)
    a = _lattice(seed, x0, z0)
    b = _lattice(seed, x0 + 1, z0)
    c = _lattice(seed, x0, z0 + 1)
    d = _lattice(seed, x0 + 1, z0 + 1)
    top = a + (b - a) * tx
    bottom = c + (d - c) * tx
    return top + (bottom - top) * tz


def _make_fractal_noise(seed):
    def fractal(octaves, x, z):
        total = 0.0
        amplitude = 1.0
        frequency = 1.0
        norm = 0.0
        for octave in range(octaves):
            total += amplitude * _value_noise(seed + octave, x * frequency, z * frequency)
            norm += amplitude
            amplitude *= 0.5
            frequency *= 2.0
        return total / norm if norm else 0.0

    return fractal


class Application:
    """Holds the options and the world the application builds."""

    def __init__(self, options=None, noise=None, atlas_output=None):
        self.options = options if options is not None else ApplicationOptions()
        self.noise = noise if noise is not None else _make_fractal_noise(CHUNK_SEED)
        self.atlas_output = atlas_output
        self.atlas = None
        self.block_map = None
        self.chunks = []

    def init(self):
        """Print the options the application runs with."""
        print(
            f"headless={int(self.options.headless)}\nthreads={self.options.threads}"
        )

    def run(self):
        """Build the atlas and every chunk with its mesh; return (chunk, geometry) pairs."""
        print(f"path: {get_root_path()}")

        atlas = TextureAtlas(ATLAS_SIZE)
        atlas.load_from_directory(*MINECRAFT_TEXTURES)
        atlas.load_from_directory(*EXTRA_TEXTURES)
        if self.atlas_output is not None:
            atlas.save(self.atlas_output)
        self.atlas = atlas

        self.block_map = BlockMap()
        chunks = []
        for x in range(-CHUNK_RADIUS, CHUNK_RADIUS + 1):
            for z in range(-CHUNK_RADIUS, CHUNK_RADIUS + 1):
                print(f"{x},{z}")
                chunk = Chunk((x * CHUNK_WIDTH, 0, z * CHUNK_WIDTH))
                chunk.generate(self.block_map, self.noise)
                chunks.append((chunk, build_chunk_geometry(chunk, self.block_map, atlas)))
        self.chunks = chunks
        return chunks


def main(argv=None):
    """Parse the command line, then initialise and run the application."""
    try:
        options = parse_application_options(argv)
    except HelpRequested:
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    application = Application(options)
    application.init()
    application.run()
    return 0