# blockworld

A voxel block world toolkit. It generates terrain chunks from a noise
function, packs block textures into one atlas image, builds cube geometry that
shows only the visible faces, and reads block-state and block-model JSON files.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Assets

Assets are read from the directory named by the `BLOCKWORLD_ASSETS_PATH`
environment variable. If it is not set, the `assets` directory next to the
running program is used (`blockworld.env.get_assets_path`). Asset paths are
given relative to that root and start with `/`:

- textures: `/textures/block` and `/minecraft/assets/minecraft/textures/block`
  (PNG files)
- block states: `/minecraft/blockstates` (JSON files)
- block models: `/minecraft/models/block` (JSON files)

## Command line

```
blockworld [--help] [--threads N] [--headless]
```

The command prints the options it runs with (`headless=0|1` and
`threads=N`), then the assets path. It loads both texture directories into a
1024×1024 atlas, generates the chunks around the origin with a built-in
fractal value noise, and builds the mesh of each chunk. `--threads` also
accepts `--threads=N` and defaults to the number of processors. Unknown
arguments are ignored. `--help` prints the option summary and exits with
status 1. A malformed option is reported on standard error and also gives
status 1.

```
blockworld-bitmasks
```

This packs the colour `f0000f`, light level 13 and rotation 3 into one 32-bit
vertex word with `blockworld.bitmasks.pack_vertex_info`. It unpacks the word
with `unpack_vertex_info` and prints the fields in hexadecimal.

## Library use

Build a chunk and its mesh:

```python
from blockworld.blocks import BlockMap
from blockworld.chunk import Chunk, build_chunk_geometry
from blockworld.textures import TextureAtlas

atlas = TextureAtlas((1024, 1024))
atlas.load_from_directory("minecraft:block/", "/minecraft/assets/minecraft/textures/block")

block_map = BlockMap()
chunk = Chunk((0.0, 0.0, 0.0))
# noise(octaves, x, z) must return a value in [-1, 1]
chunk.generate(block_map, lambda octaves, x, z: 0.0)
geometry = build_chunk_geometry(chunk, block_map, atlas)
print(len(geometry.vertices), geometry.vertex_data().shape)
```

`TextureAtlas.save(filename)` writes the packed atlas as a PNG.
`TextureAtlas.get_rect_by_name(name)` returns a region and its `uv`
rectangle. `World.get_block(loc)` in `blockworld.chunk` looks up a block by
world coordinates across the chunks added to it.

Other modules:

- `blockworld.geometry`: `BufferGeometry`, `add_quad` and `add_cube`.
- `blockworld.camera`: `Camera` and `CameraOptions`, which give the view and
  projection matrices.
- `blockworld.input`: `Input`, which tracks key, button and mouse state and
  moves a `Camera` with `process`.
- `blockworld.logger`: `Logger`, a levelled printf-style logger.
- `blockworld.memory`: `pretty_bytes` and `total_system_memory`.

Import block definitions:

```python
from blockworld.importer import MinecraftImporter, missing_models

importer = MinecraftImporter()
importer.load()
block = importer.get_block("minecraft:block/oak_stairs")
print(block.to_json())
print(missing_models(importer))
```

`MinecraftImporter` can also be built directly from parsed documents with
`MinecraftImporter(states={...}, models={...})`. `get_block_model` merges each
model over its parent chain as a JSON merge patch (`merge_patch`).

## What it does not do

The package has no window, no rendering and no input loop. It builds meshes
as vertex lists and arrays, and the texture atlas as a pixel array or PNG
file. Nothing draws them, and the `blockworld` command exits once the chunks
are built. `Input` and `Camera` only compute state. They are not connected to
any keyboard, mouse or display.