"""Block definitions and the registry that maps block ids to blocks."""

from dataclasses import dataclass
from enum import IntEnum

AIR = "minecraft:block/air"
BEDROCK = "minecraft:block/bedrock"
DIRT = "minecraft:block/dirt"
GRASS_BLOCK = "minecraft:block/grass_block"
STONE = "minecraft:block/stone"
BIRCH_PLANKS = "minecraft:block/birch_planks"


@dataclass(frozen=True)
class Face:
    """The texture shown on one side of a block."""

    texture: str = ""


class BlockType(IntEnum):
    NULL = 0
    SOLID = 1


@dataclass
class Block:
    """A kind of block: its name, transparency and the texture of each face."""

    type: BlockType = BlockType.SOLID
    name: str = ""
    is_transparent: bool = False
    xp: Face = Face()
    xn: Face = Face()
    yp: Face = Face()
    yn: Face = Face()
    zp: Face = Face()
    zn: Face = Face()


def _uniform_block(name):
    face = Face(name)
    return Block(name=name, xp=face, xn=face, yp=face, yn=face, zp=face, zn=face)


def _default_blocks():
    yield Block(type=BlockType.NULL, name=AIR, is_transparent=True)
    yield _uniform_block(BEDROCK)
    yield _uniform_block(DIRT)
    side = Face("minecraft:block/grass_block_side")
    yield Block(
        name=GRASS_BLOCK,
        xp=side,
        xn=side,
        yp=Face("minecraft:block/azalea_top"),
        yn=Face(DIRT),
        zp=side,
        zn=side,
    )
    yield _uniform_block(STONE)
    yield _uniform_block(BIRCH_PLANKS)


class BlockMap:
    """Registry of blocks; a block's id is its position of registration."""

    def __init__(self):
        self._blocks = []
        self._by_name = {}
        for block in _default_blocks():
            self.add_block(block)

    def __len__(self):
        return len(self._blocks)

    def add_block(self, block):
        """Register ``block``; a name already registered keeps its first id."""
        index = len(self._blocks)
        self._blocks.append(block)
        self._by_name.setdefault(block.name, index)

    def get_block(self, block_id):
        """Return the block with ``block_id``, or None when there is none."""
        if 0 <= block_id < len(self._blocks):
            return self._blocks[block_id]
        return None

    def get_block_id(self, name):
        """Return the id registered for ``name``; unknown names map to 0 (air)."""
        return self._by_name.get(name, 0)