"""Block types, directions and the per-face geometry used to mesh chunks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]

VERT_COUNT = 4


class BlockType(IntEnum):
    """Kinds of block a chunk can hold; one byte each."""

    EMPTY = 0
    GRASS = 1
    DIRT = 2
    STONE = 3
    WATER = 4


class Direction(IntEnum):
    """The six cardinal directions in 3D space."""

    XPOS = 0
    XNEG = 1
    YPOS = 2
    YNEG = 3
    ZPOS = 4
    ZNEG = 5

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.XPOS: Direction.XNEG,
    Direction.XNEG: Direction.XPOS,
    Direction.YPOS: Direction.YNEG,
    Direction.YNEG: Direction.YPOS,
    Direction.ZPOS: Direction.ZNEG,
    Direction.ZNEG: Direction.ZPOS,
}


class FaceType(IntEnum):
    """Which texture a face of a block uses."""

    TOP = 0
    BOTTOM = 1
    SIDE = 2


@dataclass(frozen=True)
class BlockFace:
    """One face of a unit cube: its neighbour offset, corners and normal.

    Corners are ordered upper-right, lower-right, lower-left, upper-left.
    """

    face_type: FaceType
    direction: tuple[int, int, int]
    positions: tuple[Vec3, Vec3, Vec3, Vec3]
    normal: Vec3


RIGHT_FACE = ((1.0, 1.0, 0.0), (1.0, 0.0, 0.0), (1.0, 0.0, 1.0), (1.0, 1.0, 1.0))
LEFT_FACE = ((0.0, 1.0, 1.0), (0.0, 0.0, 1.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
FRONT_FACE = ((1.0, 1.0, 1.0), (1.0, 0.0, 1.0), (0.0, 0.0, 1.0), (0.0, 1.0, 1.0))
BACK_FACE = ((0.0, 1.0, 0.0), (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0))
TOP_FACE = ((1.0, 1.0, 0.0), (1.0, 1.0, 1.0), (0.0, 1.0, 1.0), (0.0, 1.0, 0.0))
BOTTOM_FACE = ((1.0, 0.0, 1.0), (1.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 1.0))

# Texture coordinates of the four corners, in the same order as the positions.
UV: tuple[Vec2, Vec2, Vec2, Vec2] = ((1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0))

# Indexed in the order of Direction.
NEIGHBOURING_FACES: tuple[BlockFace, ...] = (
    BlockFace(FaceType.SIDE, (1, 0, 0), RIGHT_FACE, (1.0, 0.0, 0.0)),
    BlockFace(FaceType.SIDE, (-1, 0, 0), LEFT_FACE, (-1.0, 0.0, 0.0)),
    BlockFace(FaceType.TOP, (0, 1, 0), TOP_FACE, (0.0, 1.0, 0.0)),
    BlockFace(FaceType.BOTTOM, (0, -1, 0), BOTTOM_FACE, (0.0, -1.0, 0.0)),
    BlockFace(FaceType.SIDE, (0, 0, 1), FRONT_FACE, (0.0, 0.0, 1.0)),
    BlockFace(FaceType.SIDE, (0, 0, -1), BACK_FACE, (0.0, 0.0, -1.0)),
)

_COLORS: dict[BlockType, Vec4] = {
    BlockType.GRASS: (0.0431, 0.51373, 0.23137, 1.0),
    BlockType.DIRT: (0.5373, 0.3176, 0.0392, 1.0),
    BlockType.STONE: (0.27, 0.3568, 0.3804, 1.0),
    BlockType.WATER: (0.04706, 0.3647, 0.5216, 1.0),
    BlockType.EMPTY: (1.0, 1.0, 1.0, 1.0),
}

_UV_OFFSETS: dict[tuple[BlockType, FaceType], Vec2] = {
    (BlockType.GRASS, FaceType.TOP): (8.0, 2.0),
    (BlockType.GRASS, FaceType.SIDE): (3.0, 0.0),
    (BlockType.GRASS, FaceType.BOTTOM): (2.0, 0.0),
    (BlockType.DIRT, FaceType.TOP): (2.0, 0.0),
    (BlockType.DIRT, FaceType.SIDE): (2.0, 0.0),
    (BlockType.DIRT, FaceType.BOTTOM): (2.0, 0.0),
    (BlockType.STONE, FaceType.TOP): (1.0, 0.0),
    (BlockType.STONE, FaceType.SIDE): (1.0, 0.0),
    (BlockType.STONE, FaceType.BOTTOM): (1.0, 0.0),
}


def block_color(block_type: BlockType) -> Vec4:
    """Return the RGBA colour of a block type."""
    try:
        return _COLORS[block_type]
    except KeyError:
        raise KeyError(f"no colour for block type {block_type!r}") from None


def uv_offset(block_type: BlockType, face_type: FaceType) -> Vec2:
    """Return the texture-atlas tile of a block's face, in tile units."""
    try:
        return _UV_OFFSETS[(block_type, face_type)]
    except KeyError:
        raise KeyError(
            f"no texture for block type {block_type!r} face {face_type!r}"
        ) from None