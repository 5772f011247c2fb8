"""A 16 x 256 x 16 column of blocks and the mesh built from its visible faces."""

from __future__ import annotations

import struct
from collections.abc import Sequence

import numpy as np

from .blocks import (
    NEIGHBOURING_FACES,
    UV,
    BlockType,
    Direction,
    block_color,
    uv_offset,
)
from .types import Vertex

CHUNK_WIDTH = 16
CHUNK_HEIGHT = 256
BLOCK_COUNT = CHUNK_WIDTH * CHUNK_HEIGHT * CHUNK_WIDTH
ATLAS_TILES = 16.0


def face_indices(indices: Sequence[int]) -> list[int]:
    """Split a quad (upper-right, lower-right, lower-left, upper-left) into two triangles."""
    ur, lr, ll, ul = indices
    return [ur, ul, lr, lr, ul, ll]


def _block_index(x: int, y: int, z: int) -> int:
    # Coordinates combine as unsigned 32-bit values; only the combined index is
    # range-checked, so a row may spill into the next one.
    index = (x + CHUNK_WIDTH * y + CHUNK_WIDTH * CHUNK_HEIGHT * z) & 0xFFFFFFFF
    if index >= BLOCK_COUNT:
        raise IndexError(f"block ({x}, {y}, {z}) lies outside the chunk")
    return index


class Chunk:
    """Blocks of one chunk whose lower corner sits at world (min_x, min_z)."""

    def __init__(self, x: int, z: int) -> None:
        self.min_x = x
        self.min_z = z
        # Flat layout: x varies fastest, then y, then z.
        self._blocks = np.zeros(BLOCK_COUNT, dtype=np.uint8)
        self._neighbors: dict[Direction, Chunk | None] = {
            Direction.XPOS: None,
            Direction.XNEG: None,
            Direction.ZPOS: None,
            Direction.ZNEG: None,
        }
        self.vertex_data: list[Vertex] = []
        self.idx_data: list[int] = []
        self.vertex_size = 0
        self.num_indices = 0
        self.buffer: bytes | None = None
        self.buffer_size = 0

    def get_block_at(self, x: int, y: int, z: int) -> BlockType:
        """Return the block at chunk-local coordinates."""
        return BlockType(int(self._blocks[_block_index(x, y, z)]))

    def set_block_at(self, x: int, y: int, z: int, block_type: BlockType) -> None:
        """Store a block at chunk-local coordinates."""
        self._blocks[_block_index(x, y, z)] = int(block_type)

    def link_neighbor(self, neighbor: Chunk | None, direction: Direction) -> None:
        """Make neighbor adjacent in direction, and this chunk adjacent to it."""
        if neighbor is None:
            return
        direction = Direction(direction)
        self._neighbors[direction] = neighbor
        neighbor._neighbors[direction.opposite()] = self

    def neighbor(self, direction: Direction) -> Chunk | None:
        """Return the chunk linked in direction, if any."""
        return self._neighbors.get(Direction(direction))

    def create_vertex_data(self) -> None:
        """Build vertices and triangle indices for every exposed block face."""
        vertices: list[Vertex] = []
        indices: list[int] = []
        grid = self._blocks.reshape(CHUNK_WIDTH, CHUNK_HEIGHT, CHUNK_WIDTH)  # z, y, x

        for z, y, x in zip(*(axis.tolist() for axis in np.nonzero(grid))):
            current = BlockType(int(grid[z, y, x]))
            for face in NEIGHBOURING_FACES:
                dx, dy, dz = face.direction
                nx, ny, nz = x + dx, y + dy, z + dz
                inside = (
                    0 <= nx < CHUNK_WIDTH
                    and 0 <= ny < CHUNK_HEIGHT
                    and 0 <= nz < CHUNK_WIDTH
                )
                if inside and grid[nz, ny, nx] != BlockType.EMPTY:
                    continue

                color = block_color(current)[:3]
                off_u, off_v = uv_offset(current, face.face_type)
                base = len(vertices)
                for (px, py, pz), (u, v) in zip(face.positions, UV):
                    vertices.append(
                        Vertex(
                            pos=(
                                float(self.min_x + x + px),
                                float(y + py),
                                float(self.min_z + z + pz),
                            ),
                            nor=face.normal,
                            color=color,
                            tex_coord=(
                                (u + off_u) / ATLAS_TILES,
                                (v + off_v) / ATLAS_TILES,
                            ),
                        )
                    )
                indices.extend(face_indices(range(base, base + 4)))

        self.vertex_data = vertices
        self.idx_data = indices
        self.vertex_size = len(vertices)
        self.num_indices = len(indices)

    def buffer_bytes(self) -> bytes:
        """Pack vertices then uint32 indices into one buffer and drop the CPU-side lists.

        The packed buffer is kept in ``buffer`` and its length in ``buffer_size``.
        """
        packed = b"".join(vertex.pack() for vertex in self.vertex_data)
        packed += struct.pack(f"<{len(self.idx_data)}I", *self.idx_data)
        self.buffer = packed
        self.buffer_size = len(packed)
        self.vertex_data = []
        self.idx_data = []
        return packed