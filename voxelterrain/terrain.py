"""The world: every chunk, grouped into 64 x 64 zones built in the background."""

from __future__ import annotations

import threading
from collections.abc import Sequence

from .blocks import BlockType, Direction
from .chunk import CHUNK_HEIGHT, CHUNK_WIDTH, Chunk
from .keys import round_down, to_coords, to_key
from .threadpool import ThreadPool

ZONE_SIZE = 64
TERRAIN_DRAW_MULTIPLIER = 1
TERRAIN_CREATE_MULTIPLIER = 1
TERRAIN_DRAW_RADIUS = ZONE_SIZE * TERRAIN_DRAW_MULTIPLIER
TERRAIN_CREATE_RADIUS = ZONE_SIZE * TERRAIN_CREATE_MULTIPLIER
FLOOR_HEIGHT = 128
DEFAULT_THREADS = 16


def _chunk_origin(x: int, z: int) -> tuple[int, int]:
    return (x // CHUNK_WIDTH) * CHUNK_WIDTH, (z // CHUNK_WIDTH) * CHUNK_WIDTH


def _zone_origin(position: Sequence[float]) -> tuple[int, int]:
    return (
        round_down(int(position[0]), ZONE_SIZE),
        round_down(int(position[2]), ZONE_SIZE),
    )


class Terrain:
    """Stores every chunk by its lower corner and grows the world around a position.

    Zones within the create radius of the player get block data on worker
    threads; their meshes are built on workers too and packed into buffers on
    the thread that calls try_expansion. Chunks are never removed.
    """

    def __init__(self, threads: int = DEFAULT_THREADS) -> None:
        self._chunks: dict[int, Chunk] = {}
        self._chunks_lock = threading.RLock()
        self._generated: dict[int, None] = {}
        self._pool = ThreadPool(threads)
        self._pending: list[Chunk] = []
        self._pending_lock = threading.Lock()
        self._drawable: list[Chunk] = []
        self._drawable_lock = threading.Lock()

    def has_chunk_at(self, x: int, z: int) -> bool:
        """Whether the world-space column (x, z) lies in an existing chunk."""
        with self._chunks_lock:
            return to_key(*_chunk_origin(x, z)) in self._chunks

    def get_chunk_at(self, x: int, z: int) -> Chunk | None:
        """Return the chunk containing world-space column (x, z), if any."""
        with self._chunks_lock:
            return self._chunks.get(to_key(*_chunk_origin(x, z)))

    def get_block_at(self, x: int, y: int, z: int) -> BlockType:
        """Return the block at a world-space position.

        Heights outside the chunk read as EMPTY; a column with no chunk
        raises IndexError.
        """
        with self._chunks_lock:
            chunk = self.get_chunk_at(x, z)
            if chunk is None:
                raise IndexError(f"Coordinates {x} {y} {z} have no Chunk!")
            if y < 0 or y >= CHUNK_HEIGHT:
                return BlockType.EMPTY
            ox, oz = _chunk_origin(x, z)
            return chunk.get_block_at(x - ox, y, z - oz)

    def set_block_at(self, x: int, y: int, z: int, block_type: BlockType) -> None:
        """Store a block at a world-space position; IndexError if there is no chunk."""
        with self._chunks_lock:
            chunk = self.get_chunk_at(x, z)
            if chunk is None:
                raise IndexError(f"Coordinates {x} {y} {z} have no Chunk!")
            ox, oz = _chunk_origin(x, z)
            chunk.set_block_at(x - ox, y, z - oz, block_type)

    def instantiate_chunk_at(self, x: int, z: int) -> Chunk:
        """Create a chunk with its lower corner at (x, z) and link its neighbours."""
        chunk = Chunk(x, z)
        with self._chunks_lock:
            self._chunks[to_key(x, z)] = chunk
            for dx, dz, direction in (
                (0, CHUNK_WIDTH, Direction.ZPOS),
                (0, -CHUNK_WIDTH, Direction.ZNEG),
                (CHUNK_WIDTH, 0, Direction.XPOS),
                (-CHUNK_WIDTH, 0, Direction.XNEG),
            ):
                neighbor = self._chunks.get(to_key(x + dx, z + dz))
                if neighbor is not None:
                    chunk.link_neighbor(neighbor, direction)
        return chunk

    def create_block_data(self, zone_x: int, zone_z: int) -> list[Chunk]:
        """Fill the zone at (zone_x, zone_z) with flat terrain and queue its chunks.

        Returns the chunks created, in the order they were queued.
        """
        created: list[Chunk] = []
        for z in range(zone_z, zone_z + ZONE_SIZE, CHUNK_WIDTH):
            for x in range(zone_x, zone_x + ZONE_SIZE, CHUNK_WIDTH):
                chunk = self.instantiate_chunk_at(x, z)
                for local_x in range(CHUNK_WIDTH):
                    for local_z in range(CHUNK_WIDTH):
                        world_x, world_z = x + local_x, z + local_z
                        on_grid = abs(world_x) % ZONE_SIZE == 0 or abs(world_z) % ZONE_SIZE == 0
                        block = BlockType.STONE if on_grid else BlockType.GRASS
                        chunk.set_block_at(local_x, FLOOR_HEIGHT, local_z, block)
                with self._pending_lock:
                    self._pending.append(chunk)
                created.append(chunk)
        return created

    def create_buffer_data(self, chunk: Chunk) -> None:
        """Build the mesh of a chunk and mark it ready for packing."""
        chunk.create_vertex_data()
        with self._drawable_lock:
            self._drawable.append(chunk)

    def try_expansion(self, position: Sequence[float]) -> list[Chunk]:
        """Advance world generation around position by one step.

        Queues block data for ungenerated zones in the create radius, queues
        meshing for chunks whose blocks are done, and packs the buffers of
        chunks whose meshes are done. Returns the chunks packed by this call.
        """
        terrain_x, terrain_z = _zone_origin(position)
        for z in range(
            terrain_z - TERRAIN_CREATE_RADIUS,
            terrain_z + TERRAIN_CREATE_RADIUS + 1,
            ZONE_SIZE,
        ):
            for x in range(
                terrain_x - TERRAIN_CREATE_RADIUS,
                terrain_x + TERRAIN_CREATE_RADIUS + 1,
                ZONE_SIZE,
            ):
                key = to_key(x, z)
                if key not in self._generated:
                    self._generated[key] = None
                    self._pool.enqueue(self.create_block_data, x, z)

        with self._pending_lock:
            to_mesh, self._pending = self._pending, []
        for chunk in to_mesh:
            self._pool.enqueue(self.create_buffer_data, chunk)

        with self._drawable_lock:
            to_pack, self._drawable = self._drawable, []
        for chunk in to_pack:
            chunk.buffer_bytes()
        return to_pack

    def visible_chunks(self, position: Sequence[float]) -> list[Chunk]:
        """Chunks with packed buffers inside the draw radius of position."""
        tx, tz = _zone_origin(position)
        visible: list[Chunk] = []
        for zone_z in range(tz - TERRAIN_DRAW_RADIUS, tz + TERRAIN_DRAW_RADIUS + 1, ZONE_SIZE):
            for zone_x in range(tx - TERRAIN_DRAW_RADIUS, tx + TERRAIN_DRAW_RADIUS + 1, ZONE_SIZE):
                for z in range(zone_z, zone_z + ZONE_SIZE, CHUNK_WIDTH):
                    for x in range(zone_x, zone_x + ZONE_SIZE, CHUNK_WIDTH):
                        chunk = self.get_chunk_at(x, z)
                        if chunk is not None and chunk.buffer is not None:
                            visible.append(chunk)
        return visible

    def generated_zones(self) -> list[tuple[int, int]]:
        """Lower corners of every zone scheduled for generation, oldest first."""
        return [to_coords(key) for key in self._generated]

    def close(self) -> None:
        """Finish queued work and stop the worker threads."""
        self._pool.destroy()

    def __enter__(self) -> Terrain:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()