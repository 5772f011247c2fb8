# voxelterrain

A voxel terrain model in Python. The world is split into chunks of
16 × 256 × 16 blocks. Chunks are grouped into 64 × 64 block zones, and a zone is
generated when the viewer comes near it.

## What it provides

- **Blocks and faces** (`voxelterrain.blocks`). `BlockType` (EMPTY, GRASS, DIRT,
  STONE, WATER), `Direction` with `opposite()`, `FaceType` and `BlockFace`.
  `block_color` gives a block's RGBA colour. `uv_offset` gives the texture-atlas
  tile for a block face. Both raise `KeyError` for combinations that have no entry.
- **Vertices and input** (`voxelterrain.types`). `Vertex.pack()` returns the
  vertex as eleven little-endian 32-bit floats. `Input` holds one frame's keys and
  mouse motion, and `Input.reset()` clears it.
- **Chunks** (`voxelterrain.chunk`). `Chunk` stores its blocks and links to its
  four horizontal neighbours through `link_neighbor` and `neighbor`. Out-of-range
  block coordinates raise `IndexError`. `Chunk.create_vertex_data()` builds a
  face-culled mesh, emitting a face wherever the neighbouring block is empty or
  outside the chunk. `Chunk.buffer_bytes()` packs the vertices and then the
  uint32 triangle indices into one byte string. It keeps the result in
  `chunk.buffer` and drops the CPU-side lists. `face_indices` splits a quad into
  two triangles.
- **Keys** (`voxelterrain.keys`). `to_key` and `to_coords` pack a pair of 32-bit
  coordinates into one signed 64-bit key and unpack it again. `round_down`
  rounds down to a multiple, and works for negative numbers too.
- **Terrain** (`voxelterrain.terrain`). `Terrain` stores chunks by their
  world-space corner, which may be negative.
  - `get_block_at` and `set_block_at` work in world coordinates and raise
    `IndexError` where there is no chunk. A height outside 0–255 reads as EMPTY.
  - `create_block_data` fills a zone with a flat layer at y = 128: STONE on the
    64-block grid lines and GRASS elsewhere.
  - `try_expansion(position)` is called once per frame. It schedules ungenerated
    zones within one zone of the position on a worker thread pool, meshes
    finished chunks on the workers, and packs finished meshes on the calling
    thread.
  - `visible_chunks`, `generated_zones` and `close` complete the interface.
    `Terrain` is also a context manager.
- **Thread pool** (`voxelterrain.threadpool`). `ThreadPool.enqueue` returns a
  `concurrent.futures.Future`. `destroy()` drains the queue and joins the
  workers, and the pool works as a context manager. Enqueueing after `destroy`
  raises `RuntimeError`.
- **Camera** (`voxelterrain.camera`). `CameraFPS` is a yaw/pitch camera. Mouse
  motion turns it, with pitch clamped to ±89°. W/S move it forward and back, A/D
  move it sideways and E/Q move it up and down. `view_projection_matrix()` is
  built from `perspective` (depth range 0 to 1) and `look_at`, with Y flipped.
- **Controls** (`voxelterrain.controls`). `MouseTracker` turns cursor positions
  into per-frame motion, with the vertical axis reversed. `input_from_keys`
  builds an `Input` from key names.
- **Simulation** (`voxelterrain.app`). `Simulation.step(input, dt)` moves the
  camera, advances terrain generation and returns the visible chunks.
  `overlay_lines` (or `Simulation.overlay()`) gives the status text: camera
  position, current zone, and the generated zones in order.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Example

```python
from voxelterrain.blocks import BlockType
from voxelterrain.terrain import Terrain

with Terrain(threads=4) as terrain:
    terrain.create_block_data(0, 0)          # flat layer at y = 128 in zone (0, 0)
    print(terrain.get_block_at(5, 128, 5))   # BlockType.GRASS
    terrain.set_block_at(5, 129, 5, BlockType.STONE)

    chunk = terrain.get_chunk_at(5, 5)
    chunk.create_vertex_data()
    data = chunk.buffer_bytes()
```

## Command

```
voxelterrain --frames 120 --hold w,d --turn 5 0
```

This runs the frame loop headless. At the end it prints the overlay text and the
number of frames run. The options are:

- `--frames` (default 60)
- `--dt` (seconds per frame, default 1/60)
- `--threads` (default 16)
- `--width` and `--height` (default 800 × 600)
- `--hold`: comma-separated keys held on every frame (`w,a,s,d,e,q`). Including
  `escape` stops the loop after the first frame.
- `--turn DX DY`: mouse motion applied on every frame.

The command returns 1 and prints the error if the run fails.

## What it does not do

The package does not open a window, read a real keyboard or mouse, load
textures, or draw anything. It produces packed vertex and index buffers and a
view-projection matrix for a renderer to use. Chunks are never unloaded.