"""Chunked voxel terrain: block storage, face-culled meshing, zone streaming and a first-person camera."""

__version__ = "0.1.0"
__all__ = ["blocks", "types", "threadpool", "camera", "chunk", "keys", "terrain", "controls", "app"]