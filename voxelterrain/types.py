"""Vertex layout and per-frame input state."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields
from typing import ClassVar

VERTEX_FORMAT = "<3f3f3f2f"
VERTEX_SIZE = struct.calcsize(VERTEX_FORMAT)

# Byte offsets of position, normal, colour and texture coordinate.
ATTRIBUTE_OFFSETS = (0, 12, 24, 36)


@dataclass
class Vertex:
    """One mesh vertex: position, normal, colour and texture coordinate."""

    pos: tuple[float, float, float]
    nor: tuple[float, float, float]
    color: tuple[float, float, float]
    tex_coord: tuple[float, float]

    SIZE: ClassVar[int] = VERTEX_SIZE

    def pack(self) -> bytes:
        """Return the vertex as tightly packed 32-bit floats."""
        return struct.pack(
            VERTEX_FORMAT, *self.pos, *self.nor, *self.color, *self.tex_coord
        )


@dataclass
class Input:
    """Keys held and mouse motion during one frame."""

    w_pressed: bool = False
    a_pressed: bool = False
    s_pressed: bool = False
    d_pressed: bool = False
    e_pressed: bool = False
    q_pressed: bool = False
    space_pressed: bool = False
    mouse_x: int = 0
    mouse_y: int = 0

    def reset(self) -> None:
        """Release every key and clear mouse motion."""
        for field in fields(self):
            setattr(self, field.name, field.default)