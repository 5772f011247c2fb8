"""Window-level input: mouse-look tracking and key state for one frame."""

from __future__ import annotations

from collections.abc import Iterable

from .types import Input

WIDTH = 800
HEIGHT = 600
MAX_FRAMES_IN_FLIGHT = 2
QUIT_KEY = "escape"

_KEY_FIELDS = {
    "w": "w_pressed",
    "a": "a_pressed",
    "s": "s_pressed",
    "d": "d_pressed",
    "e": "e_pressed",
    "q": "q_pressed",
}


class MouseTracker:
    """Turns absolute cursor positions into per-frame mouse motion.

    The first reported position only sets the reference point. Vertical
    motion is reversed, since window y grows downwards.
    """

    def __init__(self, last_x: float = WIDTH / 2, last_y: float = HEIGHT / 2) -> None:
        self.last_x = float(last_x)
        self.last_y = float(last_y)
        self._first = True
        self._dx = 0.0
        self._dy = 0.0

    def move(self, xpos: float, ypos: float) -> None:
        """Record a new cursor position; replaces any motion not yet taken."""
        if self._first:
            self.last_x = float(xpos)
            self.last_y = float(ypos)
            self._first = False
        self._dx = xpos - self.last_x
        self._dy = self.last_y - ypos
        self.last_x = float(xpos)
        self.last_y = float(ypos)

    def take(self) -> tuple[int, int]:
        """Return the latest motion truncated to whole pixels and clear it."""
        motion = (int(self._dx), int(self._dy))
        self._dx = 0.0
        self._dy = 0.0
        return motion


def input_from_keys(
    pressed: Iterable[str], mouse_x: int = 0, mouse_y: int = 0
) -> Input:
    """Build one frame's Input from the names of held keys and mouse motion.

    Key names are matched case-insensitively; keys with no movement binding
    are ignored.
    """
    state = Input()
    for key in pressed:
        field = _KEY_FIELDS.get(key.lower())
        if field is not None:
            setattr(state, field, True)
    state.mouse_x = int(mouse_x)
    state.mouse_y = int(mouse_y)
    return state