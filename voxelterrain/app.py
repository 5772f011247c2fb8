"""A headless frame loop: camera, world generation and the status overlay."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .camera import CameraFPS
from .chunk import Chunk
from .controls import HEIGHT, QUIT_KEY, WIDTH, input_from_keys
from .keys import round_down
from .terrain import DEFAULT_THREADS, ZONE_SIZE, Terrain
from .types import Input

TITLE = "Voxel Terrain"
START_POSITION = (32.0, 150.0, 32.0)


def overlay_lines(camera: CameraFPS, terrain: Terrain) -> list[str]:
    """Text of the status overlay: camera position, current zone, generated zones."""
    x, y, z = (float(v) for v in camera.position)
    lines = [
        TITLE,
        f"Camera Position: ({x:.1f}, {y:.1f}, {z:.1f})",
        f"Zone Location: ({round_down(int(x), ZONE_SIZE)}, "
        f"{round_down(int(z), ZONE_SIZE)})",
    ]
    lines.extend(
        f"{number}: ({zx}, {zz})"
        for number, (zx, zz) in enumerate(terrain.generated_zones(), start=1)
    )
    return lines


class Simulation:
    """Camera and terrain advanced one frame at a time."""

    def __init__(
        self, width: int = WIDTH, height: int = HEIGHT, threads: int = DEFAULT_THREADS
    ) -> None:
        self.camera = CameraFPS(width, height, START_POSITION)
        self.terrain = Terrain(threads)
        self.frames = 0

    def step(self, input_state: Input, dt: float) -> list[Chunk]:
        """Apply one frame of input, grow the world and return the chunks to draw."""
        self.camera.process_input(input_state, dt)
        self.terrain.try_expansion(self.camera.position)
        self.frames += 1
        return self.terrain.visible_chunks(self.camera.position)

    def overlay(self) -> list[str]:
        """The overlay text for the current state."""
        return overlay_lines(self.camera, self.terrain)

    def close(self) -> None:
        """Finish queued background work and stop the workers."""
        self.terrain.close()

    def __enter__(self) -> Simulation:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="voxelterrain", description="Run the voxel terrain frame loop headless."
    )
    parser.add_argument("--frames", type=int, default=60, help="frames to run")
    parser.add_argument("--dt", type=float, default=1.0 / 60.0, help="seconds per frame")
    parser.add_argument("--threads", type=int, default=DEFAULT_THREADS)
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument(
        "--hold", default="", help="comma-separated keys held every frame (w,a,s,d,e,q,escape)"
    )
    parser.add_argument(
        "--turn", type=int, nargs=2, default=(0, 0), metavar=("DX", "DY"),
        help="mouse motion applied every frame",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the frame loop and print the final overlay; return the exit status."""
    args = _parse_args(argv)
    keys = [key.strip().lower() for key in args.hold.split(",") if key.strip()]
    try:
        with Simulation(args.width, args.height, args.threads) as sim:
            dx, dy = args.turn
            for _ in range(args.frames):
                sim.step(input_from_keys(keys, dx, dy), args.dt)
                if QUIT_KEY in keys:
                    break
            print("\n".join(sim.overlay()))
            print(f"Frames rendered: {sim.frames}")
    except Exception as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0