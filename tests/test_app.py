import time

import pytest

from voxelterrain.app import Simulation, main, overlay_lines
from voxelterrain.camera import CameraFPS
from voxelterrain.terrain import Terrain
from voxelterrain.types import Input


@pytest.fixture
def sim():
    simulation = Simulation(800, 600, 2)
    yield simulation
    simulation.close()


def test_overlay_fresh_state():
    camera = CameraFPS(800, 600, (32.0, 150.0, 32.0))
    with Terrain(1) as terrain:
        lines = overlay_lines(camera, terrain)
    assert lines[1] == "Camera Position: (32.0, 150.0, 32.0)"
    assert lines[2] == "Zone Location: (0, 0)"
    assert len(lines) == 3


def test_overlay_negative_zone():
    camera = CameraFPS(800, 600, (-1.0, 5.0, -70.0))
    with Terrain(1) as terrain:
        lines = overlay_lines(camera, terrain)
    assert lines[2] == "Zone Location: (-64, -128)"


def test_step_lists_generated_zones(sim):
    sim.step(Input(), 0.0)
    lines = sim.overlay()
    assert len(lines) == 3 + 9
    assert lines[3] == "1: (-64, -64)"
    assert lines[4] == "2: (0, -64)"
    assert lines[-1] == "9: (64, 64)"
    assert sim.frames == 1


def test_step_moves_camera_forward(sim):
    sim.step(Input(w_pressed=True), 1.0)
    x, y, z = sim.camera.position
    assert (x, y, z) == pytest.approx((32.0, 150.0, 22.0))


def test_step_repeated_does_not_duplicate_zones(sim):
    sim.step(Input(), 0.0)
    sim.step(Input(), 0.0)
    zones = sim.terrain.generated_zones()
    assert len(zones) == len(set(zones)) == 9


def test_chunks_eventually_visible(sim):
    deadline = time.monotonic() + 120
    visible = []
    while not visible and time.monotonic() < deadline:
        visible = sim.step(Input(), 0.0)
        time.sleep(0.05)
    assert len(visible) > 0
    assert all(chunk.buffer is not None for chunk in visible)


def test_main_prints_overlay(capsys):
    status = main(["--frames", "1", "--dt", "0", "--threads", "2"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Zone Location: (0, 0)" in out
    assert "Frames rendered: 1" in out


def test_main_escape_stops_after_one_frame(capsys):
    status = main(["--frames", "5", "--dt", "0", "--threads", "2", "--hold", "escape"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Frames rendered: 1" in out


def test_main_reports_failure(capsys):
    status = main(["--frames", "1", "--threads", "0"])
    err = capsys.readouterr().err
    assert status == 1
    assert "thread" in err