import pytest

from voxelterrain.controls import HEIGHT, WIDTH, MouseTracker, input_from_keys


def test_default_reference_is_window_centre():
    tracker = MouseTracker()
    assert (tracker.last_x, tracker.last_y) == (WIDTH / 2, HEIGHT / 2)


def test_first_move_gives_no_motion():
    tracker = MouseTracker()
    tracker.move(123.0, 456.0)
    assert tracker.take() == (0, 0)
    assert (tracker.last_x, tracker.last_y) == (123.0, 456.0)


@pytest.mark.parametrize("dx,dy", [(7, 3), (-5, 11), (0, -4)])
def test_motion_reverses_vertical_axis(dx, dy):
    tracker = MouseTracker()
    x0, y0 = 100.0, 200.0
    tracker.move(x0, y0)
    tracker.move(x0 + dx, y0 + dy)
    assert tracker.take() == (dx, -dy)


def test_take_clears_motion():
    tracker = MouseTracker()
    tracker.move(10.0, 10.0)
    tracker.move(20.0, 30.0)
    first = tracker.take()
    assert first == (10, -20)
    assert tracker.take() == (0, 0)


def test_latest_move_replaces_untaken_motion():
    tracker = MouseTracker()
    tracker.move(0.0, 0.0)
    tracker.move(50.0, 50.0)
    tracker.move(53.0, 49.0)
    assert tracker.take() == (3, 1)


def test_take_truncates_toward_zero():
    tracker = MouseTracker()
    tracker.move(0.0, 0.0)
    tracker.move(2.7, 2.7)
    assert tracker.take() == (2, -2)


def test_input_from_keys_sets_bound_keys():
    state = input_from_keys({"w", "D", "q"}, 4, -6)
    assert state.w_pressed and state.d_pressed and state.q_pressed
    assert not (state.a_pressed or state.s_pressed or state.e_pressed)
    assert (state.mouse_x, state.mouse_y) == (4, -6)


def test_input_from_keys_ignores_unbound_keys():
    state = input_from_keys(["escape", "space", "x"])
    assert not any(
        [
            state.w_pressed,
            state.a_pressed,
            state.s_pressed,
            state.d_pressed,
            state.e_pressed,
            state.q_pressed,
            state.space_pressed,
        ]
    )
    assert (state.mouse_x, state.mouse_y) == (0, 0)


def test_input_from_keys_can_be_reset():
    state = input_from_keys("wasdeq", 9, 9)
    assert all(
        [
            state.w_pressed,
            state.a_pressed,
            state.s_pressed,
            state.d_pressed,
            state.e_pressed,
            state.q_pressed,
        ]
    )
    state.reset()
    assert state == input_from_keys([])