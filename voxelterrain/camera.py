"""A first-person fly camera and the projection helpers it uses."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .types import Input

_WORLD_UP = np.array([0.0, 1.0, 0.0])


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective matrix with depth mapped to [0, 1].

    fovy is in radians. The result is row-major: multiply column vectors.
    """
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = far / (near - far)
    m[3, 2] = -1.0
    m[2, 3] = -(far * near) / (far - near)
    return m


def look_at(
    eye: Sequence[float], center: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """Right-handed view matrix looking from eye towards center."""
    eye_v = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye_v)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye_v)
    m[1, 3] = -np.dot(u, eye_v)
    m[2, 3] = np.dot(f, eye_v)
    return m


class CameraFPS:
    """Yaw/pitch camera moved by WASD/QE keys and mouse motion."""

    def __init__(self, width: int, height: int, position: Sequence[float]) -> None:
        self.forward = np.array([0.0, 0.0, -1.0])
        self.right = np.array([1.0, 0.0, 0.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.position = np.asarray(position, dtype=float).copy()
        self.fovy = 45.0
        self.width = width
        self.height = height
        self.near_clip = 0.1
        self.far_clip = 10000.0
        self.aspect = width / float(height)
        self.yaw = -90.0
        self.pitch = 0.0
        self.movement_speed = 10.0
        self.mouse_sensitivity = 0.1

    def set_size(self, width: int, height: int) -> None:
        """Record a new viewport size and update the aspect ratio."""
        self.width = width
        self.height = height
        self.aspect = width / float(height)

    def view_projection_matrix(self) -> np.ndarray:
        """Projection times view, with Y flipped for a top-left origin."""
        proj = perspective(
            math.radians(self.fovy), self.aspect, self.near_clip, self.far_clip
        )
        view = look_at(self.position, self.position + self.forward, self.up)
        proj[1, 1] *= -1.0
        return proj @ view

    def process_input(self, input_state: Input, dt: float) -> None:
        """Turn by mouse motion, then move by the held keys over dt seconds."""
        if input_state.mouse_x or input_state.mouse_y:
            self.yaw += input_state.mouse_x * self.mouse_sensitivity
            self.pitch += input_state.mouse_y * self.mouse_sensitivity
            self.pitch = min(89.0, max(-89.0, self.pitch))

            yaw = math.radians(self.yaw)
            pitch = math.radians(self.pitch)
            front = np.array(
                [
                    math.cos(yaw) * math.cos(pitch),
                    math.sin(pitch),
                    math.sin(yaw) * math.cos(pitch),
                ]
            )
            self.forward = _normalize(front)
            self.right = _normalize(np.cross(self.forward, _WORLD_UP))
            self.up = _normalize(np.cross(self.right, self.forward))

        velocity = self.movement_speed * dt
        if input_state.w_pressed:
            self.position = self.position + self.forward * velocity
        if input_state.s_pressed:
            self.position = self.position - self.forward * velocity
        if input_state.a_pressed:
            self.position = self.position - self.right * velocity
        if input_state.d_pressed:
            self.position = self.position + self.right * velocity
        if input_state.e_pressed:
            self.position = self.position + self.up * velocity
        if input_state.q_pressed:
            self.position = self.position - self.up * velocity