"""Keyboard and mouse state, and first-person movement driven by it."""

from dataclasses import replace
from enum import IntEnum

import numpy as np

from blockworld.constants import PLAYER_SPEED

KEY_LAST = 348
MOUSE_BUTTON_LAST = 7
DEFAULT_SENSITIVITY = 0.1


class Key(IntEnum):
    SPACE = 32
    A = 65
    D = 68
    F = 70
    S = 83
    W = 87
    ESCAPE = 256


class Action(IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Input:
    """Tracks pressed keys, mouse buttons and mouse motion."""

    def __init__(self, sensitivity=DEFAULT_SENSITIVITY):
        self.sensitivity = sensitivity
        self._last_mouse = (0, 0)
        self._delta_mouse = (0, 0)
        self._first_mouse = True
        self._mouse = (0, 0)
        self._keys = [False] * KEY_LAST
        self._buttons = [False] * MOUSE_BUTTON_LAST

    @property
    def mouse_position(self):
        return self._mouse

    @property
    def mouse_delta(self):
        return self._delta_mouse

    def key_callback(self, key, scancode, action, mods):
        if 0 <= key < KEY_LAST:
            self._keys[key] = action in (Action.PRESS, Action.REPEAT)

    def mouse_callback(self, x_pos, y_pos):
        x, y = int(x_pos), int(y_pos)
        self._mouse = (x, y)
        if self._first_mouse:
            self._last_mouse = (x, y)
            self._first_mouse = False
        last_x, last_y = self._last_mouse
        self._delta_mouse = (x - last_x, last_y - y)
        self._last_mouse = (x, y)

    def mouse_button_callback(self, button, action, mods):
        if 0 <= button < MOUSE_BUTTON_LAST:
            self._buttons[button] = action == Action.PRESS

    def is_key_pressed(self, key):
        if not 0 <= key < KEY_LAST:
            raise IndexError(f"key code out of range: {key}")
        return self._keys[key]

    def is_mouse_button_pressed(self, button):
        if not 0 <= button < MOUSE_BUTTON_LAST:
            raise IndexError(f"mouse button out of range: {button}")
        return self._buttons[button]

    def process(self, camera, delta_time):
        """Turn the camera by the mouse motion and move it by the held keys."""
        dx, dy = self._delta_mouse
        options = camera.options
        yaw = options.yaw + self.sensitivity * dx
        pitch = options.pitch + self.sensitivity * dy

        forward = camera.forward
        local_right = np.cross(forward, np.array([0.0, 1.0, 0.0]))
        local_up = np.cross(local_right, forward)

        move = np.zeros(3)
        if self.is_key_pressed(Key.W):
            move += forward * PLAYER_SPEED
        if self.is_key_pressed(Key.S):
            move -= forward * PLAYER_SPEED
        if self.is_key_pressed(Key.A):
            move -= local_right * PLAYER_SPEED
        if self.is_key_pressed(Key.D):
            move += local_right * PLAYER_SPEED

        length = float(np.linalg.norm(move))
        if length > 0.0:
            move = move / length
        move = move * PLAYER_SPEED

        if self.is_key_pressed(Key.SPACE):
            move += local_up * PLAYER_SPEED
        if self.is_key_pressed(Key.F):
            move -= local_up * PLAYER_SPEED

        pos = tuple(float(c) for c in np.asarray(options.pos, dtype=float) + move)
        camera.configure(replace(options, yaw=yaw, pitch=pitch, pos=pos))
        self._delta_mouse = (0, 0)