"""The game's actions and how devices map onto them."""

from __future__ import annotations

from enum import IntEnum

from .input import ActionInput
from .raw_input import ControllerButton, GamePads, Key, Keyboard, Mouse, MouseButton
from .vec import Vec

KEYBOARD_PLAYER = 0


class GameKey(IntEnum):
    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    START = 5
    SHOOT = 6


class AnalogInput(IntEnum):
    NONE = 0
    MOVE = 1


def map_game_keys(actions: ActionInput, keyboard: Keyboard, mouse: Mouse, gamepads: GamePads) -> None:
    """Bind every game action and analog input to the given devices."""

    def keys(p: int, *candidates: Key) -> bool:
        return p == KEYBOARD_PLAYER and any(keyboard.is_pressed(k) for k in candidates)

    def up(p: int) -> bool:
        return (
            gamepads.stick(p, "left").y < -50.0
            or gamepads.is_button_pressed(p, ControllerButton.DPAD_UP)
            or keys(p, Key.W, Key.UP)
        )

    def down(p: int) -> bool:
        return (
            gamepads.stick(p, "left").y > -50.0
            or gamepads.is_button_pressed(p, ControllerButton.DPAD_DOWN)
            or keys(p, Key.S, Key.DOWN)
        )

    def left(p: int) -> bool:
        return (
            gamepads.stick(p, "left").x < 0.0
            or gamepads.is_button_pressed(p, ControllerButton.DPAD_LEFT)
            or keys(p, Key.A, Key.LEFT)
        )

    def right(p: int) -> bool:
        return (
            gamepads.stick(p, "left").x > 0.0
            or gamepads.is_button_pressed(p, ControllerButton.DPAD_RIGHT)
            or keys(p, Key.D, Key.RIGHT)
        )

    def shoot(p: int) -> bool:
        return (
            gamepads.is_button_pressed(p, ControllerButton.X)
            or gamepads.is_trigger_pressed(p, "right")
            or (p == KEYBOARD_PLAYER and mouse.is_pressed(MouseButton.LEFT))
        )

    def start(p: int) -> bool:
        return gamepads.is_button_pressed(p, ControllerButton.START) or keys(
            p, Key.RETURN, Key.ESCAPE
        )

    def move(p: int) -> Vec:
        x = y = 0.0
        if p == KEYBOARD_PLAYER:
            if keys(p, Key.W, Key.UP):
                y = -100.0
            if keys(p, Key.S, Key.DOWN):
                y = 100.0
            if keys(p, Key.A, Key.LEFT):
                x = -100.0
            if keys(p, Key.D, Key.RIGHT):
                x = 100.0
        ret = Vec(x, y)
        return ret if ret != Vec.ZERO else gamepads.stick(p, "left")

    actions.map_action(GameKey.UP, up)
    actions.map_action(GameKey.DOWN, down)
    actions.map_action(GameKey.LEFT, left)
    actions.map_action(GameKey.RIGHT, right)
    actions.map_action(GameKey.SHOOT, shoot)
    actions.map_action(GameKey.START, start)
    actions.map_analog(AnalogInput.MOVE, move)