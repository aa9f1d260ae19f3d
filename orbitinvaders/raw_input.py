"""Raw device state: keyboard, mouse and game controllers."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

from .bounds import Rect
from .vec import Vec

MAX_GAMEPADS = 4
AXIS_SCALE = 327.67
TRIGGER_PRESS_THRESHOLD = 50.0
TRIGGER_MIN = 0.1
DEFAULT_DEAD_AREA = 30.0


class KeyState(IntEnum):
    """Per-frame state of a key or button."""

    JUST_RELEASED = 0
    RELEASED = 1
    JUST_PRESSED = 2
    PRESSED = 3

    @property
    def is_down(self) -> bool:
        return self in (KeyState.PRESSED, KeyState.JUST_PRESSED)


def next_key_state(pressed: bool, state: KeyState) -> KeyState:
    """State for this frame given whether the key is down and last frame's state."""
    if pressed:
        if state.is_down:
            return KeyState.PRESSED
        return KeyState.JUST_PRESSED
    if not state.is_down:
        return KeyState.RELEASED
    return KeyState.JUST_RELEASED


class Key(IntEnum):
    """Keyboard scancodes."""

    A = 4
    B = 5
    C = 6
    D = 7
    E = 8
    F = 9
    M = 16
    P = 19
    Q = 20
    R = 21
    S = 22
    W = 26
    X = 27
    Z = 29
    RETURN = 40
    ESCAPE = 41
    BACKSPACE = 42
    TAB = 43
    SPACE = 44
    MINUS = 45
    EQUALS = 46
    F1 = 58
    F2 = 59
    F3 = 60
    F4 = 61
    F5 = 62
    F6 = 63
    F7 = 64
    F8 = 65
    F9 = 66
    F10 = 67
    F11 = 68
    F12 = 69
    PAGEUP = 75
    PAGEDOWN = 78
    RIGHT = 79
    LEFT = 80
    DOWN = 81
    UP = 82
    KP_MINUS = 86
    KP_PLUS = 87
    LCTRL = 224
    LSHIFT = 225
    LALT = 226
    RCTRL = 228
    RSHIFT = 229
    RALT = 230


class MouseButton(IntEnum):
    NONE = 0
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


class ControllerButton(IntEnum):
    A = 0
    B = 1
    X = 2
    Y = 3
    BACK = 4
    GUIDE = 5
    START = 6
    LEFT_STICK = 7
    RIGHT_STICK = 8
    LEFT_SHOULDER = 9
    RIGHT_SHOULDER = 10
    DPAD_UP = 11
    DPAD_DOWN = 12
    DPAD_LEFT = 13
    DPAD_RIGHT = 14


class _Controller(Protocol):
    def get_button(self, button: ControllerButton) -> bool: ...

    def get_axis(self, axis: str) -> int: ...


_TRIGGER_AXES: Dict[str, str] = {"left": "triggerleft", "right": "triggerright"}
_STICK_AXES: Dict[str, Tuple[str, str]] = {
    "left": ("leftx", "lefty"),
    "right": ("rightx", "righty"),
}


class Keyboard:
    """Pressed keys for this frame and the previous one."""

    def __init__(self) -> None:
        self._state: frozenset = frozenset()
        self._prev_state: frozenset = frozenset()

    def update(self, pressed_keys: Iterable[Key]) -> None:
        """Start a new frame with the given keys held down."""
        self._prev_state = self._state
        self._state = frozenset(pressed_keys)

    def is_pressed(self, key: Key) -> bool:
        return key in self._state

    def is_just_pressed(self, key: Key) -> bool:
        return key in self._state and key not in self._prev_state

    def is_released(self, key: Key) -> bool:
        return key not in self._state

    def is_just_released(self, key: Key) -> bool:
        return key not in self._state and key in self._prev_state


class Mouse:
    """Mouse position in game coordinates, buttons and wheel."""

    def __init__(self) -> None:
        self.pos = Vec()
        self.old_pos = Vec()
        self.scroll_wheel = 0.0
        self._states: Dict[MouseButton, KeyState] = {
            button: KeyState.RELEASED for button in MouseButton if button is not MouseButton.NONE
        }

    def update(
        self,
        x: float,
        y: float,
        pressed_buttons: Iterable[MouseButton],
        viewport: Rect,
        game_size: Vec,
    ) -> None:
        """Read a new frame: window position, held buttons and the letterboxed viewport."""
        self.old_pos = self.pos
        self.pos = Vec(
            (x - viewport.x) / viewport.w * game_size.x,
            (y - viewport.y) / viewport.h * game_size.y,
        )
        pressed = frozenset(pressed_buttons)
        for button, state in self._states.items():
            self._states[button] = next_key_state(button in pressed, state)

    def _state(self, button: MouseButton) -> KeyState:
        return self._states.get(button, KeyState.RELEASED)

    def is_pressed(self, button: MouseButton = MouseButton.LEFT) -> bool:
        return self._state(button).is_down

    def is_just_pressed(self, button: MouseButton = MouseButton.LEFT) -> bool:
        return self._state(button) is KeyState.JUST_PRESSED

    def is_released(self, button: MouseButton = MouseButton.LEFT) -> bool:
        return not self._state(button).is_down

    def is_just_released(self, button: MouseButton = MouseButton.LEFT) -> bool:
        return self._state(button) is KeyState.JUST_RELEASED

    def delta_movement(self) -> Vec:
        """Previous position minus the current one."""
        return self.old_pos - self.pos


def _check_side(side: str, table: Dict) -> None:
    if side not in table:
        raise ValueError(f"side must be 'left' or 'right', not {side!r}")


class GamePads:
    """Connected controllers, one slot per player, and their button states."""

    def __init__(self, max_gamepads: int = MAX_GAMEPADS) -> None:
        self.controllers: List[Optional[_Controller]] = [None] * max_gamepads
        self._buttons: List[Dict[ControllerButton, KeyState]] = [
            {button: KeyState.RELEASED for button in ControllerButton} for _ in range(max_gamepads)
        ]
        self._triggers: List[Dict[str, KeyState]] = [
            {side: KeyState.RELEASED for side in _TRIGGER_AXES} for _ in range(max_gamepads)
        ]

    def added(self, controller: _Controller) -> Optional[int]:
        """Put a controller in the first free slot; returns the slot, or None if all are taken."""
        for player, current in enumerate(self.controllers):
            if current is None:
                self.controllers[player] = controller
                return player
        return None

    def removed(self, controller: _Controller) -> Optional[int]:
        """Free the slot holding a controller; returns the slot, or None."""
        for player, current in enumerate(self.controllers):
            if current is controller:
                self.controllers[player] = None
                return player
        return None

    def connected_count(self) -> int:
        return sum(1 for c in self.controllers if c is not None)

    def update(self) -> None:
        """Read every connected controller for a new frame."""
        for player, controller in enumerate(self.controllers):
            buttons = self._buttons[player]
            if controller is None:
                for button, state in buttons.items():
                    buttons[button] = next_key_state(False, state)
                continue
            for button, state in buttons.items():
                buttons[button] = next_key_state(bool(controller.get_button(button)), state)
            triggers = self._triggers[player]
            for side, state in triggers.items():
                pressed = self.trigger(player, side) > TRIGGER_PRESS_THRESHOLD
                triggers[side] = next_key_state(pressed, state)

    def is_button_pressed(self, player: int, button: ControllerButton) -> bool:
        return self._buttons[player][button].is_down

    def is_button_just_pressed(self, player: int, button: ControllerButton) -> bool:
        return self._buttons[player][button] is KeyState.JUST_PRESSED

    def is_button_released(self, player: int, button: ControllerButton) -> bool:
        return not self._buttons[player][button].is_down

    def is_button_just_released(self, player: int, button: ControllerButton) -> bool:
        return self._buttons[player][button] is KeyState.JUST_RELEASED

    def trigger(self, player: int, side: str) -> float:
        """Trigger position between 0 and 100; small readings count as 0."""
        _check_side(side, _TRIGGER_AXES)
        controller = self.controllers[player]
        if controller is None:
            return 0.0
        value = controller.get_axis(_TRIGGER_AXES[side]) / AXIS_SCALE
        return value if value > TRIGGER_MIN else 0.0

    def is_trigger_pressed(self, player: int, side: str) -> bool:
        _check_side(side, _TRIGGER_AXES)
        return self._triggers[player][side].is_down

    def stick(self, player: int, side: str, dead_area: float = DEFAULT_DEAD_AREA) -> Vec:
        """Stick position with components between -100 and 100, zeroed inside the dead area."""
        _check_side(side, _STICK_AXES)
        controller = self.controllers[player]
        if controller is None:
            return Vec()
        axis_x, axis_y = _STICK_AXES[side]
        a = controller.get_axis(axis_x) / AXIS_SCALE
        b = controller.get_axis(axis_y) / AXIS_SCALE
        return Vec(a if abs(a) > dead_area else 0.0, b if abs(b) > dead_area else 0.0)