import pytest

from orbitinvaders.bounds import Rect
from orbitinvaders.input import ActionInput
from orbitinvaders.input_conf import AnalogInput, GameKey, map_game_keys
from orbitinvaders.raw_input import ControllerButton, GamePads, Key, Keyboard, Mouse, MouseButton
from orbitinvaders.vec import Vec


class FakeController:
    def __init__(self, buttons=(), axes=None):
        self.buttons = set(buttons)
        self.axes = dict(axes or {})

    def get_button(self, button):
        return button in self.buttons

    def get_axis(self, axis):
        return self.axes.get(axis, 0)


@pytest.fixture
def devices():
    actions = ActionInput()
    keyboard = Keyboard()
    mouse = Mouse()
    pads = GamePads()
    map_game_keys(actions, keyboard, mouse, pads)
    return actions, keyboard, mouse, pads


def test_keyboard_up_for_first_player_only(devices):
    actions, keyboard, _, _ = devices
    keyboard.update({Key.W})
    actions.update(0.016)
    assert actions.is_just_pressed(0, GameKey.UP)
    assert actions.is_released(1, GameKey.UP)


def test_arrow_keys_left_and_right(devices):
    actions, keyboard, _, _ = devices
    keyboard.update({Key.LEFT})
    actions.update(0.016)
    assert actions.is_pressed(0, GameKey.LEFT)
    assert actions.is_released(0, GameKey.RIGHT)
    keyboard.update({Key.D})
    actions.update(0.016)
    assert actions.is_pressed(0, GameKey.RIGHT)
    assert actions.is_just_released(0, GameKey.LEFT)


def test_down_reads_pressed_with_stick_at_rest(devices):
    actions, keyboard, _, _ = devices
    keyboard.update(set())
    actions.update(0.016)
    assert actions.is_pressed(0, GameKey.DOWN)
    assert actions.is_released(0, GameKey.UP)


def test_start_from_escape(devices):
    actions, keyboard, _, _ = devices
    keyboard.update({Key.ESCAPE})
    actions.update(0.016)
    assert actions.is_pressed(0, GameKey.START)


def test_shoot_from_mouse(devices):
    actions, _, mouse, _ = devices
    mouse.update(0, 0, [MouseButton.LEFT], Rect(0, 0, 800, 800), Vec(800, 800))
    actions.update(0.016)
    assert actions.is_pressed(0, GameKey.SHOOT)
    assert actions.is_released(1, GameKey.SHOOT)


def test_shoot_and_start_from_second_controller(devices):
    actions, _, _, pads = devices
    pads.added(FakeController())
    pads.added(FakeController(buttons={ControllerButton.X, ControllerButton.START}))
    pads.update()
    actions.update(0.016)
    assert actions.is_pressed(1, GameKey.SHOOT)
    assert actions.is_pressed(1, GameKey.START)
    assert actions.is_released(0, GameKey.SHOOT)


def test_shoot_from_right_trigger(devices):
    actions, _, _, pads = devices
    pads.added(FakeController(axes={"triggerright": 32767}))
    pads.update()
    actions.update(0.016)
    assert actions.is_pressed(0, GameKey.SHOOT)


def test_move_analog_from_keyboard(devices):
    actions, keyboard, _, _ = devices
    keyboard.update({Key.W})
    actions.update(0.016)
    assert actions.analog(0, AnalogInput.MOVE) == Vec(0, -100)
    keyboard.update({Key.S, Key.D})
    actions.update(0.016)
    assert actions.analog(0, AnalogInput.MOVE) == Vec(100, 100)


def test_move_analog_falls_back_to_stick(devices):
    actions, keyboard, _, pads = devices
    pads.added(FakeController(axes={"leftx": 20000, "lefty": -20000}))
    keyboard.update(set())
    actions.update(0.016)
    assert actions.analog(0, AnalogInput.MOVE) == pads.stick(0, "left")
    assert actions.analog(0, AnalogInput.MOVE).x > 0
    assert actions.is_pressed(0, GameKey.UP)
    assert actions.is_pressed(0, GameKey.RIGHT)


def test_dpad_maps_to_direction(devices):
    actions, _, _, pads = devices
    pads.added(FakeController(buttons={ControllerButton.DPAD_LEFT}))
    pads.update()
    actions.update(0.016)
    assert actions.is_pressed(0, GameKey.LEFT)
    assert actions.is_released(0, GameKey.RIGHT)