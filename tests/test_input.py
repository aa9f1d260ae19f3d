import pytest

from orbitinvaders.input import ActionInput
from orbitinvaders.vec import Vec


@pytest.fixture
def setup():
    held = {0: set(), 1: set()}
    actions = ActionInput()
    actions.map_action("jump", lambda p: "jump" in held[p])
    actions.map_action("fire", lambda p: "fire" in held[p])
    return actions, held


def test_press_cycle(setup):
    actions, held = setup
    assert actions.is_released(0, "jump")
    held[0].add("jump")
    actions.update(0.1)
    assert actions.is_just_pressed(0, "jump")
    assert actions.is_pressed(0, "jump")
    actions.update(0.1)
    assert actions.is_pressed(0, "jump")
    assert not actions.is_just_pressed(0, "jump")
    held[0].clear()
    actions.update(0.1)
    assert actions.is_just_released(0, "jump")
    assert actions.is_released(0, "jump")
    actions.update(0.1)
    assert not actions.is_just_released(0, "jump")


def test_interval_variants(setup):
    actions, held = setup
    held[0].add("jump")
    actions.update(0.1)
    actions.update(0.1)
    assert actions.is_just_pressed(0, "jump", 1.0)
    assert not actions.is_just_pressed(0, "jump", 0.1)
    held[0].clear()
    actions.update(0.1)
    actions.update(0.1)
    assert actions.is_just_released(0, "jump", 1.0)
    assert not actions.is_just_released(0, "jump")


def test_consume_just_pressed(setup):
    actions, held = setup
    held[0].add("fire")
    actions.update(0.1)
    actions.consume_just_pressed(0, "fire")
    assert not actions.is_just_pressed(0, "fire")
    assert not actions.is_just_pressed(0, "fire", 5.0)
    assert actions.is_pressed(0, "fire")


def test_consume_just_released(setup):
    actions, held = setup
    held[0].add("fire")
    actions.update(0.1)
    held[0].clear()
    actions.update(0.1)
    actions.consume_just_released(0, "fire")
    assert not actions.is_just_released(0, "fire")
    assert not actions.is_just_released(0, "fire", 5.0)
    assert actions.is_released(0, "fire")


def test_players_are_independent(setup):
    actions, held = setup
    held[1].add("jump")
    actions.update(0.1)
    assert actions.is_pressed(1, "jump")
    assert not actions.is_pressed(0, "jump")
    assert actions.is_pressed_any_player("jump")
    assert actions.is_just_pressed_any_player("jump")
    assert not actions.is_pressed_any_player("fire")


def test_ignore_input_only_affects_first_player(setup):
    actions, held = setup
    held[0].add("jump")
    held[1].add("jump")
    actions.ignore_input(True)
    actions.update(0.1)
    assert actions.is_released(0, "jump")
    assert actions.is_pressed(1, "jump")
    actions.ignore_input(False)
    actions.update(0.1)
    assert actions.is_just_pressed(0, "jump")


def test_analog_reader():
    actions = ActionInput()
    actions.map_analog("move", lambda p: Vec(p, -p))
    assert actions.analog(1, "move") == Vec.ZERO
    actions.update(0.1)
    assert actions.analog(1, "move") == Vec(1, -1)
    assert actions.analog(0, "move") == Vec(0, 0)


def test_unmapped_action_is_released(setup):
    actions, _ = setup
    actions.update(0.1)
    assert actions.is_released(0, "crouch")
    assert not actions.is_just_pressed(0, "crouch")


def test_invalid_player_raises(setup):
    actions, _ = setup
    with pytest.raises(IndexError):
        actions.is_pressed(2, "jump")
    with pytest.raises(IndexError):
        actions.analog(-1, "move")