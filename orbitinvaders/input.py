"""Action-based input: named actions mapped to device predicates, per player."""

from __future__ import annotations

from typing import Callable, Dict, Hashable, List, Optional

from .raw_input import KeyState
from .vec import Vec

MAX_PLAYERS = 2
_TIME_CAP = 1000.0
_CONSUME_PENALTY = 1000.0


class ActionInput:
    """Tracks pressed/released state and hold time of mapped actions for each player."""

    def __init__(self, max_players: int = MAX_PLAYERS) -> None:
        self.max_players = max_players
        self._actions: Dict[Hashable, Callable[[int], bool]] = {}
        self._analogs: Dict[Hashable, Callable[[int], Vec]] = {}
        self._states: List[Dict[Hashable, KeyState]] = [{} for _ in range(max_players)]
        self._times: List[Dict[Hashable, float]] = [{} for _ in range(max_players)]
        self._analog_states: List[Dict[Hashable, Vec]] = [{} for _ in range(max_players)]
        self._ignore_input = False

    def map_action(self, key: Hashable, predicate: Callable[[int], bool]) -> None:
        """Bind an action to a function telling whether a player holds it."""
        self._actions[key] = predicate
        for states in self._states:
            states.setdefault(key, KeyState.RELEASED)
        for times in self._times:
            times.setdefault(key, 0.0)

    def map_analog(self, analog: Hashable, reader: Callable[[int], Vec]) -> None:
        """Bind an analog input to a function reading it for a player."""
        self._analogs[analog] = reader

    def ignore_input(self, enable: bool) -> None:
        """While enabled, the first player's actions read as released."""
        self._ignore_input = enable

    def _check_player(self, player: int) -> None:
        if not 0 <= player < self.max_players:
            raise IndexError(f"player {player} out of range 0..{self.max_players - 1}")

    def update(self, dt: float) -> None:
        """Poll every mapped action and analog input for all players."""
        for player in range(self.max_players):
            states = self._states[player]
            times = self._times[player]
            for key, predicate in self._actions.items():
                pressed = False if (player == 0 and self._ignore_input) else bool(predicate(player))
                state = states[key]
                if pressed == state.is_down:
                    states[key] = KeyState.PRESSED if pressed else KeyState.RELEASED
                    if times[key] < _TIME_CAP:
                        times[key] += dt
                else:
                    states[key] = KeyState.JUST_PRESSED if pressed else KeyState.JUST_RELEASED
                    times[key] = dt
            for analog, reader in self._analogs.items():
                self._analog_states[player][analog] = reader(player)

    def _state(self, player: int, key: Hashable) -> KeyState:
        self._check_player(player)
        return self._states[player].get(key, KeyState.RELEASED)

    def _time(self, player: int, key: Hashable) -> float:
        return self._times[player].get(key, 0.0)

    def analog(self, player: int, analog: Hashable) -> Vec:
        self._check_player(player)
        return self._analog_states[player].get(analog, Vec.ZERO)

    def is_pressed(self, player: int, key: Hashable) -> bool:
        return self._state(player, key).is_down

    def is_pressed_any_player(self, key: Hashable) -> bool:
        return any(self.is_pressed(p, key) for p in range(self.max_players))

    def is_just_pressed(self, player: int, key: Hashable, interval: Optional[float] = None) -> bool:
        """True on the frame the action is pressed, or within interval seconds of it."""
        state = self._state(player, key)
        if state is KeyState.JUST_PRESSED:
            return True
        return interval is not None and state is KeyState.PRESSED and self._time(player, key) < interval

    def is_just_pressed_any_player(self, key: Hashable) -> bool:
        return any(self.is_just_pressed(p, key) for p in range(self.max_players))

    def is_released(self, player: int, key: Hashable) -> bool:
        return not self._state(player, key).is_down

    def is_just_released(self, player: int, key: Hashable, interval: Optional[float] = None) -> bool:
        """True on the frame the action is released, or within interval seconds of it."""
        state = self._state(player, key)
        if state is KeyState.JUST_RELEASED:
            return True
        return interval is not None and state is KeyState.RELEASED and self._time(player, key) < interval

    def consume_just_pressed(self, player: int, key: Hashable) -> None:
        """Make later just-pressed checks for this press return False."""
        self._check_player(player)
        self._states[player][key] = KeyState.PRESSED
        self._times[player][key] = self._time(player, key) + _CONSUME_PENALTY

    def consume_just_released(self, player: int, key: Hashable) -> None:
        """Make later just-released checks for this release return False."""
        self._check_player(player)
        self._states[player][key] = KeyState.RELEASED
        self._times[player][key] = self._time(player, key) + _CONSUME_PENALTY