"""Top-level application state machine: Intro, Menu and Game.

Each state is a small dataclass; ``StateMachine`` dispatches on the state
type once per frame. A state may ask for a transition by returning the next
state from its tick. Any request (from a state or from
``request_transition``) starts a grace period of ``TRANSITION_FRAMES`` during
which the outgoing state keeps ticking; after it the machine switches to the
target and ticks it in the same frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shoko_rocket.config.constants import (
    DEFAULT_MAP_COUNT,
    INTRO_TIMEOUT_FRAMES,
    TRANSITION_FRAMES,
)
from shoko_rocket.domain.input_state import InputState
from shoko_rocket.domain.world import World
from shoko_rocket.domain.world_state import WorldStateChange

logger = logging.getLogger(__name__)


@dataclass
class IntroState:
    """Splash screen; leaves for the menu on a button press or after a timeout."""

    frame: int = 0
    transition_started: bool = False


@dataclass
class MenuState:
    """Level selection with a wrapping map index."""

    map_index: int = 0
    map_count: int = DEFAULT_MAP_COUNT

    def __post_init__(self) -> None:
        if self.map_count < 1:
            raise ValueError("map_count must be >= 1")
        if not 0 <= self.map_index < self.map_count:
            raise ValueError(f"map_index must be in [0, {self.map_count})")


@dataclass
class GameState:
    """Gameplay on the machine's world."""


AppState = IntroState | MenuState | GameState


class StateMachine:
    """Owns the current AppState, a pending target and the world being played."""

    def __init__(self, world: World | None = None, map_count: int = DEFAULT_MAP_COUNT) -> None:
        if map_count < 1:
            raise ValueError("map_count must be >= 1")
        self.world = world if world is not None else World()
        self.map_count = map_count
        self.last_outcome = WorldStateChange.NO_CHANGE
        self._state: AppState = IntroState()
        self._pending: AppState | None = None
        self._timer = 0

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def target_state(self) -> AppState:
        """State the machine is heading to (the current state when idle)."""
        return self._pending if self._pending is not None else self._state

    @property
    def transition_timer(self) -> int:
        return self._timer

    @property
    def in_transition(self) -> bool:
        return self._pending is not None

    def request_transition(self, target: AppState) -> None:
        """Schedule a switch to ``target`` after the grace period."""
        logger.info(
            "Transition requested: %s -> %s",
            type(self._state).__name__,
            type(target).__name__,
        )
        self._pending = target
        self._timer = TRANSITION_FRAMES

    def tick(self, inputs: InputState) -> None:
        if self._pending is not None:
            if self._timer > 0:
                self._timer -= 1
            else:
                self._state = self._pending
                self._pending = None
                logger.debug("Entered %s", type(self._state).__name__)

        requested = self._tick_state(inputs)
        if requested is not None:
            self.request_transition(requested)

    def _tick_state(self, inputs: InputState) -> AppState | None:
        state = self._state
        if isinstance(state, IntroState):
            return self._tick_intro(state, inputs)
        if isinstance(state, MenuState):
            return self._tick_menu(state, inputs)
        if isinstance(state, GameState):
            return self._tick_game(state, inputs)
        raise TypeError(f"unknown app state: {state!r}")

    def _tick_intro(self, state: IntroState, inputs: InputState) -> AppState | None:
        state.frame += 1
        if state.transition_started:
            return None
        if (
            inputs.btn_start.pressed
            or inputs.btn_a.pressed
            or inputs.btn_b.pressed
            or state.frame == INTRO_TIMEOUT_FRAMES
        ):
            state.transition_started = True
            return MenuState(map_index=0, map_count=self.map_count)
        return None

    def _tick_menu(self, state: MenuState, inputs: InputState) -> AppState | None:
        if inputs.js_up.pressed:
            state.map_index = (state.map_index - 1) % state.map_count
        if inputs.js_down.pressed:
            state.map_index = (state.map_index + 1) % state.map_count
        return None

    def _tick_game(self, state: GameState, inputs: InputState) -> AppState | None:
        change = self.world.tick()
        if change is not WorldStateChange.NO_CHANGE:
            self.last_outcome = change
        return None
