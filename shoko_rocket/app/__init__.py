"""Application layer: the Intro/Menu/Game state machine."""

from shoko_rocket.app.state_machine import (
    AppState,
    GameState,
    IntroState,
    MenuState,
    StateMachine,
)

__all__ = [
    "AppState",
    "GameState",
    "IntroState",
    "MenuState",
    "StateMachine",
]
