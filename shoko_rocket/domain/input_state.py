"""Input snapshot handed to the state machine once per frame.

Reading the hardware and deriving joystick flicks happen outside the
engine; these types only carry the finished result.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ButtonState:
    """State of a single button (or joystick flick) for one frame."""

    down: bool = False
    pressed: bool = False
    released: bool = False

    @classmethod
    def just_pressed(cls) -> ButtonState:
        return cls(down=True, pressed=True, released=False)


@dataclass(frozen=True)
class InputState:
    """State of all input devices for one frame.

    ``js_x``/``js_y`` are centred joystick readings in [-2048, 2047]; the
    ``js_*`` buttons are flick edge events derived from them.
    """

    js_x: int = 0
    js_y: int = 0
    js_up: ButtonState = field(default_factory=ButtonState)
    js_down: ButtonState = field(default_factory=ButtonState)
    js_left: ButtonState = field(default_factory=ButtonState)
    js_right: ButtonState = field(default_factory=ButtonState)
    btn_a: ButtonState = field(default_factory=ButtonState)
    btn_b: ButtonState = field(default_factory=ButtonState)
    btn_start: ButtonState = field(default_factory=ButtonState)
    btn_select: ButtonState = field(default_factory=ButtonState)
