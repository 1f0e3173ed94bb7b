from dataclasses import dataclass
from enum import Enum


class ButtonKind(Enum):
    PAUSE = "pause"
    FULLSCREEN = "fullscreen"
    RESET = "reset"


# Hit-test priority and top-to-bottom stacking order.
BUTTON_ORDER = (ButtonKind.PAUSE, ButtonKind.FULLSCREEN, ButtonKind.RESET)


@dataclass(frozen=True)
class ButtonSpec:
    glyph: str


BUTTON_SPECS = {
    ButtonKind.PAUSE: ButtonSpec(glyph="❚❚"),
    ButtonKind.FULLSCREEN: ButtonSpec(glyph="⛶"),
    ButtonKind.RESET: ButtonSpec(glyph="↻"),
}
