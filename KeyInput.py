import sys
from dataclasses import dataclass

# Tk modifier bits in event.state
SHIFT_MASK = 0x0001
CONTROL_MASK = 0x0004
if sys.platform == "win32":
    ALT_MASK = 0x20000
elif sys.platform == "darwin":
    ALT_MASK = 0x0010
    CONTROL_MASK |= 0x0008  # Command
else:
    ALT_MASK = 0x0008

# Canonical key identifiers are Tk keysyms
PREVIOUS_KEYS = {"Left", "Prior", "KP_Left", "KP_Prior"}
NEXT_KEYS = {"Right", "Next", "KP_Right", "KP_Next"}
UP_KEYS = {"Up", "KP_Up"}
DOWN_KEYS = {"Down", "KP_Down"}
HOME_KEYS = {"Home", "KP_Home"}
END_KEYS = {"End", "KP_End"}
TAB_KEYS = {"Tab", "ISO_Left_Tab"}
PASS_THROUGH_KEYS = TAB_KEYS | {"Return", "KP_Enter", "Escape"}

DIGIT_KEYS = {str(n): str(n) for n in range(10)}
DIGIT_KEYS.update({f"KP_{n}": str(n) for n in range(10)})


@dataclass(frozen=True)
class KeyPress:
    """A discrete key press: keysym plus the modifiers held with it."""
    key: str
    shift: bool = False
    alt: bool = False
    ctrl: bool = False

    @classmethod
    def from_tk_event(cls, event) -> "KeyPress":
        state = event.state if isinstance(event.state, int) else 0
        return cls(
            key=event.keysym,
            shift=bool(state & SHIFT_MASK),
            alt=bool(state & ALT_MASK),
            ctrl=bool(state & CONTROL_MASK),
        )

    @property
    def digit(self):
        """The decimal digit this key types, or None"""
        return DIGIT_KEYS.get(self.key)

    @property
    def is_tab(self) -> bool:
        return self.key in TAB_KEYS
