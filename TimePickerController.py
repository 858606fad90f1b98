import logging
from typing import Callable, List, Optional, Tuple

from DigitBuffer import DigitBuffer
from KeyInput import (DOWN_KEYS, END_KEYS, HOME_KEYS, NEXT_KEYS,
                      PREVIOUS_KEYS, UP_KEYS, KeyPress)
from TimeSegment import TimeSegment

logger = logging.getLogger(__name__)

IDLE_TIMEOUT_MS = 1000  # ms of digit inactivity before the entry buffer resets
SEPARATOR = ":"
SEGMENT_BOUNDS = ((0, 23), (0, 59), (0, 59))  # hours, minutes, seconds
SEGMENT_WIDTH = 2


class TimePickerController:
    def __init__(self, host, idle_timeout_ms: Optional[int] = IDLE_TIMEOUT_MS):
        """
        Keyboard controller for an HH:MM:SS field.
        :param host: Field the controller draws into. Must provide
                     show(text, start, end), after(ms, func) and after_cancel(id)
                     (any tkinter widget supplies the last two).
        :param idle_timeout_ms: Delay after the last digit before the entry
                                buffer is cleared; None keeps typed digits
                                until the next navigation.
        """
        self.host = host
        self.idle_timeout_ms = idle_timeout_ms

        # Model
        self.segments: List[TimeSegment] = [TimeSegment(lo, lo, hi) for lo, hi in SEGMENT_BOUNDS]
        self.active_index = 0
        self.buffer = DigitBuffer(SEGMENT_WIDTH)

        # State tracking
        self.pending_timer = None  # Idle reset timer ID
        self.rendered_text: Optional[str] = None
        self._change_listeners: List[Callable[[str], None]] = []

        self._key_actions = {}
        for keys, action in ((PREVIOUS_KEYS, self.previous),
                             (NEXT_KEYS, self.next),
                             (UP_KEYS, self.up),
                             (DOWN_KEYS, self.down),
                             (HOME_KEYS, self.home),
                             (END_KEYS, self.end)):
            for key in keys:
                self._key_actions[key] = action

    # --------------------- Key Decoding ---------------------
    def handle_key(self, key: KeyPress) -> bool:
        """
        Apply a key press to the model and re-render.
        :return: True when the field's default handling must be suppressed
        """
        # Leave modified key presses (shortcuts) to the host
        if key.alt or key.ctrl:
            return False

        action = self._key_actions.get(key.key)
        if action is not None:
            logger.debug("Key %s -> %s", key.key, action.__name__)
            action()
        elif key.shift and not key.is_tab:
            # Swallow Shift key presses, except if they are combined with Tab
            logger.debug("Ignoring shifted key %s", key.key)
        elif key.digit is not None:
            self.input_digit(key.digit)
        else:
            return False

        self.render()
        return True

    # --------------------- Digit Entry ---------------------
    def input_digit(self, digit: str):
        """Type a digit into the active segment"""
        self.buffer.put(digit)
        accepted = self.active_segment.set_value(self.buffer.value())
        logger.debug("Buffer '%s' -> segment %d (%s)", self.buffer, self.active_index,
                     "accepted" if accepted else "rejected")
        self.restart_idle_timer()

    def restart_idle_timer(self):
        """Reset the idle countdown that clears the digit buffer"""
        self.cancel_idle_timer()
        if self.idle_timeout_ms is not None:
            self.pending_timer = self.host.after(self.idle_timeout_ms, self.on_idle_timeout)

    def cancel_idle_timer(self):
        """Cancel pending buffer reset"""
        if self.pending_timer is not None:
            self.host.after_cancel(self.pending_timer)
            self.pending_timer = None

    def on_idle_timeout(self):
        self.pending_timer = None
        self.buffer.clear()
        logger.debug("Digit buffer cleared after %d ms idle", self.idle_timeout_ms)

    def reset_entry(self):
        """Forget any partially typed value"""
        self.buffer.clear()
        self.cancel_idle_timer()

    # --------------------- Navigation & Adjustment ---------------------
    def next(self):
        self.active_index = (self.active_index + 1) % len(self.segments)
        self.reset_entry()

    def previous(self):
        self.active_index = (self.active_index - 1 + len(self.segments)) % len(self.segments)
        self.reset_entry()

    def home(self):
        self.active_index = 0
        self.reset_entry()

    def end(self):
        self.active_index = len(self.segments) - 1
        self.reset_entry()

    def up(self):
        self.active_segment.increment()

    def down(self):
        self.active_segment.decrement()

    def focus(self):
        """Field (re)gained focus: start over at the hours segment"""
        self.active_index = 0
        self.reset_entry()
        self.render()

    @property
    def active_segment(self) -> TimeSegment:
        return self.segments[self.active_index]

    # --------------------- Value Access ---------------------
    @property
    def time(self) -> Tuple[int, int, int]:
        return tuple(segment.value for segment in self.segments)

    def set_time(self, hours: int, minutes: int, seconds: int):
        """Set all three segments; components outside their bounds are ignored"""
        for segment, value in zip(self.segments, (hours, minutes, seconds)):
            segment.set_value(value)
        self.reset_entry()
        self.render()

    def dispose(self):
        """Drop the pending timer and listeners; call when the host goes away"""
        self.cancel_idle_timer()
        self._change_listeners.clear()

    # --------------------- Rendering ---------------------
    @property
    def text(self) -> str:
        return SEPARATOR.join(segment.formatted() for segment in self.segments)

    @property
    def highlight_range(self) -> Tuple[int, int]:
        """Half-open character range of the active segment within text"""
        start = self.active_index * (SEGMENT_WIDTH + len(SEPARATOR))
        return start, start + SEGMENT_WIDTH

    def render(self):
        """Push text and selection to the host, notifying listeners on change"""
        text = self.text
        start, end = self.highlight_range
        self.host.show(text, start, end)
        if text != self.rendered_text:
            self.rendered_text = text
            logger.debug("Time changed to %s", text)
            for listener in list(self._change_listeners):
                listener(text)

    def add_change_listener(self, callback: Callable[[str], None]):
        self._change_listeners.append(callback)

    def remove_change_listener(self, callback: Callable[[str], None]):
        if callback in self._change_listeners:
            self._change_listeners.remove(callback)
