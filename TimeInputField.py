import logging
import re
import tkinter as tk

from KeyInput import KeyPress
from TimePickerController import IDLE_TIMEOUT_MS, TimePickerController

logger = logging.getLogger(__name__)

FOCUS_RENDER_DELAY_MS = 250  # ms before re-asserting the selection after focus
TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{1,2}):(\d{1,2})\s*$")


def parse_time_str(text):
    """
    Split 'HH:MM:SS' into integers.
    :return: (hours, minutes, seconds) or None when text is malformed
    """
    match = TIME_PATTERN.match(text)
    if not match:
        return None
    return tuple(int(part) for part in match.groups())


class TimeInputField(tk.Entry):
    def __init__(self, master, initial_time="00:00:00", idle_timeout_ms=IDLE_TIMEOUT_MS, **kwargs):
        """
        A keyboard driven time input widget in HH:MM:SS format.
        Arrow keys move between and adjust the hour/minute/second segments,
        digits type into the selected one.
        """
        kwargs.setdefault("width", 8)
        super().__init__(master, exportselection=False, **kwargs)
        self._rendering = False

        # Only the controller may change the text.
        vcmd = (self.register(self.validate_edit), '%P')
        self.configure(validate='key', validatecommand=vcmd)

        self.controller = TimePickerController(self, idle_timeout_ms=idle_timeout_ms)
        self.controller.add_change_listener(self._on_time_changed)
        self.focus_after_id = None
        self.bind("<Destroy>", self.handle_destroy, add="+")

        if not self.set_time_str(initial_time):
            self.controller.render()

    def initialize(self):
        """Bind keyboard and focus events and take the focus"""
        self.bind("<KeyPress>", self.handle_key_press)
        self.bind("<FocusIn>", self.handle_focus_in)
        self.bind("<ButtonRelease-1>", self.handle_click)
        self.focus_set()
        self.handle_focus_in()
        return self

    # --------------------- Host Interface ---------------------
    def show(self, text, start, end):
        """Replace the text and select [start, end)"""
        self._rendering = True
        try:
            self.delete(0, tk.END)
            self.insert(0, text)
        finally:
            self._rendering = False
        self.selection_range(start, end)
        self.icursor(end)

    def validate_edit(self, value):
        return self._rendering

    def _on_time_changed(self, text):
        # Mirrors an input/change notification for the rest of the UI
        self.event_generate("<<TimeChanged>>", when="tail")

    # --------------------- Event Handlers ---------------------
    def handle_key_press(self, event):
        if self.controller.handle_key(KeyPress.from_tk_event(event)):
            return "break"
        return None

    def handle_focus_in(self, event=None):
        """Restart at the hours segment and re-select it once Tk settles"""
        self.controller.focus()
        if self.focus_after_id:
            self.after_cancel(self.focus_after_id)
        self.focus_after_id = self.after(FOCUS_RENDER_DELAY_MS, self._render_after_focus)

    def _render_after_focus(self):
        self.focus_after_id = None
        self.controller.render()

    def handle_click(self, event):
        # Clicking must not leave a stray caret; keep the active segment selected
        self.controller.render()

    def handle_destroy(self, event):
        if event.widget is not self:
            return
        if self.focus_after_id:
            self.after_cancel(self.focus_after_id)
            self.focus_after_id = None
        self.controller.dispose()

    # --------------------- Value Access ---------------------
    def set_time_str(self, text):
        """
        Apply an 'HH:MM:SS' string.
        :return: False if text is malformed (the value is left unchanged)
        """
        parts = parse_time_str(text)
        if parts is None:
            logger.debug("Ignoring malformed time %r", text)
            return False
        self.controller.set_time(*parts)
        return True

    def get_time_str(self):
        """Return the time in HH:MM:SS format with proper zero-padding."""
        return self.controller.text

    def get_time_in_seconds(self):
        """
        Convert the current input into total seconds.
        """
        hours, minutes, seconds = self.controller.time
        return hours * 3600 + minutes * 60 + seconds
