import argparse
import logging
import tkinter as tk
from tkinterdnd2 import DND_TEXT, TkinterDnD
from TimeInputField import TimeInputField
from TimePickerController import IDLE_TIMEOUT_MS

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    p = argparse.ArgumentParser(
        prog="timepicker",
        description="Keyboard driven HH:MM:SS time fields.",
    )
    p.add_argument("--initial", type=str, default="00:00:00", metavar="HH:MM:SS",
                   help="Initial time of both fields (default: 00:00:00)")
    p.add_argument("--idle-timeout", type=int, default=IDLE_TIMEOUT_MS, metavar="MS",
                   help=f"Digit buffer reset delay in ms (default: {IDLE_TIMEOUT_MS})")
    p.add_argument("--no-idle-reset", action="store_true",
                   help="Keep typed digits until the next navigation key")
    p.add_argument("--verbose", action="store_true",
                   help="Log decoded keys and value changes")
    return p


def on_drop(field, event):
    """Apply dropped HH:MM:SS text to the field"""
    text = event.data.strip()
    if text.startswith('{') and text.endswith('}'):
        text = text[1:-1]
    if not field.set_time_str(text):
        logger.info("Unsupported time text dropped: %s", text)
    return event.action


def make_field(master, args):
    idle_timeout = None if args.no_idle_reset else args.idle_timeout
    field = TimeInputField(master, initial_time=args.initial, idle_timeout_ms=idle_timeout,
                           font=("Courier", 14))
    field.drop_target_register(DND_TEXT)
    field.dnd_bind('<<Drop>>', lambda event: on_drop(field, event))
    return field


def show_change(status, name, field):
    status.config(text=f"{name}: {field.get_time_str()} ({field.get_time_in_seconds()} s)")


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    root = TkinterDnD.Tk()  # Use TkinterDnD for drag-and-drop support
    root.title("Time Picker")

    frame = tk.Frame(root, padx=10, pady=10)
    frame.pack(fill=tk.BOTH, expand=True)
    status = tk.Label(frame, text="", anchor="w")

    tk.Label(frame, text="End (HH:MM:SS):").grid(row=1, column=0, sticky="w", padx=5, pady=5)
    end_field = make_field(frame, args).initialize()
    end_field.grid(row=1, column=1, padx=5, pady=5)
    end_field.bind("<<TimeChanged>>", lambda event: show_change(status, "End", end_field))

    tk.Label(frame, text="Start (HH:MM:SS):").grid(row=0, column=0, sticky="w", padx=5, pady=5)
    start_field = make_field(frame, args)
    start_field.grid(row=0, column=1, padx=5, pady=5)
    start_field.bind("<<TimeChanged>>", lambda event: show_change(status, "Start", start_field))
    start_field.initialize()

    status.grid(row=2, column=0, columnspan=2, sticky="we", padx=5, pady=(5, 0))

    root.mainloop()


if __name__ == "__main__":
    main()
