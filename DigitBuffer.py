from collections import deque
from typing import Deque


class DigitBuffer:
    """Ring buffer holding the most recently typed digits of a direct entry."""

    def __init__(self, size: int = 2):
        self.size = size
        self.digits: Deque[str] = deque(maxlen=size)

    def put(self, digit: str):
        """Append a digit, dropping the oldest one once the buffer is full"""
        if len(digit) != 1 or digit not in "0123456789":
            raise ValueError(f"Not a decimal digit: {digit!r}")
        self.digits.append(digit)

    def clear(self):
        self.digits.clear()

    def value(self) -> int:
        """Integer formed by the buffered digits in entry order (0 when empty)"""
        return int("".join(self.digits) or "0")

    def __len__(self):
        return len(self.digits)

    def __str__(self):
        return "".join(self.digits)
