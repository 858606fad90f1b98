class TimeSegment:
    def __init__(self, value: int, minimum: int, maximum: int):
        """
        A single clamped time component (hours, minutes or seconds).
        :param value: Initial value
        :param minimum: Lowest accepted value
        :param maximum: Highest accepted value
        """
        if minimum > maximum:
            raise ValueError(f"Invalid bounds: {minimum} > {maximum}")
        if not minimum <= value <= maximum:
            raise ValueError(f"Initial value {value} outside [{minimum}, {maximum}]")
        self.value = value
        self.min = minimum
        self.max = maximum

    def set_value(self, value: int) -> bool:
        """Assign value if it lies within bounds, otherwise leave it untouched"""
        if value < self.min or value > self.max:
            return False
        self.value = value
        return True

    def increment(self):
        self.value = min(self.value + 1, self.max)

    def decrement(self):
        self.value = max(self.value - 1, self.min)

    def formatted(self) -> str:
        """Return the value zero-padded to two characters ('0#')"""
        return f"{self.value:02d}"

    def __repr__(self):
        return f"TimeSegment(value={self.value}, min={self.min}, max={self.max})"
