from datetime import time


def hm(value: str) -> time:
    """Parse ``"HH:MM"`` into a ``time``."""
    hours, minutes = value.split(":")
    return time(int(hours), int(minutes))
