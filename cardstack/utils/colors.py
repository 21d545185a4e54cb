import random

from PySide6.QtGui import QColor


def random_int(lower: int, upper: int) -> int:
    """Return a uniformly random integer in [lower, upper]."""
    if not lower < upper:
        raise ValueError(f'`lower` ({lower}) must be less than `upper` ({upper})')
    return lower + random.randrange(upper + 1 - lower)


def random_color() -> QColor:
    """Return an opaque color with random red, green and blue channels."""
    return QColor(random_int(0, 255), random_int(0, 255), random_int(0, 255), 255)
