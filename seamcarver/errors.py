"""
Exceptions raised by the seam carver.

Both subclass the matching builtin so callers may catch either.
"""


class InvalidArgumentError(ValueError):
    """Missing picture or seam, malformed seam, or a dimension already at 1."""


class IndexOutOfRangeError(IndexError):
    """Pixel coordinate outside the current picture."""
