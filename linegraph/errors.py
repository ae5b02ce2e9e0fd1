from __future__ import annotations


class LineGraphDataError(ValueError):
    """Raised when caller input cannot be interpreted as a point sequence."""
