"""Assignment strategies."""

from .hard import HardAssignment

__all__ = [
    'HardAssignment'
]
