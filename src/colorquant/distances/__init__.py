"""Distance computations."""

from .euclidean import squared_euclidean, argmin_lowest_index

__all__ = [
    'squared_euclidean',
    'argmin_lowest_index'
]
