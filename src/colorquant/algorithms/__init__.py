"""Clustering algorithm implementations."""

from .kmeans import KMeans, KMeansObjective

__all__ = [
    'KMeans',
    'KMeansObjective'
]
