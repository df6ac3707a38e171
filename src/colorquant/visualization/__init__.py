"""Visualization utilities for quantization results."""

from .plot_palette import (
    plot_palette,
    plot_color_clusters_3d
)

__all__ = [
    'plot_palette',
    'plot_color_clusters_3d'
]
