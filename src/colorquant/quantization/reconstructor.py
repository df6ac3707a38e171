"""
Image reconstruction from labels and centroids.
"""

from typing import Union
import torch
from torch import Tensor

from ..base.data_structures import CentroidSet
from ..utils.validation import check_image_shape, validate_labels
from .features import MAX_CHANNEL_VALUE


def palette_colors(centroids: Union[CentroidSet, Tensor],
                   max_value: int = MAX_CHANNEL_VALUE) -> Tensor:
    """Denormalize centroids to integer colors.

    Values are rounded to the nearest integer and clamped to [0, max_value].

    Returns:
        (K, d) tensor, uint8 when max_value fits in a byte, int64 otherwise
    """
    means = centroids.means if isinstance(centroids, CentroidSet) else centroids
    colors = torch.clamp(torch.round(means.to(torch.float64) * max_value), 0, max_value)
    dtype = torch.uint8 if max_value <= 255 else torch.int64
    return colors.to(dtype)


def reconstruct_image(labels: Tensor, centroids: Union[CentroidSet, Tensor],
                      width: int, height: int,
                      max_value: int = MAX_CHANNEL_VALUE) -> Tensor:
    """Build the output image by painting each pixel with its centroid color.

    Args:
        labels: (width * height,) label array in row-major order
        centroids: CentroidSet or (K, d) tensor
        width: Image width
        height: Image height
        max_value: Largest channel value of the output encoding

    Returns:
        (height, width, d) image tensor

    Raises:
        InputShapeMismatch: If labels do not cover width * height pixels
        ValueError: If a label is not a valid centroid identifier
    """
    n_labels = labels.shape[0] if isinstance(labels, Tensor) else len(labels)
    check_image_shape(n_labels, width, height)

    palette = palette_colors(centroids, max_value=max_value)
    labels = validate_labels(labels, n_clusters=palette.shape[0], n_samples=width * height)

    pixels = palette[labels.to(palette.device)]
    return pixels.reshape(height, width, palette.shape[1])
