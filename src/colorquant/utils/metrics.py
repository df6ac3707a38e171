"""
Quality metrics for quantized images.
"""

from typing import Union
import torch
from torch import Tensor

from ..base.data_structures import CentroidSet


def inertia(X: Tensor, labels: Tensor, centers: Union[Tensor, CentroidSet]) -> float:
    """Compute sum of squared distances to assigned centers (inertia).

    Args:
        X: (n, d) data points
        labels: (n,) cluster labels
        centers: (k, d) cluster centers or a CentroidSet

    Returns:
        Total inertia (lower is better)
    """
    if isinstance(centers, CentroidSet):
        centers = centers.means
    centers = centers.to(X.device)

    total = 0.0
    n_clusters = centers.shape[0]

    for k in range(n_clusters):
        mask = labels == k
        if mask.sum() > 0:
            cluster_points = X[mask]
            distances = torch.sum((cluster_points - centers[k]) ** 2, dim=1)
            total += distances.sum().item()

    return total


def mean_squared_error(original: Tensor, reconstructed: Tensor) -> float:
    """Per-channel mean squared error between two images of the same shape.

    Args:
        original: (H, W, 3) image
        reconstructed: (H, W, 3) image

    Returns:
        MSE in the images' channel units
    """
    if original.shape != reconstructed.shape:
        raise ValueError(f"Shape mismatch: {tuple(original.shape)} vs {tuple(reconstructed.shape)}")
    diff = original.to(torch.float64) - reconstructed.to(torch.float64)
    return float(torch.mean(diff * diff).item())


def count_colors(image: Tensor) -> int:
    """Number of distinct colors in an (H, W, C) or (n, C) image."""
    pixels = image.reshape(-1, image.shape[-1])
    return int(torch.unique(pixels, dim=0).shape[0])
