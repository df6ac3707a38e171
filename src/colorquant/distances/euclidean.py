"""
Squared Euclidean distances in color space.

Used by both the training-time assignment step and the full-image assigner,
so the two always agree on distances and on tie-breaking.
"""

import torch
from torch import Tensor


def squared_euclidean(points: Tensor, centers: Tensor) -> Tensor:
    """Pairwise squared Euclidean distances.

    Computed from explicit differences rather than the ||x||^2 - 2x.c + ||c||^2
    expansion so that a point equal to a center gets a distance of exactly 0.

    Args:
        points: (n, d) tensor of points
        centers: (k, d) tensor of centers

    Returns:
        (n, k) tensor of squared distances
    """
    if points.dim() != 2 or centers.dim() != 2:
        raise ValueError("points and centers must both be 2D")
    if points.shape[1] != centers.shape[1]:
        raise ValueError(f"Dimension mismatch: points have {points.shape[1]}, "
                         f"centers have {centers.shape[1]}")

    diff = points.unsqueeze(1) - centers.unsqueeze(0)
    return torch.sum(diff * diff, dim=2)


def argmin_lowest_index(distances: Tensor) -> Tensor:
    """Row-wise argmin where exact ties go to the lowest column index.

    Args:
        distances: (n, k) distance matrix

    Returns:
        (n,) int64 tensor of column indices
    """
    n_clusters = distances.shape[1]
    min_values = distances.min(dim=1, keepdim=True).values
    ids = torch.arange(n_clusters, device=distances.device).expand_as(distances)
    # Non-minimal columns get k so they never win the min below
    candidates = torch.where(distances == min_values, ids, torch.full_like(ids, n_clusters))
    return candidates.min(dim=1).values
