"""
Full-image assignment: label every pixel with its nearest centroid.
"""

from typing import Optional, Union
import torch
from torch import Tensor

from ..base.data_structures import CentroidSet
from ..distances.euclidean import squared_euclidean, argmin_lowest_index
from ..utils.device import get_batch_size


def assign_labels(features: Tensor, centroids: Union[CentroidSet, Tensor],
                  batch_size: Optional[int] = None) -> Tensor:
    """Nearest-centroid label for every feature vector.

    Uses the same squared Euclidean distance and lowest-identifier tie-break
    as the trainer's assignment step. Rows are processed in batches to bound
    the size of the distance matrix; the result does not depend on the
    batch size. Neither input is modified.

    Args:
        features: (n, d) full feature set
        centroids: CentroidSet or (K, d) tensor
        batch_size: Rows per batch (None to size from a memory budget)

    Returns:
        (n,) int64 label array
    """
    means = centroids.means if isinstance(centroids, CentroidSet) else centroids
    means = means.to(device=features.device, dtype=features.dtype)

    if means.dim() != 2 or means.shape[0] < 1:
        raise ValueError("centroids must be a non-empty (K, d) set")

    n_points = features.shape[0]
    if batch_size is None:
        batch_size = get_batch_size(n_points, means.shape[0], means.shape[1])
    elif batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")

    labels = torch.empty(n_points, dtype=torch.long, device=features.device)
    for start in range(0, n_points, batch_size):
        stop = min(start + batch_size, n_points)
        distances = squared_euclidean(features[start:stop], means)
        labels[start:stop] = argmin_lowest_index(distances)

    return labels
