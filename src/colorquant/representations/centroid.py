"""
Centroid representation for K-means clustering.

A color cluster is a single point in normalized RGB space.
"""

from torch import Tensor
import torch

from ..base.interfaces import ClusterRepresentation


class CentroidRepresentation(ClusterRepresentation):
    """Cluster represented by a single centroid point.

    Args:
        mean: (d,) starting centroid; copied and stored as float32
    """

    def __init__(self, mean: Tensor):
        if mean.dim() != 1:
            raise ValueError(f"Centroid must be 1D, got shape {tuple(mean.shape)}")
        self._mean = mean.detach().clone().to(torch.float32)

    @property
    def mean(self) -> Tensor:
        return self._mean

    @property
    def dimension(self) -> int:
        return self._mean.shape[0]

    def distance_to_point(self, points: Tensor) -> Tensor:
        """Squared Euclidean distance from each of the (n, d) points to the centroid."""
        self._check_points(points)
        diff = points - self._mean.unsqueeze(0)
        return torch.sum(diff * diff, dim=1)

    def update_from_points(self, points: Tensor) -> None:
        """Move the centroid to the component-wise mean of its points.

        With no points the centroid stays where it is.
        """
        self._check_points(points)
        if len(points) == 0:
            return
        self._mean = points.mean(dim=0)

    def _check_points(self, points: Tensor) -> None:
        if points.dim() != 2 or points.shape[1] != self.dimension:
            raise ValueError(
                f"Expected (n, {self.dimension}) points, got {tuple(points.shape)}"
            )

    def __repr__(self) -> str:
        values = ", ".join(f"{v:.3f}" for v in self._mean.tolist())
        return f"CentroidRepresentation(mean=[{values}])"
