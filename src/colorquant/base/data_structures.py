"""
Core data structures for the quantizer's clustering engine.

This module provides containers for the centroid set produced by training,
hard cluster assignments, and per-iteration algorithm state.
"""

from typing import Dict, Any
import torch
from torch import Tensor
from dataclasses import dataclass, field


@dataclass
class CentroidSet:
    """The K centroids produced by a training run.

    The identifier of a centroid is its row index in ``means``, so the set
    always covers identifiers 0..K-1 exactly once.
    """

    means: Tensor  # (K, d) cluster centroids
    n_clusters: int
    dimension: int

    def __post_init__(self):
        """Validate dimensions."""
        assert self.means.shape == (self.n_clusters, self.dimension)

    def __len__(self) -> int:
        return self.n_clusters

    def __getitem__(self, cluster_id: int) -> Tensor:
        return self.means[cluster_id]

    @property
    def identifiers(self) -> Tensor:
        """Centroid identifiers 0..K-1."""
        return torch.arange(self.n_clusters, device=self.means.device)

    def clone(self) -> 'CentroidSet':
        """Detached copy that shares no storage with this set."""
        return CentroidSet(
            means=self.means.detach().clone(),
            n_clusters=self.n_clusters,
            dimension=self.dimension
        )


class AssignmentMatrix:
    """Storage for hard cluster assignments with per-cluster aggregation."""

    def __init__(self, assignments: Tensor, n_clusters: int):
        """
        Args:
            assignments: (n,) hard assignments
            n_clusters: Number of clusters K
        """
        self.n_clusters = n_clusters
        self._validate_and_store(assignments)

    def _validate_and_store(self, assignments: Tensor):
        """Validate and store assignments in canonical format."""
        assert assignments.dim() == 1
        if assignments.numel() > 0:
            assert assignments.max() < self.n_clusters
            assert assignments.min() >= 0
        self._assignments = assignments.long()

    @property
    def n_points(self) -> int:
        """Number of data points."""
        return self._assignments.shape[0]

    def get_hard(self) -> Tensor:
        """Get hard assignments."""
        return self._assignments

    def get_cluster_indices(self, cluster_idx: int) -> Tensor:
        """Get indices of points assigned to a specific cluster."""
        return torch.where(self._assignments == cluster_idx)[0]

    def count_per_cluster(self) -> Tensor:
        """Count points per cluster."""
        return torch.bincount(self._assignments, minlength=self.n_clusters)


@dataclass
class AlgorithmState:
    """State of the trainer at a given iteration.

    Kept in ``history_`` for convergence inspection and debugging.
    """
    iteration: int
    centroids: CentroidSet
    assignments: AssignmentMatrix
    objective_value: float

    converged: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)
