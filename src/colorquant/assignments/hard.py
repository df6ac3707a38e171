"""
Hard assignment strategy for the k-means trainer.

Assigns each point to its nearest cluster based on squared Euclidean distance.
"""

from typing import List
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, ClusterRepresentation
from ..distances.euclidean import argmin_lowest_index


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest cluster.

    Each point is assigned to exactly one cluster based on minimum distance.
    On an exact tie the cluster with the lowest identifier wins.
    """

    def compute_assignments(self, points: Tensor,
                            representations: List[ClusterRepresentation]) -> Tensor:
        """Assign each point to nearest cluster.

        Args:
            points: (n, d) data points
            representations: List of K cluster representations

        Returns:
            (n,) tensor of cluster indices
        """
        distances = self.distance_matrix(points, representations)
        return argmin_lowest_index(distances)

    @staticmethod
    def distance_matrix(points: Tensor,
                        representations: List[ClusterRepresentation]) -> Tensor:
        """(n, K) matrix of distances from every point to every cluster."""
        n_points = points.shape[0]
        n_clusters = len(representations)

        distances = torch.zeros(n_points, n_clusters, device=points.device)
        for k, representation in enumerate(representations):
            distances[:, k] = representation.distance_to_point(points)

        return distances
