"""
Random initialization strategy for the k-means trainer.

Selects random training points as initial centroids.
"""

from typing import List, Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, ClusterRepresentation
from ..base.exceptions import InvalidClusterCount
from ..representations.centroid import CentroidRepresentation


class RandomInit(InitializationStrategy):
    """Random initialization by selecting points from the dataset.

    Selects n_clusters distinct points (without replacement) as initial centers.
    """

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None) -> List[ClusterRepresentation]:
        """Initialize clusters with random points.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters
            generator: Random source

        Returns:
            List of initialized CentroidRepresentations
        """
        n_points = points.shape[0]

        if n_clusters < 1 or n_clusters > n_points:
            raise InvalidClusterCount(n_clusters, n_points)

        # Permutation is drawn on CPU so the generator's device never matters
        indices = torch.randperm(n_points, generator=generator)[:n_clusters]

        return [CentroidRepresentation(points[idx]) for idx in indices.tolist()]
