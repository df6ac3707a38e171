"""
K-means++ initialization strategy.

Selects initial centroids using the K-means++ algorithm, which chooses
centers that are far apart to improve convergence speed and quality.
"""

import math
from typing import List, Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, ClusterRepresentation
from ..base.exceptions import InvalidClusterCount
from ..representations.centroid import CentroidRepresentation


class KMeansPlusPlusInit(InitializationStrategy):
    """K-means++ initialization for better starting positions.

    Algorithm:
    1. Choose first center uniformly at random
    2. For each remaining center:
       - Compute distance from each point to nearest existing center
       - Sample candidates with probability proportional to squared distance
       - Keep the candidate that most reduces the total squared distance

    When every point already coincides with a chosen center (e.g. an image
    with a single color) the remaining centers are drawn uniformly.
    """

    def __init__(self, n_local_trials: Optional[int] = None):
        """
        Args:
            n_local_trials: Number of candidates to try for each center.
                            If None, uses 2 + log(k) as in sklearn
        """
        self.n_local_trials = n_local_trials

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None) -> List[ClusterRepresentation]:
        """Initialize cluster centers using K-means++.

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

        if self.n_local_trials is None:
            n_local_trials = 2 + int(math.log(n_clusters))
        else:
            n_local_trials = self.n_local_trials

        # Sampling happens on CPU against a CPU generator
        cpu_points = points.detach().to('cpu', dtype=torch.float64)

        first_idx = int(torch.randint(n_points, (1,), generator=generator).item())
        center_indices = [first_idx]

        distances = torch.sum((cpu_points - cpu_points[first_idx].unsqueeze(0)) ** 2, dim=1)

        for _ in range(1, n_clusters):
            total = distances.sum()

            if total.item() <= 0.0:
                candidates_idx = torch.randint(n_points, (n_local_trials,), generator=generator)
            else:
                probabilities = distances / total
                candidates_idx = torch.multinomial(
                    probabilities, n_local_trials, replacement=True, generator=generator
                )

            best_potential = float('inf')
            best_candidate = None
            best_distances = None

            for idx in candidates_idx.tolist():
                candidate_distances = torch.sum(
                    (cpu_points - cpu_points[idx].unsqueeze(0)) ** 2, dim=1
                )
                new_distances = torch.minimum(distances, candidate_distances)
                potential = new_distances.sum().item()

                if potential < best_potential:
                    best_potential = potential
                    best_candidate = idx
                    best_distances = new_distances

            center_indices.append(best_candidate)
            distances = best_distances

        return [CentroidRepresentation(points[idx]) for idx in center_indices]
