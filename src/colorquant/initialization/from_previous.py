"""
Initialization from explicit centers or a previous centroid set.

Useful for warm starts and for tests that need a known starting point.
"""

from typing import List, Optional, Union
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, ClusterRepresentation
from ..base.data_structures import CentroidSet
from ..representations.centroid import CentroidRepresentation


class FromPreviousInit(InitializationStrategy):
    """Initialize from given centers.

    Accepts either:
    - A tensor of shape (n_clusters, dimension) with initial centers
    - A CentroidSet from a previous run
    """

    def __init__(self, initial_state: Union[Tensor, CentroidSet]):
        """
        Args:
            initial_state: Centers to start from
        """
        self.initial_state = initial_state

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None) -> List[ClusterRepresentation]:
        """Initialize from previous state.

        Args:
            points: (n, d) data points (used for validation)
            n_clusters: Expected number of clusters
            generator: Unused

        Returns:
            List of initialized representations
        """
        dimension = points.shape[1]
        device = points.device

        if isinstance(self.initial_state, CentroidSet):
            centers = self.initial_state.means
        elif isinstance(self.initial_state, Tensor):
            centers = self.initial_state
        else:
            raise TypeError(f"Unknown initial_state type: {type(self.initial_state)}")

        centers = centers.to(device=device, dtype=torch.float32)

        if centers.dim() != 2:
            raise ValueError(f"Initial centers must be 2D, got {centers.dim()}D")
        if centers.shape[0] != n_clusters:
            raise ValueError(f"Initial centers has {centers.shape[0]} clusters, "
                             f"but n_clusters={n_clusters}")
        if centers.shape[1] != dimension:
            raise ValueError(f"Initial centers has dimension {centers.shape[1]}, "
                             f"but data has dimension {dimension}")

        return [CentroidRepresentation(center) for center in centers]
