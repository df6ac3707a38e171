"""
Strategy interfaces of the k-means trainer.

The training loop in ``clustering_base`` only talks to the abstract classes
below, so each step of Lloyd's iteration can be swapped independently.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List
import torch
from torch import Tensor


class ClusterRepresentation(ABC):
    """One cluster of the trainer, identified by its position in the list."""

    @property
    @abstractmethod
    def mean(self) -> Tensor:
        """(d,) center of the cluster."""

    @abstractmethod
    def distance_to_point(self, points: Tensor) -> Tensor:
        """(n,) cost of putting each of the (n, d) points in this cluster."""

    @abstractmethod
    def update_from_points(self, points: Tensor) -> None:
        """Refit the cluster to the (m, d) points assigned to it."""


class AssignmentStrategy(ABC):

    @abstractmethod
    def compute_assignments(self, points: Tensor,
                            representations: List[ClusterRepresentation]) -> Tensor:
        """Return the (n,) cluster index of every point."""


class ParameterUpdater(ABC):

    @abstractmethod
    def update(self, representation: ClusterRepresentation,
               points: Tensor) -> None:
        """Update one cluster from the points assigned to it."""


class InitializationStrategy(ABC):

    @abstractmethod
    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None) -> List[ClusterRepresentation]:
        """Seed n_clusters clusters from the (n, d) training points.

        Every random draw must come from ``generator`` so that a seeded run
        is reproducible.
        """


class ConvergenceCriterion(ABC):
    """Stopping rule, checked once per iteration.

    ``history`` keeps one record per check for later inspection.
    """

    def __init__(self):
        self.history: List[Dict[str, Any]] = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """True once the run should stop."""

    def reset(self):
        self.history = []


class ClusteringObjective(ABC):

    @abstractmethod
    def compute(self, points: Tensor,
                representations: List[ClusterRepresentation],
                assignments: Tensor) -> Tensor:
        """Scalar objective for the given hard assignments."""

    @property
    def minimize(self) -> bool:
        return True
