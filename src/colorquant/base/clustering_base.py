"""
Base class for the quantizer's clustering algorithms.

Provides the common algorithmic skeleton for alternating optimization
between assignment and update steps (Lloyd's iteration).
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Union
import torch
from torch import Tensor
import numpy as np
import time
import warnings

from .interfaces import (
    ClusterRepresentation, AssignmentStrategy, ParameterUpdater,
    InitializationStrategy, ConvergenceCriterion, ClusteringObjective
)
from .data_structures import CentroidSet, AssignmentMatrix, AlgorithmState
from ..utils.validation import validate_data, check_n_clusters, check_random_state
from ..utils.device import parse_device


class BaseClusteringAlgorithm(ABC):
    """Base class implementing the alternating optimization framework.

    Subclasses need to specify:
    - Cluster representation type
    - Assignment strategy
    - Parameter update strategy
    - Initialization strategy
    - Convergence criterion
    - Objective function
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: int = 100,
                 tol: float = 0.0,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[Union[str, torch.device]] = None):
        """
        Args:
            n_clusters: Number of clusters K
            max_iter: Maximum iterations
            tol: Convergence tolerance
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Seed or generator for reproducibility
            device: Torch device (None for CPU)
        """
        if max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {max_iter}")

        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.tol = tol
        self.verbose = verbose
        self.random_state = random_state
        self.device = parse_device(device)

        # These will be set by subclasses
        self.representations: Optional[List[ClusterRepresentation]] = None
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.update_strategy: Optional[ParameterUpdater] = None
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.convergence_criterion: Optional[ConvergenceCriterion] = None
        self.objective: Optional[ClusteringObjective] = None

        # Algorithm state
        self.fitted_ = False
        self.converged_ = False
        self.n_iter_ = 0
        self.history_: List[AlgorithmState] = []

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.assignment_strategy
        - self.update_strategy
        - self.initialization_strategy
        - self.convergence_criterion
        - self.objective
        """
        pass

    def fit(self, X: Union[Tensor, np.ndarray, list],
            y: Optional[Tensor] = None) -> 'BaseClusteringAlgorithm':
        """Fit the clustering model.

        Args:
            X: (n, d) data
            y: Ignored

        Returns:
            Self
        """
        return self._fit(X)

    def predict(self, X: Union[Tensor, np.ndarray, list]) -> Tensor:
        """Predict cluster assignments for new data.

        Args:
            X: (n, d) data

        Returns:
            (n,) tensor of cluster assignments
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")

        X = self._validate_data(X)
        assignments = self.assignment_strategy.compute_assignments(X, self.representations)

        return AssignmentMatrix(assignments, self.n_clusters).get_hard()

    def _fit(self, X) -> 'BaseClusteringAlgorithm':
        """Internal fit method implementing the alternating optimization."""
        X = self._validate_data(X)
        n_points = X.shape[0]

        # Fail before any random draw or allocation
        check_n_clusters(self.n_clusters, n_points)
        generator = check_random_state(self.random_state)

        self._create_components()

        if self.verbose:
            print(f"Initializing {self.n_clusters} clusters from {n_points} points...")

        start_time = time.time()
        self.representations = self.initialization_strategy.initialize(
            X, self.n_clusters, generator=generator
        )

        self.n_iter_ = 0
        self.history_ = []
        self.converged_ = False
        self.convergence_criterion.reset()

        for iteration in range(self.max_iter):
            iter_start_time = time.time()

            # Assignment step
            assignments = self.assignment_strategy.compute_assignments(
                X, self.representations
            )
            assignment_matrix = AssignmentMatrix(assignments, self.n_clusters)

            # Update step; empty clusters keep their previous centroid
            for k, representation in enumerate(self.representations):
                cluster_indices = assignment_matrix.get_cluster_indices(k)
                if len(cluster_indices) > 0:
                    self.update_strategy.update(representation, X[cluster_indices])

            objective_value = self.objective.compute(
                X, self.representations, assignments
            )

            converged = self.convergence_criterion.check({
                'iteration': iteration,
                'objective': objective_value.item(),
                'assignments': assignments,
            })

            self.history_.append(AlgorithmState(
                iteration=iteration,
                centroids=self._extract_centroids(),
                assignments=assignment_matrix,
                objective_value=objective_value.item(),
                converged=converged,
                metadata={'cluster_sizes': assignment_matrix.count_per_cluster().tolist()}
            ))
            self.n_iter_ = iteration + 1

            iter_time = time.time() - iter_start_time
            if self.verbose >= 2 or (self.verbose >= 1 and iteration % 10 == 0):
                obj_direction = "↓" if self.objective.minimize else "↑"
                print(f"Iteration {iteration:3d}: objective = {objective_value.item():.6f} "
                      f"{obj_direction} ({iter_time:.3f}s)")

            if converged:
                self.converged_ = True
                if self.verbose:
                    print(f"Converged at iteration {iteration}")
                break

        total_time = time.time() - start_time

        if self.verbose:
            if not self.converged_:
                warnings.warn(f"Failed to converge after {self.max_iter} iterations")
            print(f"Total fitting time: {total_time:.3f}s")

        self.fitted_ = True
        return self

    def _validate_data(self, X) -> Tensor:
        """Validate and prepare input data."""
        return validate_data(X, dtype=torch.float32, device=self.device)

    def _extract_centroids(self) -> CentroidSet:
        """Snapshot the current centroids into a CentroidSet."""
        means = torch.stack([rep.mean for rep in self.representations])

        return CentroidSet(
            means=means,
            n_clusters=self.n_clusters,
            dimension=means.shape[1]
        )

    @property
    def centroids_(self) -> CentroidSet:
        """Frozen copy of the fitted centroids."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return self._extract_centroids()

    @property
    def cluster_centers_(self) -> Tensor:
        """Get cluster centers/means."""
        return self.centroids_.means

    @property
    def inertia_(self) -> float:
        """Get final objective value."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return self.history_[-1].objective_value
