"""
K-means clustering algorithm.

Lloyd's K-means implemented on top of the modular clustering framework.
This is the trainer that turns a sample of normalized colors into a palette.
"""

from typing import Optional, List, Union
import torch
from torch import Tensor
import numpy as np

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.interfaces import ClusterRepresentation, ClusteringObjective
from ..assignments.hard import HardAssignment
from ..initialization.kmeans_plusplus import KMeansPlusPlusInit
from ..initialization.random import RandomInit
from ..initialization.from_previous import FromPreviousInit
from ..utils.convergence import ChangeInAssignments
from ..updates.mean import MeanUpdater

INIT_METHODS = ('k-means++', 'random')


class KMeansObjective(ClusteringObjective):
    """K-means objective: sum of squared distances to centroids."""

    def compute(self, points: Tensor, representations: List[ClusterRepresentation],
                assignments: Tensor) -> Tensor:
        """Compute within-cluster sum of squares."""
        total = torch.zeros((), device=points.device)

        for k, rep in enumerate(representations):
            cluster_points_mask = (assignments == k)
            if cluster_points_mask.any():
                cluster_points = points[cluster_points_mask]
                total = total + rep.distance_to_point(cluster_points).sum()

        return total


class KMeans(BaseClusteringAlgorithm):
    """K-means clustering algorithm.

    Partitions data into K clusters by minimizing within-cluster sum of
    squared distances. Points are assigned to the nearest centroid (lowest
    identifier on exact ties), centroids move to the mean of their points,
    and clusters that lose all their points keep their previous centroid.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    init : str or array-like, default='k-means++'
        Initialization method:
        - 'k-means++' : K-means++ initialization
        - 'random' : K distinct random points
        - array of shape (n_clusters, n_features) : Use as initial centers
    max_iter : int, default=100
        Maximum number of iterations
    tol : float, default=0.0
        Largest fraction of points allowed to change cluster in an iteration
        that still counts as converged
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Random seed or generator for reproducibility
    device : str or torch.device, optional
        Device for computation (CPU by default)

    Attributes
    ----------
    cluster_centers_ : Tensor of shape (n_clusters, n_features)
        Cluster centroids
    centroids_ : CentroidSet
        Frozen copy of the centroids
    labels_ : Tensor of shape (n_samples,)
        Cluster assignments for training data
    inertia_ : float
        Sum of squared distances to nearest cluster center
    n_iter_ : int
        Number of iterations run
    converged_ : bool
        Whether assignments stabilized before max_iter
    """

    def __init__(self,
                 n_clusters: int,
                 init: Union[str, Tensor, np.ndarray] = 'k-means++',
                 max_iter: int = 100,
                 tol: float = 0.0,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[Union[str, torch.device]] = None):
        """Initialize K-means algorithm."""
        super().__init__(
            n_clusters=n_clusters,
            max_iter=max_iter,
            tol=tol,
            verbose=verbose,
            random_state=random_state,
            device=device
        )
        if isinstance(init, str) and init not in INIT_METHODS:
            raise ValueError(f"Unknown init method: {init}")
        self.init = init

        self.labels_ = None

    def _create_components(self) -> None:
        """Create K-means specific components."""
        self.assignment_strategy = HardAssignment()
        self.update_strategy = MeanUpdater()

        if isinstance(self.init, str):
            if self.init == 'k-means++':
                self.initialization_strategy = KMeansPlusPlusInit()
            else:
                self.initialization_strategy = RandomInit()
        else:
            initial_centers = torch.as_tensor(self.init, dtype=torch.float32, device=self.device)
            self.initialization_strategy = FromPreviousInit(initial_centers)

        self.convergence_criterion = ChangeInAssignments(max_change_fraction=self.tol)
        self.objective = KMeansObjective()

    def fit(self, X, y: Optional[Tensor] = None) -> 'KMeans':
        """Fit K-means clustering.

        Parameters
        ----------
        X : Tensor of shape (n_samples, n_features)
            Training data
        y : Ignored
            Not used, present for API consistency

        Returns
        -------
        self : KMeans
            Fitted estimator
        """
        super().fit(X, y)

        if self.history_:
            self.labels_ = self.history_[-1].assignments.get_hard()

        return self

    def fit_predict(self, X, y: Optional[Tensor] = None) -> Tensor:
        """Fit and return labels of the training data."""
        self.fit(X, y)
        return self.labels_

    def score(self, X) -> float:
        """Opposite of the value of X on the K-means objective.

        Parameters
        ----------
        X : Tensor of shape (n_samples, n_features)
            New data

        Returns
        -------
        score : float
            Negative of sum of squared distances to centers
        """
        X = self._validate_data(X)
        labels = self.predict(X)
        return -self.objective.compute(X, self.representations, labels).item()
