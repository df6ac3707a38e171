"""Base classes and interfaces for the quantizer's clustering engine."""

from .interfaces import (
    ClusterRepresentation,
    AssignmentStrategy,
    ParameterUpdater,
    InitializationStrategy,
    ConvergenceCriterion,
    ClusteringObjective
)

from .data_structures import (
    CentroidSet,
    AssignmentMatrix,
    AlgorithmState
)

from .exceptions import (
    QuantizationError,
    InvalidSampleSize,
    InvalidClusterCount,
    InputShapeMismatch
)

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Interfaces
    'ClusterRepresentation',
    'AssignmentStrategy',
    'ParameterUpdater',
    'InitializationStrategy',
    'ConvergenceCriterion',
    'ClusteringObjective',

    # Data structures
    'CentroidSet',
    'AssignmentMatrix',
    'AlgorithmState',

    # Errors
    'QuantizationError',
    'InvalidSampleSize',
    'InvalidClusterCount',
    'InputShapeMismatch',

    # Base algorithm
    'BaseClusteringAlgorithm'
]
