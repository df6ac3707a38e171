"""
Input validation utilities.

Converts caller data to tensors and checks the preconditions of the
sampler, trainer, assigner and reconstructor before any work starts.
"""

from typing import Optional, Union
import torch
from torch import Tensor
import numpy as np

from ..base.exceptions import InvalidClusterCount, InvalidSampleSize, InputShapeMismatch

N_CHANNELS = 3


def validate_data(X: Union[Tensor, np.ndarray, list],
                  dtype: torch.dtype = torch.float32,
                  device: Optional[torch.device] = None,
                  ensure_finite: bool = True,
                  ensure_min_samples: int = 1) -> Tensor:
    """Validate and convert input data to a 2D tensor.

    Args:
        X: Input data (tensor, numpy array, or list)
        dtype: Target data type
        device: Target device
        ensure_finite: Whether to check for inf/nan
        ensure_min_samples: Minimum number of rows required

    Returns:
        Validated tensor

    Raises:
        TypeError: If X cannot be converted
        ValueError: If validation fails
    """
    if isinstance(X, Tensor):
        if X.dtype != dtype or (device is not None and X.device != device):
            X = X.to(dtype=dtype, device=device)
    elif isinstance(X, np.ndarray):
        X = torch.from_numpy(np.ascontiguousarray(X)).to(dtype=dtype, device=device)
    elif isinstance(X, (list, tuple)):
        X = torch.tensor(X, dtype=dtype, device=device)
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    if X.dim() != 2:
        raise ValueError(f"Expected 2D array, got {X.dim()}D")

    n_samples = X.shape[0]
    if n_samples < ensure_min_samples:
        raise ValueError(f"Found {n_samples} samples, but need at least "
                         f"{ensure_min_samples}")

    if ensure_finite and X.is_floating_point():
        if torch.isnan(X).any():
            raise ValueError("Input contains NaN values")
        if torch.isinf(X).any():
            raise ValueError("Input contains infinite values")

    return X


def validate_features(features: Union[Tensor, np.ndarray, list],
                      device: Optional[torch.device] = None) -> Tensor:
    """Validate a set of normalized RGB feature vectors.

    Args:
        features: (n, 3) values in [0, 1]
        device: Target device

    Returns:
        (n, 3) float32 tensor

    Raises:
        InputShapeMismatch: If rows do not have exactly 3 channels
        ValueError: If values fall outside [0, 1]
    """
    features = validate_data(features, device=device)

    if features.shape[1] != N_CHANNELS:
        raise InputShapeMismatch(
            f"Expected {N_CHANNELS} channels per feature vector, got {features.shape[1]}"
        )
    if (features < 0).any() or (features > 1).any():
        raise ValueError("Feature values must lie in [0, 1]")

    return features


def check_image_shape(n_pixels: int, width: int, height: int) -> None:
    """Check that a buffer of n_pixels rows describes a width x height image.

    Raises:
        TypeError: If width or height is not an int
        ValueError: If width or height is not positive
        InputShapeMismatch: If n_pixels != width * height
    """
    for name, value in (('width', width), ('height', height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"{name} must be int, got {type(value)}")
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")

    if n_pixels != width * height:
        raise InputShapeMismatch(
            f"Buffer has {n_pixels} pixels but image is {width}x{height} "
            f"({width * height} pixels)"
        )


def validate_labels(labels: Union[Tensor, np.ndarray, list],
                    n_clusters: int,
                    n_samples: Optional[int] = None) -> Tensor:
    """Validate a label array against a centroid count.

    Args:
        labels: Cluster identifiers
        n_clusters: Number of centroids K
        n_samples: Expected number of labels

    Returns:
        Validated int64 label tensor

    Raises:
        InputShapeMismatch: If the length differs from n_samples
        ValueError: If any label is outside [0, n_clusters)
    """
    if isinstance(labels, Tensor):
        labels = labels.long()
    elif isinstance(labels, np.ndarray):
        labels = torch.from_numpy(labels).long()
    elif isinstance(labels, (list, tuple)):
        labels = torch.tensor(labels, dtype=torch.long)
    else:
        raise TypeError(f"Cannot convert {type(labels)} to label tensor")

    if labels.dim() != 1:
        raise ValueError(f"Labels must be 1D, got {labels.dim()}D")

    if n_samples is not None and len(labels) != n_samples:
        raise InputShapeMismatch(f"Expected {n_samples} labels, got {len(labels)}")

    if labels.numel() > 0 and ((labels < 0).any() or (labels >= n_clusters).any()):
        raise ValueError(f"Labels must lie in [0, {n_clusters})")

    return labels


def check_n_clusters(n_clusters: int, n_samples: int) -> None:
    """Validate number of clusters.

    Args:
        n_clusters: Number of clusters
        n_samples: Number of training points

    Raises:
        InvalidClusterCount: If n_clusters is not an int in [1, n_samples]
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, (int, np.integer)):
        raise InvalidClusterCount(n_clusters, n_samples)

    if n_clusters < 1 or n_clusters > n_samples:
        raise InvalidClusterCount(n_clusters, n_samples)


def check_sample_size(n_samples: int, n_available: int) -> None:
    """Validate a requested training sample size.

    Raises:
        InvalidSampleSize: If n_samples is not an int in [1, n_available]
    """
    if isinstance(n_samples, bool) or not isinstance(n_samples, (int, np.integer)):
        raise InvalidSampleSize(n_samples, n_available)

    if n_samples < 1 or n_samples > n_available:
        raise InvalidSampleSize(n_samples, n_available)


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> torch.Generator:
    """Create a CPU generator from a random state.

    Args:
        random_state: Seed, generator, or None for a nondeterministic seed

    Returns:
        Generator
    """
    if random_state is None:
        generator = torch.Generator()
        generator.seed()
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, (int, np.integer)) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")
