"""
Training-sample selection.

Draws a bounded number of distinct pixels so that training cost does not
grow with image size.
"""

from typing import Optional, Tuple
import torch
from torch import Tensor

from ..utils.validation import check_sample_size

DEFAULT_SAMPLE_SIZE = 1000


def sample_indices(n_available: int, n_samples: int,
                   generator: Optional[torch.Generator] = None) -> Tensor:
    """Choose n_samples distinct indices in [0, n_available) uniformly.

    Rejection sampling: uniform indices are drawn in batches and any index
    already chosen is dropped, until enough distinct ones are collected.
    The rejection rate grows as n_samples approaches n_available; the
    intended use is a small fixed sample drawn from a large image.

    Args:
        n_available: Number of candidates
        n_samples: Number of distinct indices wanted
        generator: Random source

    Returns:
        (n_samples,) int64 tensor of distinct indices in draw order

    Raises:
        InvalidSampleSize: If n_samples is outside [1, n_available]
    """
    check_sample_size(n_samples, n_available)

    chosen = []
    seen = set()
    while len(chosen) < n_samples:
        remaining = n_samples - len(chosen)
        draws = torch.randint(n_available, (remaining,), generator=generator)
        for idx in draws.tolist():
            if idx in seen:
                continue
            seen.add(idx)
            chosen.append(idx)
            if len(chosen) == n_samples:
                break

    return torch.tensor(chosen, dtype=torch.long)


def sample_features(features: Tensor, n_samples: int,
                    generator: Optional[torch.Generator] = None) -> Tuple[Tensor, Tensor]:
    """Draw the training sample from the full feature set.

    Args:
        features: (n, d) full feature set
        n_samples: Sample size N
        generator: Random source

    Returns:
        sample: (N, d) rows of features at distinct indices
        indices: (N,) the indices used
    """
    indices = sample_indices(features.shape[0], n_samples, generator=generator)
    return features[indices.to(features.device)], indices


def clip_sample_size(n_samples: int, n_available: int) -> int:
    """Largest valid sample size not above the requested one."""
    return min(n_samples, n_available)
