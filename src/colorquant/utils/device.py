"""
Device selection and memory helpers.

Picks the torch device the quantizer runs on and sizes the pixel batches
used by the full-image assigner.
"""

from typing import Optional, Union
import torch
import warnings


def get_default_device() -> torch.device:
    """Get the default device based on availability.

    Returns:
        Default device (cuda if available, else mps, else cpu)
    """
    if torch.cuda.is_available():
        return torch.device('cuda')
    elif hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return torch.device('mps')
    else:
        return torch.device('cpu')


def parse_device(device: Optional[Union[str, torch.device]] = None) -> torch.device:
    """Parse device specification.

    Args:
        device: Device specification
            - None: CPU
            - 'auto': Use best available
            - 'cpu': Use CPU
            - 'cuda': Use default CUDA device
            - 'cuda:X': Use CUDA device X
            - 'mps': Use Apple Metal Performance Shaders
            - torch.device: Use as-is

    Returns:
        Parsed device
    """
    if device is None:
        return torch.device('cpu')

    if isinstance(device, torch.device):
        return device

    if isinstance(device, str):
        if device == 'auto':
            return get_default_device()
        elif device == 'cpu':
            return torch.device('cpu')
        elif device.startswith('cuda'):
            if not torch.cuda.is_available():
                warnings.warn("CUDA not available, falling back to CPU")
                return torch.device('cpu')
            return torch.device(device)
        elif device == 'mps':
            if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
                return torch.device('mps')
            else:
                warnings.warn("MPS not available, falling back to CPU")
                return torch.device('cpu')
        else:
            raise ValueError(f"Unknown device: {device}")
    else:
        raise TypeError(f"Device must be str or torch.device, got {type(device)}")


def get_batch_size(n_samples: int, n_clusters: int,
                   n_features: int = 3,
                   target_memory_mb: float = 256) -> int:
    """Number of points whose (batch, K, d) difference tensor fits the budget.

    Args:
        n_samples: Total number of points
        n_clusters: Number of centroids compared against
        n_features: Number of features per point
        target_memory_mb: Target memory usage in MB

    Returns:
        Recommended batch size, at least 1 and at most n_samples
    """
    bytes_per_sample = n_clusters * n_features * 4  # float32
    target_bytes = target_memory_mb * 1024 * 1024

    batch_size = int(target_bytes / max(bytes_per_sample, 1))
    batch_size = max(1, min(batch_size, n_samples))

    # Round to nice number
    if batch_size > 1000:
        batch_size = (batch_size // 1000) * 1000
    elif batch_size > 100:
        batch_size = (batch_size // 100) * 100

    return batch_size
