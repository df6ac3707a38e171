"""
Feature extraction: raw pixel colors to normalized RGB feature vectors.
"""

from typing import Union
import torch
from torch import Tensor
import numpy as np

from ..base.exceptions import InputShapeMismatch
from ..utils.validation import N_CHANNELS, check_image_shape

MAX_CHANNEL_VALUE = 255


def extract_features(pixels: Union[Tensor, np.ndarray, list],
                     max_value: int = MAX_CHANNEL_VALUE) -> Tensor:
    """Convert integer pixel colors to the full feature set.

    Args:
        pixels: (H, W, 3) image or (H*W, 3) row-major pixel list with
            channel values in [0, max_value]
        max_value: Largest channel value of the source encoding

    Returns:
        (H*W, 3) float32 tensor with values in [0, 1], row i being pixel
        (i mod W, i div W)
    """
    if max_value <= 0:
        raise ValueError(f"max_value must be positive, got {max_value}")

    if isinstance(pixels, np.ndarray):
        pixels = torch.from_numpy(np.ascontiguousarray(pixels))
    elif isinstance(pixels, (list, tuple)):
        pixels = torch.tensor(pixels)
    elif not isinstance(pixels, Tensor):
        raise TypeError(f"Cannot convert {type(pixels)} to pixels")

    if pixels.dim() not in (2, 3) or pixels.shape[-1] != N_CHANNELS:
        raise InputShapeMismatch(
            f"Expected (H, W, {N_CHANNELS}) or (N, {N_CHANNELS}) pixels, got {tuple(pixels.shape)}"
        )

    flat = pixels.reshape(-1, N_CHANNELS).to(torch.float32)
    if (flat < 0).any() or (flat > max_value).any():
        raise ValueError(f"Channel values must lie in [0, {max_value}]")

    return flat / float(max_value)


def check_feature_shape(features: Tensor, width: int, height: int) -> None:
    """Raise InputShapeMismatch unless features describe a width x height image."""
    if features.dim() != 2 or features.shape[1] != N_CHANNELS:
        raise InputShapeMismatch(
            f"Expected (N, {N_CHANNELS}) features, got {tuple(features.shape)}"
        )
    check_image_shape(features.shape[0], width, height)
