"""
Image file I/O with Pillow.

Loads files into (H, W, 3) uint8 tensors and writes them back. Everything
else in the package works on in-memory buffers only.
"""

import os
from dataclasses import dataclass
from typing import Union
import numpy as np
import torch
from torch import Tensor
from PIL import Image

from .base.exceptions import InputShapeMismatch

PathLike = Union[str, os.PathLike]

# Pillow formats that take a JPEG-style quality argument
_QUALITY_FORMATS = {'JPEG', 'WEBP'}


@dataclass
class ImageData:
    """Decoded image: row-major RGB pixels plus dimensions."""
    pixels: Tensor  # (height, width, 3) uint8
    width: int
    height: int


def load_image(path: PathLike) -> ImageData:
    """Decode an image file to RGB.

    Alpha, palette and grayscale images are converted to plain RGB.
    """
    with Image.open(path) as img:
        rgb = img.convert('RGB')
        array = np.asarray(rgb, dtype=np.uint8).copy()

    height, width = array.shape[0], array.shape[1]
    return ImageData(pixels=torch.from_numpy(array), width=width, height=height)


def to_pil(pixels: Union[Tensor, np.ndarray]) -> Image.Image:
    """Wrap an (H, W, 3) uint8 buffer as a PIL image."""
    if isinstance(pixels, Tensor):
        pixels = pixels.detach().cpu().numpy()
    pixels = np.asarray(pixels)

    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise InputShapeMismatch(f"Expected (H, W, 3) pixels, got {pixels.shape}")

    return Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))


def save_image(pixels: Union[Tensor, np.ndarray], path: PathLike, quality: int = 95) -> None:
    """Encode an (H, W, 3) uint8 buffer; the format follows the file extension."""
    img = to_pil(pixels)

    ext = os.path.splitext(os.fspath(path))[1].lower()
    fmt = Image.registered_extensions().get(ext)
    if fmt is None:
        raise ValueError(f"Unsupported image extension: {ext!r}")

    if fmt in _QUALITY_FORMATS:
        img.save(path, format=fmt, quality=quality)
    else:
        img.save(path, format=fmt)


def file_size_kb(path: PathLike) -> float:
    """File size in KB."""
    return os.path.getsize(path) / 1024.0
