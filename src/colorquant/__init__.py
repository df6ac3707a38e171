"""
colorquant: image color quantization with k-means.

Pixels are mapped to normalized RGB feature vectors, a random sample of them
trains a K-means model, and every pixel is then replaced by the color of its
nearest centroid.

Example usage:
    >>> from colorquant import ColorQuantizer
    >>> from colorquant.io import load_image, save_image
    >>>
    >>> image = load_image("photo.jpg")
    >>> result = ColorQuantizer(n_colors=32, sample_size=1000, random_state=0).quantize_image(image.pixels)
    >>> save_image(result.image, "photo_32.jpg")
"""

__version__ = '0.1.0'

from .algorithms.kmeans import KMeans

from .quantization import (
    ColorQuantizer,
    QuantizerConfig,
    QuantizationResult,
    quantize_image,
    extract_features,
    sample_features,
    assign_labels,
    reconstruct_image
)

from .base import (
    CentroidSet,
    AssignmentMatrix,
    QuantizationError,
    InvalidSampleSize,
    InvalidClusterCount,
    InputShapeMismatch
)

__all__ = [
    # Trainer
    'KMeans',

    # Pipeline
    'ColorQuantizer',
    'QuantizerConfig',
    'QuantizationResult',
    'quantize_image',
    'extract_features',
    'sample_features',
    'assign_labels',
    'reconstruct_image',

    # Core data structures
    'CentroidSet',
    'AssignmentMatrix',

    # Errors
    'QuantizationError',
    'InvalidSampleSize',
    'InvalidClusterCount',
    'InputShapeMismatch',

    # Version
    '__version__'
]
