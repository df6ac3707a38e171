"""Color quantization components and pipeline."""

from .features import extract_features, check_feature_shape
from .sampler import sample_indices, sample_features, clip_sample_size
from .assigner import assign_labels
from .reconstructor import reconstruct_image, palette_colors
from .pipeline import (
    ColorQuantizer,
    QuantizerConfig,
    QuantizationResult,
    quantize_image
)

__all__ = [
    'extract_features',
    'check_feature_shape',
    'sample_indices',
    'sample_features',
    'clip_sample_size',
    'assign_labels',
    'reconstruct_image',
    'palette_colors',
    'ColorQuantizer',
    'QuantizerConfig',
    'QuantizationResult',
    'quantize_image'
]
