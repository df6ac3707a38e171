"""
End-to-end color quantization.

Wires the components together:

    pixels -> features -> sample -> KMeans -> centroids
    (features, centroids) -> labels -> reconstructed image

Example usage:
    >>> import torch
    >>> from colorquant import ColorQuantizer
    >>>
    >>> image = torch.randint(0, 256, (64, 64, 3), dtype=torch.uint8)
    >>> result = ColorQuantizer(n_colors=8, random_state=0).quantize_image(image)
    >>> result.image.shape
    torch.Size([64, 64, 3])
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Union
import time
import torch
from torch import Tensor
import numpy as np

from ..algorithms.kmeans import KMeans, INIT_METHODS
from ..base.data_structures import CentroidSet
from ..utils.device import parse_device
from ..utils.metrics import inertia
from ..utils.validation import (
    validate_features, check_n_clusters, check_sample_size, check_random_state
)
from .features import extract_features, check_feature_shape, MAX_CHANNEL_VALUE
from .sampler import sample_features, clip_sample_size, DEFAULT_SAMPLE_SIZE
from .assigner import assign_labels
from .reconstructor import reconstruct_image, palette_colors

DEFAULT_N_COLORS = 32


@dataclass
class QuantizerConfig:
    """Settings for a quantization run.

    n_colors and sample_size are the cluster count K and training sample
    size N. When clip_sample_size is set, images with fewer than N pixels
    train on every pixel; otherwise they raise InvalidSampleSize.
    """
    n_colors: int = DEFAULT_N_COLORS
    sample_size: int = DEFAULT_SAMPLE_SIZE
    init: str = 'k-means++'
    max_iter: int = 100
    tol: float = 0.0
    random_state: Optional[Union[int, torch.Generator]] = None
    device: Optional[Union[str, torch.device]] = None
    batch_size: Optional[int] = None
    clip_sample_size: bool = True
    max_value: int = MAX_CHANNEL_VALUE
    verbose: int = 0

    def validate(self) -> 'QuantizerConfig':
        """Check settings that do not depend on the image."""
        for name in ('n_colors', 'sample_size', 'max_iter', 'max_value'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"{name} must be int, got {type(value)}")
            if value < 1:
                raise ValueError(f"{name} must be positive, got {value}")

        if self.init not in INIT_METHODS:
            raise ValueError(f"Unknown init method: {self.init}")
        if self.tol < 0:
            raise ValueError(f"tol must be >= 0, got {self.tol}")
        if self.batch_size is not None and self.batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {self.batch_size}")

        return self


@dataclass
class QuantizationResult:
    """Output of a quantization run."""
    image: Tensor               # (H, W, 3) reconstructed pixels
    labels: Tensor              # (H*W,) centroid id per pixel
    centroids: CentroidSet      # normalized palette
    sample_indices: Tensor      # pixels used for training
    n_iter: int
    converged: bool
    inertia: float              # over every pixel, in normalized units
    timings: dict = field(default_factory=dict)

    @property
    def width(self) -> int:
        return self.image.shape[1]

    @property
    def height(self) -> int:
        return self.image.shape[0]

    @property
    def palette(self) -> Tensor:
        """(K, 3) palette as integer colors."""
        return palette_colors(self.centroids)


class ColorQuantizer:
    """Reduce an image to K colors with k-means over a pixel sample.

    Parameters
    ----------
    config : QuantizerConfig, optional
        Base settings
    **overrides
        Individual QuantizerConfig fields, applied on top of config

    Attributes
    ----------
    centroids_ : CentroidSet
        Palette learned by the last fit
    sample_indices_ : Tensor
        Indices of the training pixels of the last fit
    model_ : KMeans
        Trainer of the last fit
    """

    def __init__(self, config: Optional[QuantizerConfig] = None, **overrides):
        config = config if config is not None else QuantizerConfig()
        self.config = replace(config, **overrides).validate()
        self.device = parse_device(self.config.device)

        self.model_: Optional[KMeans] = None
        self.centroids_: Optional[CentroidSet] = None
        self.sample_indices_: Optional[Tensor] = None
        self.timings_ = {}

    def fit(self, features) -> 'ColorQuantizer':
        """Learn the palette from a sample of the full feature set.

        Args:
            features: (n, 3) normalized feature vectors of every pixel

        Returns:
            Self

        Raises:
            InvalidSampleSize: If the sample is larger than the image and
                clipping is disabled
            InvalidClusterCount: If n_colors exceeds the sample size
        """
        cfg = self.config
        features = validate_features(features, device=self.device)
        n_pixels = features.shape[0]

        n_samples = cfg.sample_size
        if cfg.clip_sample_size:
            n_samples = clip_sample_size(n_samples, n_pixels)
        check_sample_size(n_samples, n_pixels)
        check_n_clusters(cfg.n_colors, n_samples)

        # One random source for sampling and seeding keeps runs reproducible
        generator = check_random_state(cfg.random_state)

        sample, indices = sample_features(features, n_samples, generator=generator)

        if cfg.verbose:
            print(f"Training model on {n_samples} of {n_pixels} pixels...")

        start = time.perf_counter()
        self.model_ = KMeans(
            n_clusters=cfg.n_colors,
            init=cfg.init,
            max_iter=cfg.max_iter,
            tol=cfg.tol,
            verbose=max(cfg.verbose - 1, 0),
            random_state=generator,
            device=self.device
        ).fit(sample)
        self.timings_['train'] = time.perf_counter() - start

        if cfg.verbose:
            print(f"Model trained in {self.timings_['train'] * 1000:.0f} ms "
                  f"({self.model_.n_iter_} iterations).")

        self.centroids_ = self.model_.centroids_.clone()
        self.sample_indices_ = indices
        return self

    def predict(self, features) -> Tensor:
        """Label array for every feature vector."""
        self._check_fitted()
        features = validate_features(features, device=self.device)
        return assign_labels(features, self.centroids_, batch_size=self.config.batch_size)

    def transform(self, features, width: int, height: int) -> Tensor:
        """Reconstruct a width x height image from its feature set."""
        self._check_fitted()
        features = validate_features(features, device=self.device)
        check_feature_shape(features, width, height)

        labels = assign_labels(features, self.centroids_, batch_size=self.config.batch_size)
        return reconstruct_image(labels, self.centroids_, width, height,
                                 max_value=self.config.max_value)

    def fit_transform(self, features, width: int, height: int) -> Tensor:
        """Fit on the features and return the reconstructed image."""
        return self.quantize(features, width, height).image

    def quantize(self, features, width: int, height: int) -> QuantizationResult:
        """Fit on the features, then label and rebuild the whole image."""
        features = validate_features(features, device=self.device)
        check_feature_shape(features, width, height)

        self.fit(features)

        start = time.perf_counter()
        labels = assign_labels(features, self.centroids_, batch_size=self.config.batch_size)
        self.timings_['assign'] = time.perf_counter() - start

        if self.config.verbose:
            print("Reconstructing image...")

        start = time.perf_counter()
        image = reconstruct_image(labels, self.centroids_, width, height,
                                  max_value=self.config.max_value)
        self.timings_['reconstruct'] = time.perf_counter() - start

        return QuantizationResult(
            image=image,
            labels=labels,
            centroids=self.centroids_,
            sample_indices=self.sample_indices_,
            n_iter=self.model_.n_iter_,
            converged=self.model_.converged_,
            inertia=inertia(features, labels, self.centroids_),
            timings=dict(self.timings_)
        )

    def quantize_image(self, pixels) -> QuantizationResult:
        """Quantize an (H, W, 3) array of integer colors."""
        if isinstance(pixels, np.ndarray):
            pixels = torch.from_numpy(np.ascontiguousarray(pixels))
        elif not isinstance(pixels, Tensor):
            pixels = torch.as_tensor(pixels)
        if pixels.dim() != 3:
            raise ValueError(f"Expected (H, W, 3) image, got {pixels.dim()}D")

        height, width = pixels.shape[0], pixels.shape[1]
        features = extract_features(pixels, max_value=self.config.max_value)
        return self.quantize(features, width, height)

    def _check_fitted(self) -> None:
        if self.centroids_ is None:
            raise RuntimeError("ColorQuantizer must be fitted first")


def quantize_image(pixels, n_colors: int = DEFAULT_N_COLORS,
                   sample_size: int = DEFAULT_SAMPLE_SIZE,
                   random_state: Optional[Union[int, torch.Generator]] = None,
                   **kwargs) -> QuantizationResult:
    """Functional shortcut for ColorQuantizer(...).quantize_image(pixels)."""
    quantizer = ColorQuantizer(n_colors=n_colors, sample_size=sample_size,
                               random_state=random_state, **kwargs)
    return quantizer.quantize_image(pixels)
