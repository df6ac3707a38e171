"""
Exception types raised by the color quantization pipeline.

All of them are precondition failures detected before sampling or training
starts. They derive from ValueError so existing ``except ValueError`` code
keeps catching them.
"""


class QuantizationError(ValueError):
    """Base class for invalid quantization inputs."""


class InvalidSampleSize(QuantizationError):
    """Requested training sample is empty or larger than the pixel count."""

    def __init__(self, n_samples: int, n_available: int):
        self.n_samples = n_samples
        self.n_available = n_available
        super().__init__(
            f"Cannot draw {n_samples} distinct samples from {n_available} pixels"
        )


class InvalidClusterCount(QuantizationError):
    """Cluster count is below 1 or exceeds the number of training points."""

    def __init__(self, n_clusters, n_samples: int):
        self.n_clusters = n_clusters
        self.n_samples = n_samples
        super().__init__(
            f"n_clusters must be in [1, {n_samples}], got {n_clusters}"
        )


class InputShapeMismatch(QuantizationError):
    """Feature or label buffer does not match the declared image shape."""
