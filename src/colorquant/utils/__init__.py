"""Utility functions for the quantizer."""

from .convergence import ChangeInAssignments

from .metrics import (
    inertia,
    mean_squared_error,
    count_colors
)

from .validation import (
    validate_data,
    validate_features,
    validate_labels,
    check_image_shape,
    check_n_clusters,
    check_sample_size,
    check_random_state
)

from .device import (
    get_default_device,
    parse_device,
    get_batch_size
)

__all__ = [
    # Convergence criteria
    'ChangeInAssignments',

    # Metrics
    'inertia',
    'mean_squared_error',
    'count_colors',

    # Validation
    'validate_data',
    'validate_features',
    'validate_labels',
    'check_image_shape',
    'check_n_clusters',
    'check_sample_size',
    'check_random_state',

    # Device management
    'get_default_device',
    'parse_device',
    'get_batch_size'
]
