"""
divmap Validation Module

Error types and the input checks applied before and after rendering.

Exports:
    - DivergenceError: Base class of every divmap error
    - ShapeMismatchError: Rendered grid differs from the reference geometry
    - InvalidParameterError: Bad construction argument (e.g. Renyi alpha=1)
    - InvalidModelError: Model rendered zero/non-finite flux or bad samples
"""

from .errors import (
    DivergenceError,
    ShapeMismatchError,
    InvalidParameterError,
    InvalidModelError,
)

from .checks import (
    NEGATIVE_POLICIES,
    check_grid_size,
    check_pixel_size,
    check_image_data,
    check_reference,
    check_shape,
    check_negative_policy,
    check_model_samples,
    check_model_flux,
)

__all__ = [
    # Errors
    'DivergenceError',
    'ShapeMismatchError',
    'InvalidParameterError',
    'InvalidModelError',
    # Checks
    'NEGATIVE_POLICIES',
    'check_grid_size',
    'check_pixel_size',
    'check_image_data',
    'check_reference',
    'check_shape',
    'check_negative_policy',
    'check_model_samples',
    'check_model_flux',
]
