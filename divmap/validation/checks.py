"""
Input Checks

Checks shared by images, kinds and the evaluator. Each check returns the
cleaned value or raises one of the divmap errors.
"""

import math
from typing import Tuple

import numpy as np

from divmap.validation.errors import (
    InvalidModelError,
    InvalidParameterError,
    ShapeMismatchError,
)


NEGATIVE_POLICIES = ("clamp", "reject")


def check_grid_size(value: int, axis: str) -> int:
    """Grid dimensions must be positive integers."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise InvalidParameterError(
            f"Grid size n{axis} must be a positive integer, got {value!r}"
        )
    return int(value)


def check_pixel_size(value: float, axis: str) -> float:
    """Pixel sizes must be finite and strictly positive."""
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(
            f"Pixel size d{axis} must be finite and > 0, got {value}"
        )
    return value


def check_image_data(data) -> np.ndarray:
    """
    Coerce image samples to a 2-D float64 array.

    Args:
        data: Array-like of intensity samples

    Returns:
        C-contiguous float64 array of shape (nx, ny)
    """
    arr = np.ascontiguousarray(data, dtype=np.float64)
    if arr.ndim != 2:
        raise InvalidParameterError(
            f"Intensity map must be 2-D, got {arr.ndim}-D array of shape {arr.shape}"
        )
    if arr.size == 0:
        raise InvalidParameterError("Intensity map has no pixels")
    if not np.all(np.isfinite(arr)):
        raise InvalidParameterError("Intensity map contains NaN or Inf samples")
    return arr


def check_reference(data: np.ndarray) -> float:
    """
    Validate a reference image and return its flux.

    The reference must be non-negative with positive total flux, otherwise
    it cannot be normalized to a distribution.
    """
    if np.any(data < 0):
        raise InvalidParameterError(
            f"Reference image has {int(np.sum(data < 0))} negative samples"
        )
    flux = float(np.sum(data))
    if not math.isfinite(flux) or not flux > 0:
        raise InvalidParameterError(
            f"Reference image flux must be finite and > 0, got {flux}"
        )
    return flux


def check_shape(expected: Tuple[int, ...], actual: Tuple[int, ...]) -> None:
    if tuple(expected) != tuple(actual):
        raise ShapeMismatchError(tuple(expected), tuple(actual))


def check_negative_policy(policy: str) -> str:
    if policy not in NEGATIVE_POLICIES:
        raise InvalidParameterError(
            f"Unknown negative_policy '{policy}'. "
            f"Available: {', '.join(NEGATIVE_POLICIES)}"
        )
    return policy


def check_model_samples(
    samples: np.ndarray,
    policy: str,
    check_finite: bool = True,
) -> int:
    """
    Apply the negative-intensity policy to rendered samples in place.

    Args:
        samples: Rendered model grid (modified in place)
        policy: 'clamp' sets negative samples to 0, 'reject' raises
        check_finite: Reject NaN/Inf samples before the policy is applied

    Returns:
        Number of negative samples found
    """
    if check_finite and not np.all(np.isfinite(samples)):
        raise InvalidModelError("Model rendered NaN or Inf intensities")

    negative = samples < 0
    n_negative = int(np.count_nonzero(negative))
    if n_negative == 0:
        return 0

    if policy == "reject":
        raise InvalidModelError(
            f"Model rendered {n_negative} negative intensities "
            f"(min {float(samples.min()):.6g})"
        )

    samples[negative] = 0.0
    return n_negative


def check_model_flux(flux: float) -> float:
    if not math.isfinite(flux):
        raise InvalidModelError(f"Model flux is not finite: {flux}")
    if flux == 0:
        raise InvalidModelError("Model flux is zero, divergence is undefined")
    return flux
