"""Circular Gaussian template."""

import math
from typing import Dict

import numpy as np

from divmap.templates.base import ImageTemplate
from divmap.validation import InvalidParameterError


class Gaussian(ImageTemplate):
    """
    Unit-flux circular Gaussian.

        I(x, y) = exp(-((x - x0)^2 + (y - y0)^2) / (2 sigma^2)) / (2 pi sigma^2)

    Args:
        sigma: Standard deviation (same units as the pixel size)
        x0: Centre x
        y0: Centre y
    """

    n_params = 3

    def __init__(self, sigma: float, x0: float = 0.0, y0: float = 0.0):
        sigma = float(sigma)
        if not math.isfinite(sigma) or sigma <= 0:
            raise InvalidParameterError(f"sigma must be finite and > 0, got {sigma}")
        self.sigma = sigma
        self.x0 = float(x0)
        self.y0 = float(y0)

    def intensity(self, x, y):
        s2 = self.sigma ** 2
        r2 = (x - self.x0) ** 2 + (y - self.y0) ** 2
        return np.exp(-0.5 * r2 / s2) / (2.0 * np.pi * s2)

    def to_dict(self) -> Dict[str, float]:
        return {'sigma': self.sigma, 'x0': self.x0, 'y0': self.y0}

    def __repr__(self) -> str:
        return f"Gaussian(sigma={self.sigma:g}, x0={self.x0:g}, y0={self.y0:g})"
