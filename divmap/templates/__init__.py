"""
Templates: parametric intensity models.

    ImageTemplate  - base class (intensity(x, y), n_params, from_params)
    Gaussian       - unit-flux circular Gaussian (sigma, x0, y0)
"""

from divmap.templates.base import ImageTemplate, grid_coordinates
from divmap.templates.gaussian import Gaussian

__all__ = ['ImageTemplate', 'grid_coordinates', 'Gaussian']
