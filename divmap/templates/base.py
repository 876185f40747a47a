"""
Image Templates
===============

Parametric intensity models that can be scored by a DivergenceEvaluator.

To write a template:
    1. Subclass ImageTemplate
    2. Implement intensity(x, y) with numpy broadcasting
    3. Set n_params to the number of constructor parameters, in the order
       from_params() should read them

Example:

    class Disk(ImageTemplate):
        n_params = 1

        def __init__(self, radius):
            self.radius = radius

        def intensity(self, x, y):
            return np.where(np.hypot(x, y) <= self.radius, 1.0, 0.0)

Templates are unit-flux by convention (flux = 1.0).
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Optional, Sequence, Tuple

import numpy as np

from divmap.core.image import ImageGrid
from divmap.validation import InvalidParameterError, check_shape


@lru_cache(maxsize=16)
def grid_coordinates(grid: ImageGrid) -> Tuple[np.ndarray, np.ndarray]:
    """Pixel-centre coordinates of `grid`, cached and read-only."""
    X, Y = grid.coordinates()
    X.flags.writeable = False
    Y.flags.writeable = False
    return X, Y


class ImageTemplate(ABC):
    """Base class for parametric image templates."""

    n_params: int = 0

    flux = 1.0

    @abstractmethod
    def intensity(self, x, y):
        """Intensity at physical coordinates (x, y)."""
        pass

    def __call__(self, x, y):
        return self.intensity(x, y)

    @classmethod
    def from_params(cls, params: Sequence[float]) -> "ImageTemplate":
        """Build a template from a flat parameter vector (optimizer order)."""
        params = np.asarray(params, dtype=np.float64).ravel()
        if params.size != cls.n_params:
            raise InvalidParameterError(
                f"{cls.__name__} takes {cls.n_params} parameters, got {params.size}"
            )
        return cls(*params.tolist())

    def intensitymap(
        self,
        grid: ImageGrid,
        out: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """Render onto `grid`, into `out` if given."""
        X, Y = grid_coordinates(grid)
        values = self.intensity(X, Y)
        if out is None:
            return np.array(np.broadcast_to(values, grid.shape), dtype=np.float64)
        check_shape(grid.shape, out.shape)
        np.copyto(out, values)
        return out
