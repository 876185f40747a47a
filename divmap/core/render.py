"""
Model Rendering
===============

Fills a grid buffer with a model's intensity at each pixel centre.

Two kinds of model are accepted:

    renderable  - has intensitymap(grid, out=None); templates and
                  IntensityMap implement this
    callable    - model(x, y) -> intensity

Callables are first called once with the full pixel-centre coordinate
arrays (numpy broadcasting). If that raises TypeError/ValueError, or returns
something that is neither a scalar nor a grid-shaped array, the model is
evaluated one pixel at a time in row-major order with float coordinates.

Rendering writes into `out` in place; nothing is allocated when the model
supports out=.
"""

import logging
from typing import Tuple

import numpy as np

from divmap.core.image import ImageGrid, IntensityMap
from divmap.validation import InvalidModelError, ShapeMismatchError, check_shape

logger = logging.getLogger(__name__)


def is_renderable(model) -> bool:
    return callable(getattr(model, 'intensitymap', None))


def _is_grid_result(rendered, grid: ImageGrid) -> bool:
    """True for scalars and arrays shaped like the grid."""
    shape = np.shape(rendered)
    return shape == () or tuple(shape) == grid.shape


def render_pointwise(
    model,
    coords: Tuple[np.ndarray, np.ndarray],
    out: np.ndarray,
) -> np.ndarray:
    """
    Evaluate `model(x, y)` at each pixel centre, row-major.

    Each call must return a single number.
    """
    X, Y = coords
    nx, ny = out.shape
    for i in range(nx):
        for j in range(ny):
            try:
                value = np.asarray(model(float(X[i, j]), float(Y[i, j])), dtype=np.float64)
            except (TypeError, ValueError) as e:
                raise InvalidModelError(
                    f"Model failed at pixel ({i}, {j}): {e}"
                ) from e
            if value.ndim != 0:
                raise ShapeMismatchError((), value.shape)
            out[i, j] = value
    return out


def render_into(
    model,
    grid: ImageGrid,
    coords: Tuple[np.ndarray, np.ndarray],
    out: np.ndarray,
) -> np.ndarray:
    """
    Render `model` onto `grid`, writing the samples into `out`.

    Args:
        model: Renderable object or callable (x, y) -> intensity
        grid: Target pixel geometry
        coords: (X, Y) pixel-centre arrays for `grid`
        out: Buffer of shape grid.shape, overwritten

    Returns:
        `out`
    """
    if is_renderable(model):
        rendered = model.intensitymap(grid, out=out)
    elif callable(model):
        try:
            rendered = model(*coords)
        except (TypeError, ValueError) as e:
            logger.debug("Whole-grid call failed (%s), rendering per pixel", e)
            return render_pointwise(model, coords, out)
        if not _is_grid_result(rendered, grid):
            return render_pointwise(model, coords, out)
    else:
        raise InvalidModelError(
            f"Cannot render {type(model).__name__}: expected a callable (x, y) "
            f"or an object with intensitymap(grid, out=None)"
        )

    if rendered is out:
        return out

    if isinstance(rendered, IntensityMap):
        grid.require_same_geometry(rendered.grid)
        rendered = rendered.data

    rendered = np.asarray(rendered, dtype=np.float64)
    if rendered.ndim == 0:
        out.fill(rendered)
        return out

    check_shape(grid.shape, rendered.shape)
    np.copyto(out, rendered)
    return out
