"""
Intensity Maps
==============

Image types the divergences operate on.

    ImageGrid     - pixel geometry (nx, ny, dx, dy), pixel centres about the origin
    IntensityMap  - 2-D grid of intensity samples with its ImageGrid

Arrays are indexed [i, j] -> (x_i, y_j), i.e. shape (nx, ny), and pixel
centres sit at

    x_i = (i - (nx - 1) / 2) * dx
    y_j = (j - (ny - 1) / 2) * dy
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from divmap.validation import (
    ShapeMismatchError,
    check_image_data,
    check_grid_size,
    check_pixel_size,
    check_shape,
)


# Pixel sizes can be ~1e-12 rad, so geometry comparison is relative only
PIXEL_RTOL = 1e-9


@dataclass(frozen=True)
class ImageGrid:
    """Pixel geometry of an image."""
    nx: int
    ny: int
    dx: float = 1.0
    dy: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, 'nx', check_grid_size(self.nx, 'x'))
        object.__setattr__(self, 'ny', check_grid_size(self.ny, 'y'))
        object.__setattr__(self, 'dx', check_pixel_size(self.dx, 'x'))
        object.__setattr__(self, 'dy', check_pixel_size(self.dy, 'y'))

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.nx, self.ny)

    @property
    def field_of_view(self) -> Tuple[float, float]:
        return (self.nx * self.dx, self.ny * self.dy)

    def x_centers(self) -> np.ndarray:
        return (np.arange(self.nx) - (self.nx - 1) / 2.0) * self.dx

    def y_centers(self) -> np.ndarray:
        return (np.arange(self.ny) - (self.ny - 1) / 2.0) * self.dy

    def coordinates(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Physical pixel-centre coordinates.

        Returns:
            (X, Y) arrays of shape (nx, ny)
        """
        return np.meshgrid(self.x_centers(), self.y_centers(), indexing='ij')

    def same_geometry(self, other: "ImageGrid") -> bool:
        """Exact dimensions, pixel sizes equal to a relative tolerance of 1e-9."""
        return (
            self.shape == other.shape
            and bool(np.isclose(self.dx, other.dx, rtol=PIXEL_RTOL, atol=0.0))
            and bool(np.isclose(self.dy, other.dy, rtol=PIXEL_RTOL, atol=0.0))
        )

    def require_same_geometry(self, other: "ImageGrid") -> None:
        if not self.same_geometry(other):
            raise ShapeMismatchError(self, other)


class IntensityMap:
    """
    2-D grid of intensity samples with pixel geometry.

    An IntensityMap can also stand in as a model: it renders itself onto any
    grid with the same geometry, which lets two images be compared directly.
    """

    def __init__(self, data, dx: float = 1.0, dy: float = 1.0):
        self.data = check_image_data(data)
        nx, ny = self.data.shape
        self.grid = ImageGrid(nx, ny, dx, dy)

    @classmethod
    def from_grid(cls, data, grid: ImageGrid) -> "IntensityMap":
        image = cls(data, grid.dx, grid.dy)
        check_shape(grid.shape, image.shape)
        return image

    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape

    @property
    def dx(self) -> float:
        return self.grid.dx

    @property
    def dy(self) -> float:
        return self.grid.dy

    def flux(self) -> float:
        """Total intensity (sum over all pixels)."""
        return float(np.sum(self.data))

    def normalized(self) -> "IntensityMap":
        """Copy of this image scaled to unit flux."""
        return IntensityMap(self.data / self.flux(), self.dx, self.dy)

    def intensitymap(
        self,
        grid: ImageGrid,
        out: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """Render onto `grid`; the grid must match this image's geometry."""
        self.grid.require_same_geometry(grid)
        if out is None:
            return self.data.copy()
        np.copyto(out, self.data)
        return out

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self.data
        return self.data.astype(dtype)

    def __repr__(self) -> str:
        return (
            f"IntensityMap(shape={self.shape}, dx={self.dx:g}, dy={self.dy:g}, "
            f"flux={self.flux():.6g})"
        )
