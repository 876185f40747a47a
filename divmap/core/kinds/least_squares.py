"""
Least Squares Divergence
========================

    LS(f, I) = sum_k (I_k - f_k)^2

Squared 2-norm between the unit-flux reference I and the rendered model f.
The model is not rescaled, so the model's flux is part of what is fit.
"""

import numpy as np

from divmap.core.base import DivergenceKind


class LeastSquares(DivergenceKind):

    @property
    def kind_name(self) -> str:
        return "least_squares"

    def pixel_terms(self, p: np.ndarray, q: np.ndarray) -> np.ndarray:
        return np.square(p - q)

    def combine(self, total: float, flux: float) -> float:
        return total


def create() -> LeastSquares:
    return LeastSquares()
