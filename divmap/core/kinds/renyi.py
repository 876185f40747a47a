"""
Renyi Divergence
================

    Ry_a(f || I) = log( sum_k I_k (f_k / I_k)^a * F^(-a) ) / (a - 1)

where I is the reference normalized to unit flux, f the rendered model and
F its total flux.

Special cases:
    a = 1/2   twice the Bhattacharyya divergence
    a -> 1    KL divergence (degenerate here, use KullbackLeibler)

Pixels where the reference is empty (I_k = 0) contribute 0, so the sum runs
over the reference support only.
"""

import math
from typing import Dict, Any, Optional

import numpy as np

from divmap.core.base import DivergenceKind
from divmap.validation import InvalidParameterError


class Renyi(DivergenceKind):
    """Renyi divergence of order alpha (alpha != 1)."""

    def __init__(self, alpha: Optional[float] = None):
        if alpha is None:
            alpha = self.default('alpha')
        alpha = float(alpha)
        if not math.isfinite(alpha):
            raise InvalidParameterError(f"alpha must be finite, got {alpha}")
        if np.isclose(alpha, 1.0):
            raise InvalidParameterError(
                "alpha=1 is the KL divergence, use KullbackLeibler instead"
            )
        self.alpha = alpha

    @property
    def kind_name(self) -> str:
        return "renyi"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {'alpha': self.alpha}

    def pixel_terms(self, p: np.ndarray, q: np.ndarray) -> np.ndarray:
        terms = np.zeros_like(p)
        support = p > 0
        ps = p[support]
        with np.errstate(divide='ignore', over='ignore'):
            terms[support] = ps * (q[support] / ps) ** self.alpha
        return terms

    def combine(self, total: float, flux: float) -> float:
        if not total > 0:
            return math.nan
        alpha = self.alpha
        return (math.log(total) - alpha * math.log(flux)) / (alpha - 1.0)


def create(alpha: Optional[float] = None) -> Renyi:
    return Renyi(alpha=alpha)
