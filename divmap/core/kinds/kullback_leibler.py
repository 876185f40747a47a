"""
Kullback-Leibler Divergence
===========================

    KL(f || I) = sum_k f_k log(f_k / (I_k + eps)) / F

where I is the reference normalized to unit flux, f the rendered model and
F its total flux. eps keeps the logarithm finite where the reference is
empty; pixels with f_k = 0 contribute 0 (0 log 0 = 0).
"""

import math
from typing import Dict, Any, Optional

import numpy as np
from scipy.special import xlogy

from divmap.core.base import DivergenceKind
from divmap.validation import InvalidParameterError


class KullbackLeibler(DivergenceKind):
    """KL divergence of the model from the unit-flux reference."""

    def __init__(self, epsilon: Optional[float] = None):
        if epsilon is None:
            epsilon = self.default('epsilon')
        epsilon = float(epsilon)
        if not math.isfinite(epsilon) or epsilon < 0:
            raise InvalidParameterError(
                f"epsilon must be finite and >= 0, got {epsilon}"
            )
        self.epsilon = epsilon

    @property
    def kind_name(self) -> str:
        return "kullback_leibler"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {'epsilon': self.epsilon}

    def pixel_terms(self, p: np.ndarray, q: np.ndarray) -> np.ndarray:
        with np.errstate(divide='ignore'):
            return xlogy(q, q / (p + self.epsilon))

    def combine(self, total: float, flux: float) -> float:
        return total / flux


def create(epsilon: Optional[float] = None) -> KullbackLeibler:
    return KullbackLeibler(epsilon=epsilon)
