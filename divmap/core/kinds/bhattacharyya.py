"""
Bhattacharyya Divergence
========================

    Bh(f || I) = -log sum_k sqrt(I_k * |f_k|) / sqrt(F)

where I is the reference normalized to unit flux, f the rendered model and
F its total flux. Minimized at the same point as the Hellinger distance.
"""

import math

import numpy as np

from divmap.core.base import DivergenceKind


class Bhattacharyya(DivergenceKind):
    """Bhattacharyya divergence between the model and the unit-flux reference."""

    @property
    def kind_name(self) -> str:
        return "bhattacharyya"

    def pixel_terms(self, p: np.ndarray, q: np.ndarray) -> np.ndarray:
        return np.sqrt(p * np.abs(q))

    def combine(self, total: float, flux: float) -> float:
        return -math.log(total / math.sqrt(flux)) if total > 0 else math.inf


def create() -> Bhattacharyya:
    return Bhattacharyya()
