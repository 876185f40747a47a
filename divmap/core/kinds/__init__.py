"""
Divergence Kinds.

One module per kind, each with a .yaml config alongside it:

    bhattacharyya     - -log sum sqrt(p |q|) / sqrt(F)
    kullback_leibler  - sum q log(q / (p + eps)) / F
    renyi             - log(sum p (q/p)^a F^-a) / (a - 1)
    least_squares     - sum (p - q)^2
"""

from divmap.core.kinds.bhattacharyya import Bhattacharyya
from divmap.core.kinds.kullback_leibler import KullbackLeibler
from divmap.core.kinds.renyi import Renyi
from divmap.core.kinds.least_squares import LeastSquares

__all__ = ['Bhattacharyya', 'KullbackLeibler', 'Renyi', 'LeastSquares']
