"""
divmap: image divergences for template fitting.

Scores a model intensity map against an observed image with a scalar
divergence, for use inside an optimizer's objective.

Public API:
    from divmap import IntensityMap, DivergenceEvaluator, Renyi, Gaussian

    image = IntensityMap(data, dx, dy)
    ev = DivergenceEvaluator(image, Renyi(alpha=1.5))
    ev(Gaussian(sigma=5.0, x0=0.0, y0=0.0))

Layers:
    divmap.core        Images, divergence kinds, evaluator, report
    divmap.templates   Parametric models (Gaussian)
    divmap.config      Evaluator settings (settings.yaml)
    divmap.validation  Errors and input checks

Kinds:
    Bhattacharyya      -log sum sqrt(p |q|) / sqrt(F)
    KullbackLeibler    sum q log(q / (p + eps)) / F
    Renyi(alpha)       log(sum p (q/p)^alpha F^-alpha) / (alpha - 1)
    LeastSquares       sum (p - q)^2
"""

from divmap.core import (
    ImageGrid,
    IntensityMap,
    DivergenceKind,
    Bhattacharyya,
    KullbackLeibler,
    Renyi,
    LeastSquares,
    DivergenceEvaluator,
    divergence,
    make_evaluator,
    divergence_table,
    get_registry,
)
from divmap.templates import ImageTemplate, Gaussian
from divmap.config import EvaluatorSettings, load_settings
from divmap.validation import (
    DivergenceError,
    ShapeMismatchError,
    InvalidParameterError,
    InvalidModelError,
)

__version__ = "0.1.0"

__all__ = [
    'ImageGrid',
    'IntensityMap',
    'DivergenceKind',
    'Bhattacharyya',
    'KullbackLeibler',
    'Renyi',
    'LeastSquares',
    'DivergenceEvaluator',
    'divergence',
    'make_evaluator',
    'divergence_table',
    'get_registry',
    'ImageTemplate',
    'Gaussian',
    'EvaluatorSettings',
    'load_settings',
    'DivergenceError',
    'ShapeMismatchError',
    'InvalidParameterError',
    'InvalidModelError',
]
