"""
divmap Core
===========

Divergence kinds, the evaluator that applies them, and the image types.

Structure:
    image.py      - ImageGrid and IntensityMap
    base.py       - DivergenceKind base class with self-configuration
    registry.py   - KindRegistry for discovery and loading
    kinds/        - Bhattacharyya, KullbackLeibler, Renyi, LeastSquares
                    Each kind has a .yaml config file alongside its .py file
    render.py     - Model rendering onto a grid
    evaluator.py  - DivergenceEvaluator (render -> accumulate -> combine)
    report.py     - Multi-kind comparison table

Kind Configuration:
    Each kind defines in its .yaml file:
    - kind: Registered name
    - version
    - description
    - parameters: Defaults for omitted constructor arguments
    - metadata: normalized / symmetric flags
"""

from divmap.core.image import ImageGrid, IntensityMap
from divmap.core.base import DivergenceKind, KindConfig, load_kind_config
from divmap.core.registry import get_registry, reset_registry, KindRegistry
from divmap.core.kinds import Bhattacharyya, KullbackLeibler, Renyi, LeastSquares
from divmap.core.render import render_into, is_renderable
from divmap.core.evaluator import DivergenceEvaluator, divergence, make_evaluator
from divmap.core.report import divergence_table

__all__ = [
    # Images
    'ImageGrid',
    'IntensityMap',
    # Kinds
    'DivergenceKind',
    'KindConfig',
    'load_kind_config',
    'Bhattacharyya',
    'KullbackLeibler',
    'Renyi',
    'LeastSquares',
    # Registry
    'get_registry',
    'reset_registry',
    'KindRegistry',
    # Evaluation
    'render_into',
    'is_renderable',
    'DivergenceEvaluator',
    'divergence',
    'make_evaluator',
    'divergence_table',
]
