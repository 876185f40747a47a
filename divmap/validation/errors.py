"""
Divergence Errors

Every failure raised by divmap derives from DivergenceError, so callers
driving an optimizer can catch one type.

PRINCIPLE: "Fail at construction when you can, at evaluation when you must"

Usage:
    from divmap.validation import InvalidModelError

    try:
        value = evaluator(model)
    except InvalidModelError as e:
        value = np.inf
"""

from typing import Any, Optional


class DivergenceError(Exception):
    """Base class for divergence evaluation failures."""


class ShapeMismatchError(DivergenceError, ValueError):
    """Raised when a rendered grid does not match the reference geometry."""

    def __init__(
        self,
        expected: Any,
        actual: Any,
        message: Optional[str] = None,
    ):
        self.expected = expected
        self.actual = actual

        if message is None:
            message = (
                f"Grid mismatch: expected {expected}, got {actual}"
            )

        super().__init__(message)


class InvalidParameterError(DivergenceError, ValueError):
    """Raised when a divergence, image or setting is constructed with bad arguments."""


class InvalidModelError(DivergenceError):
    """Raised when a model renders to something no divergence can be computed from."""
