"""Exception types raised by the training engine."""
from __future__ import annotations


class ShapeMismatchError(ValueError):
    """Raised when operand dimensions are incompatible."""


class InvalidHyperparameterError(ValueError):
    """Raised when a learning rate, layer size, epoch or sample count is out of range."""


__all__ = ["ShapeMismatchError", "InvalidHyperparameterError"]
