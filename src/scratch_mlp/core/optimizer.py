"""Fixed learning-rate gradient descent."""
from __future__ import annotations

from ..config import is_positive_real
from ..errors import InvalidHyperparameterError, ShapeMismatchError
from .backward import GradientSet
from .params import PARAMETER_NAMES, ParameterSet


def update(params: ParameterSet, grads: GradientSet, learning_rate: float) -> ParameterSet:
    """Return ``param - learning_rate * grad`` for each of the four tensors.

    ``params`` is left untouched; the caller threads the returned set into
    the next step.
    """

    if not is_positive_real(learning_rate):
        raise InvalidHyperparameterError(f"learning_rate must be positive, got {learning_rate!r}")
    grad_shapes = grads.shapes()
    for name, shape in params.shapes().items():
        if grad_shapes[name] != shape:
            raise ShapeMismatchError(f"gradient for {name} has shape {grad_shapes[name]}, expected {shape}")

    updated = {
        name: getattr(params, name) - learning_rate * getattr(grads, "d" + name)
        for name in PARAMETER_NAMES
    }
    return ParameterSet(**updated)


__all__ = ["update"]
