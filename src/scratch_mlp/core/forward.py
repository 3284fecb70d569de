"""Forward propagation and inference helpers."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..errors import ShapeMismatchError
from .functional import add_bias, check_matmul, check_matrix, relu, softmax
from .params import ParameterSet


@dataclass(frozen=True, slots=True, eq=False)
class ForwardCache:
    """Intermediate values of one forward pass, consumed by :func:`backward`."""

    Z1: np.ndarray
    A1: np.ndarray
    Z2: np.ndarray
    A2: np.ndarray


def forward(x: np.ndarray, params: ParameterSet) -> ForwardCache:
    """Compute ``Z1 = X W1 + b1``, ``A1 = relu(Z1)``, ``Z2 = A1 W2 + b2``, ``A2 = softmax(Z2)``.

    ``params`` is never mutated. Every row of ``A2`` is a probability
    distribution.
    """

    check_matmul("X", x, "W1", params.W1)
    z1 = add_bias(x @ params.W1, params.b1, "b1")
    a1 = relu(z1)
    z2 = add_bias(a1 @ params.W2, params.b2, "b2")
    a2 = softmax(z2)
    return ForwardCache(Z1=z1, A1=a1, Z2=z2, A2=a2)


def predict_proba(x: np.ndarray, params: ParameterSet) -> np.ndarray:
    return forward(x, params).A2


def predict(x: np.ndarray, params: ParameterSet) -> np.ndarray:
    """Return the most probable class index for every row of ``x``."""

    return np.argmax(predict_proba(x, params), axis=1)


def accuracy(x: np.ndarray, y: np.ndarray, params: ParameterSet) -> float:
    """Fraction of rows whose predicted class matches the arg-max of ``y``."""

    check_matrix("Y", y)
    if y.shape[0] != x.shape[0]:
        raise ShapeMismatchError(f"X has {x.shape[0]} rows but Y has {y.shape[0]}")
    if y.shape[0] == 0:
        return 0.0
    return float(np.mean(predict(x, params) == np.argmax(y, axis=1)))


__all__ = ["ForwardCache", "forward", "predict_proba", "predict", "accuracy"]
