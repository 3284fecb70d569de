"""Backpropagation through softmax cross-entropy and the ReLU hidden layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from ..errors import ShapeMismatchError
from .forward import ForwardCache
from .functional import check_matmul, check_matrix, relu_derivative


@dataclass(frozen=True, slots=True, eq=False)
class GradientSet:
    """Loss gradients, shaped exactly like the matching :class:`ParameterSet` fields."""

    dW1: np.ndarray
    db1: np.ndarray
    dW2: np.ndarray
    db2: np.ndarray

    def shapes(self) -> Dict[str, Tuple[int, ...]]:
        return {
            "W1": self.dW1.shape,
            "b1": self.db1.shape,
            "W2": self.dW2.shape,
            "b2": self.db2.shape,
        }


def backward(
    x: np.ndarray,
    y: np.ndarray,
    cache: ForwardCache,
    w2: np.ndarray,
) -> GradientSet:
    """Gradients of the mean cross-entropy with respect to ``W1, b1, W2, b2``.

    Uses the closed form ``dZ2 = (A2 - Y) / m`` for softmax followed by
    cross-entropy, then:

    * ``dW2 = A1^T dZ2`` and ``db2 = sum_rows(dZ2)``
    * ``dA1 = dZ2 W2^T`` and ``dZ1 = dA1 * relu'(Z1)``
    * ``dW1 = X^T dZ1`` and ``db1 = sum_rows(dZ1)``

    None of the inputs are modified.
    """

    check_matrix("X", x)
    check_matrix("Y", y)
    if y.shape != cache.A2.shape:
        raise ShapeMismatchError(f"labels {y.shape} do not match predictions {cache.A2.shape}")
    if x.shape[0] != y.shape[0]:
        raise ShapeMismatchError(f"X has {x.shape[0]} rows but Y has {y.shape[0]}")
    check_matmul("A1", cache.A1, "W2", w2)
    if w2.shape[1] != y.shape[1]:
        raise ShapeMismatchError(f"W2 {w2.shape} produces {w2.shape[1]} classes, Y has {y.shape[1]}")

    num_samples = x.shape[0]
    dz2 = (cache.A2 - y) / num_samples
    dw2 = cache.A1.T @ dz2
    db2 = np.sum(dz2, axis=0)

    da1 = dz2 @ w2.T
    dz1 = da1 * relu_derivative(cache.Z1)
    check_matmul("X^T", x.T, "dZ1", dz1)
    dw1 = x.T @ dz1
    db1 = np.sum(dz1, axis=0)
    return GradientSet(dW1=dw1, db1=db1, dW2=dw2, db2=db2)


__all__ = ["GradientSet", "backward"]
