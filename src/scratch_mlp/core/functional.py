"""Elementwise activations and shape-checked array helpers."""
from __future__ import annotations

import numpy as np

from ..errors import ShapeMismatchError


def relu(z: np.ndarray) -> np.ndarray:
    return np.maximum(z, 0.0)


def relu_derivative(z: np.ndarray | float) -> np.ndarray:
    """Return ``1`` where ``z > 0`` and ``0`` elsewhere, including at exactly zero."""

    return (np.asarray(z) > 0).astype(np.float64)


def softmax(logits: np.ndarray) -> np.ndarray:
    """Row-wise softmax with the row maximum subtracted before exponentiating."""

    shifted = logits - np.max(logits, axis=1, keepdims=True)
    exps = np.exp(shifted)
    return exps / np.sum(exps, axis=1, keepdims=True)


def check_matrix(name: str, value: np.ndarray) -> None:
    if value.ndim != 2:
        raise ShapeMismatchError(f"{name} must be 2-D, got shape {value.shape}")


def check_matmul(left_name: str, left: np.ndarray, right_name: str, right: np.ndarray) -> None:
    """Validate ``left @ right`` before computing it."""

    check_matrix(left_name, left)
    check_matrix(right_name, right)
    if left.shape[1] != right.shape[0]:
        raise ShapeMismatchError(
            f"cannot multiply {left_name} {left.shape} by {right_name} {right.shape}: "
            f"inner dimensions {left.shape[1]} and {right.shape[0]} differ"
        )


def add_bias(matrix: np.ndarray, bias: np.ndarray, name: str = "bias") -> np.ndarray:
    """Add the same bias vector to every row of ``matrix``."""

    if bias.ndim != 1 or bias.shape[0] != matrix.shape[1]:
        raise ShapeMismatchError(
            f"{name} of shape {bias.shape} cannot be added to rows of width {matrix.shape[1]}"
        )
    return matrix + bias[np.newaxis, :]


__all__ = [
    "relu",
    "relu_derivative",
    "softmax",
    "check_matrix",
    "check_matmul",
    "add_bias",
]
