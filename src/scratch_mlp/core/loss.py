"""Categorical cross-entropy."""
from __future__ import annotations

import numpy as np

from ..errors import ShapeMismatchError
from .functional import check_matrix

EPSILON = 1e-8


def cross_entropy(predictions: np.ndarray, labels: np.ndarray) -> float:
    """Mean negative log-likelihood ``-(1/m) * sum(Y * log(A2 + eps))``.

    ``predictions`` and ``labels`` must have identical ``(m, n_out)`` shapes;
    nothing is broadcast or reshaped. ``EPSILON`` is added inside the
    logarithm only, so a zero probability yields a large but finite loss.
    A non-finite ``predictions`` entry propagates to a non-finite loss. The
    sub-epsilon negative residue left by exact predictions is floored at zero.
    """

    check_matrix("A2", predictions)
    check_matrix("Y", labels)
    if predictions.shape != labels.shape:
        raise ShapeMismatchError(
            f"predictions {predictions.shape} and labels {labels.shape} must have the same shape"
        )
    num_samples = predictions.shape[0]
    if num_samples == 0:
        raise ShapeMismatchError("cross-entropy needs at least one sample")
    loss = float(-np.sum(labels * np.log(predictions + EPSILON)) / num_samples)
    # a probability of exactly 1 leaves a -log(1 + eps) residue below zero
    return loss if not loss < 0.0 else 0.0


__all__ = ["EPSILON", "cross_entropy"]
