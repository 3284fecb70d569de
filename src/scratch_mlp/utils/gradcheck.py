"""Central-difference gradient checking for backprop validation."""
from __future__ import annotations

from typing import Dict

import numpy as np

from ..core import backward, cross_entropy, forward
from ..core.params import PARAMETER_NAMES, ParameterSet


def _loss_at(x: np.ndarray, y: np.ndarray, params: ParameterSet) -> float:
    return cross_entropy(forward(x, params).A2, y)


def numerical_gradient(
    x: np.ndarray,
    y: np.ndarray,
    params: ParameterSet,
    name: str,
    index: tuple[int, ...],
    eps: float = 1e-5,
) -> float:
    """Estimate ``d loss / d params.<name>[index]`` with a central difference."""

    tensors = params.as_dict()
    original = tensors[name][index]

    tensors[name][index] = original + eps
    loss_plus = _loss_at(x, y, ParameterSet(**tensors))
    tensors[name][index] = original - eps
    loss_minus = _loss_at(x, y, ParameterSet(**tensors))
    return (loss_plus - loss_minus) / (2.0 * eps)


def gradient_check(
    x: np.ndarray,
    y: np.ndarray,
    params: ParameterSet,
    *,
    eps: float = 1e-5,
    num_checks: int = 10,
    seed: int = 0,
) -> Dict[str, float]:
    """Compare analytic gradients with central differences on sampled entries.

    For ``num_checks`` random entries of each tensor the relative error
    ``|a - n| / max(|a| + |n|, 1e-12)`` is computed.

    Returns ``{"max_rel_error": float, "mean_rel_error": float}``.
    """

    rng = np.random.default_rng(seed)
    cache = forward(x, params)
    grads = backward(x, y, cache, params.W2)

    rel_errors: list[float] = []
    for name in PARAMETER_NAMES:
        analytic_grad = getattr(grads, "d" + name)
        shape = getattr(params, name).shape
        for _ in range(num_checks):
            index = tuple(int(rng.integers(0, dim)) for dim in shape)
            analytic = float(analytic_grad[index])
            numeric = numerical_gradient(x, y, params, name, index, eps)
            denom = max(abs(analytic) + abs(numeric), 1e-12)
            rel_errors.append(abs(analytic - numeric) / denom)

    return {
        "max_rel_error": float(np.max(rel_errors)),
        "mean_rel_error": float(np.mean(rel_errors)),
    }


__all__ = ["gradient_check", "numerical_gradient"]
