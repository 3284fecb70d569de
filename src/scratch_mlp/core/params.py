"""Parameter store for the two-layer perceptron."""
from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Dict, Tuple

import numpy as np

from ..config import is_integer
from ..errors import InvalidHyperparameterError, ShapeMismatchError

PARAMETER_NAMES: Tuple[str, ...] = ("W1", "b1", "W2", "b2")


@dataclass(frozen=True, slots=True, eq=False)
class ParameterSet:
    """Weights ``W1`` (n_in x h), ``W2`` (h x n_out) and biases ``b1`` (h), ``b2`` (n_out)."""

    W1: np.ndarray
    b1: np.ndarray
    W2: np.ndarray
    b2: np.ndarray

    def __post_init__(self) -> None:
        if self.W1.ndim != 2 or self.W2.ndim != 2:
            raise ShapeMismatchError(
                f"weights must be 2-D, got W1 {self.W1.shape} and W2 {self.W2.shape}"
            )
        if self.b1.shape != (self.W1.shape[1],):
            raise ShapeMismatchError(f"b1 {self.b1.shape} does not match W1 {self.W1.shape}")
        if self.W2.shape[0] != self.W1.shape[1]:
            raise ShapeMismatchError(
                f"W2 {self.W2.shape} expects {self.W2.shape[0]} hidden units, W1 provides {self.W1.shape[1]}"
            )
        if self.b2.shape != (self.W2.shape[1],):
            raise ShapeMismatchError(f"b2 {self.b2.shape} does not match W2 {self.W2.shape}")

    @property
    def input_dim(self) -> int:
        return self.W1.shape[0]

    @property
    def hidden_dim(self) -> int:
        return self.W1.shape[1]

    @property
    def output_dim(self) -> int:
        return self.W2.shape[1]

    def shapes(self) -> Dict[str, Tuple[int, ...]]:
        return {name: getattr(self, name).shape for name in PARAMETER_NAMES}

    def as_dict(self) -> Dict[str, np.ndarray]:
        """Return copies of every tensor keyed by name."""

        return {name: getattr(self, name).copy() for name in PARAMETER_NAMES}


def initialize_parameters(
    n_in: int,
    hidden: int,
    n_out: int,
    seed: int = 0,
    *,
    std: float = 0.01,
) -> ParameterSet:
    """Draw Gaussian weights with standard deviation ``std`` and zero biases.

    The result depends only on the sizes, ``std`` and ``seed``.
    """

    for name, size in (("n_in", n_in), ("hidden", hidden), ("n_out", n_out)):
        if not is_integer(size) or size < 1:
            raise InvalidHyperparameterError(f"{name} must be an integer of at least 1, got {size!r}")
    rng = np.random.default_rng(seed)
    w1 = rng.normal(0.0, std, size=(n_in, hidden))
    w2 = rng.normal(0.0, std, size=(hidden, n_out))
    return ParameterSet(
        W1=w1,
        b1=np.zeros(hidden),
        W2=w2,
        b2=np.zeros(n_out),
    )


def save_parameters(path: str | PathLike[str], params: ParameterSet) -> None:
    """Persist ``params`` as an ``.npz`` archive keyed by tensor name."""

    np.savez(path, **params.as_dict())


def load_parameters(path: str | PathLike[str]) -> ParameterSet:
    with np.load(path) as archive:
        missing = [name for name in PARAMETER_NAMES if name not in archive]
        if missing:
            raise KeyError(f"parameter archive {path} is missing {', '.join(missing)}")
        return ParameterSet(**{name: np.array(archive[name], dtype=np.float64) for name in PARAMETER_NAMES})


__all__ = [
    "PARAMETER_NAMES",
    "ParameterSet",
    "initialize_parameters",
    "save_parameters",
    "load_parameters",
]
