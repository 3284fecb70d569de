"""Configuration dataclasses for training runs and sweeps."""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from .errors import InvalidHyperparameterError


def is_integer(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_positive_real(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value) and value > 0


@dataclass(frozen=True, slots=True)
class HyperparameterConfig:
    """One entry of a hyperparameter sweep.

    Parameters
    ----------
    learning_rate:
        Step size used by every gradient-descent update. Must be a finite,
        strictly positive number.
    hidden_size:
        Width of the single ReLU hidden layer.
    """

    learning_rate: float
    hidden_size: int

    def __post_init__(self) -> None:
        if not is_positive_real(self.learning_rate):
            raise InvalidHyperparameterError(
                f"learning_rate must be positive, got {self.learning_rate!r}"
            )
        if not is_integer(self.hidden_size) or self.hidden_size <= 0:
            raise InvalidHyperparameterError(
                f"hidden_size must be a positive integer, got {self.hidden_size!r}"
            )


@dataclass(frozen=True, slots=True)
class TrainingConfig:
    """Settings shared by every run of a sweep.

    Parameters
    ----------
    epochs:
        Number of full-batch gradient-descent steps. ``0`` evaluates the
        freshly initialised network without updating it.
    seed:
        Seed for weight initialisation. Identical seeds, data and
        hyperparameters reproduce identical loss trajectories.
    init_std:
        Standard deviation of the zero-mean Gaussian used for the weights.
    """

    epochs: int = 100
    seed: int = 0
    init_std: float = 0.01

    def __post_init__(self) -> None:
        if not is_integer(self.epochs) or self.epochs < 0:
            raise InvalidHyperparameterError(
                f"epochs must be a non-negative integer, got {self.epochs!r}"
            )
        if not is_positive_real(self.init_std):
            raise InvalidHyperparameterError(f"init_std must be positive, got {self.init_std!r}")


__all__ = ["HyperparameterConfig", "TrainingConfig"]
