"""Two-layer perceptron trained with hand-derived backpropagation.

The package is organised bottom-up:
- ``core``: parameter store, forward/backward passes, loss and optimiser,
- ``training``: the full-batch training loop and hyperparameter sweeps,
- ``tasks``: synthetic classification data for demos and tests,
- ``utils``: numerical gradient checking.
"""

from .config import HyperparameterConfig, TrainingConfig
from .errors import InvalidHyperparameterError, ShapeMismatchError
from .training import ResultRow, TrainingHistory, TrainingResult, sweep, train

__all__ = [
    "HyperparameterConfig",
    "TrainingConfig",
    "InvalidHyperparameterError",
    "ShapeMismatchError",
    "ResultRow",
    "TrainingHistory",
    "TrainingResult",
    "sweep",
    "train",
]
