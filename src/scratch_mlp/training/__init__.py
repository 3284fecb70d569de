"""Training loop and hyperparameter sweeps."""

from .sweep import ResultRow, format_results, grid, sweep
from .trainer import TrainingHistory, TrainingResult, train, train_config

__all__ = [
    "ResultRow",
    "format_results",
    "grid",
    "sweep",
    "TrainingHistory",
    "TrainingResult",
    "train",
    "train_config",
]
