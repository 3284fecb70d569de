"""Full-batch gradient-descent training loop."""
from __future__ import annotations

import importlib
import importlib.util
import math
from dataclasses import dataclass, field
from typing import Callable, Optional

import numpy as np
from tqdm.auto import tqdm

from ..config import HyperparameterConfig, TrainingConfig
from ..core import backward, cross_entropy, forward, initialize_parameters, update
from ..core.functional import check_matrix
from ..core.params import ParameterSet
from ..errors import InvalidHyperparameterError, ShapeMismatchError

wandb_spec = importlib.util.find_spec("wandb")
wandb = importlib.import_module("wandb") if wandb_spec is not None else None

EpochCallback = Callable[[int, float], None]


@dataclass
class TrainingHistory:
    """Loss observed at every epoch, in epoch order."""

    losses: list[float] = field(default_factory=list)


@dataclass
class TrainingResult:
    """Outcome of :func:`train`."""

    final_loss: float
    params: ParameterSet
    history: TrainingHistory
    hyperparameters: HyperparameterConfig
    epochs: int
    seed: int

    @property
    def diverged(self) -> bool:
        return not math.isfinite(self.final_loss)


def validate_dataset(x: np.ndarray, y: np.ndarray) -> None:
    """Reject feature/label matrices that cannot be trained on together."""

    check_matrix("X", x)
    check_matrix("Y", y)
    if x.shape[0] != y.shape[0]:
        raise ShapeMismatchError(f"X has {x.shape[0]} rows but Y has {y.shape[0]}")
    if x.shape[0] == 0:
        raise InvalidHyperparameterError("training data must contain at least one sample")
    if x.shape[1] == 0 or y.shape[1] == 0:
        raise ShapeMismatchError(f"X {x.shape} and Y {y.shape} need at least one column each")


def train(
    x: np.ndarray,
    y: np.ndarray,
    learning_rate: float,
    hidden_size: int,
    epochs: int,
    *,
    seed: int = 0,
    init_std: float = 0.01,
    on_epoch: Optional[EpochCallback] = None,
    progress: bool = False,
    log_wandb: bool = False,
) -> TrainingResult:
    """Train a fresh network for exactly ``epochs`` full-batch steps.

    Each epoch runs forward, loss, backward and update on the whole dataset
    and records the loss of that forward pass; the final loss is the one
    recorded by the last epoch. With ``epochs == 0`` the loss of the freshly
    initialised parameters is returned and nothing is updated.

    A run that diverges is not interrupted: non-finite losses are recorded
    as-is and surface through :attr:`TrainingResult.diverged`.

    With ``log_wandb`` set and wandb installed, every epoch is also sent to
    ``wandb.log`` as ``{"epoch", "loss"}``; wandb is otherwise skipped.
    """

    hyperparameters = HyperparameterConfig(learning_rate=learning_rate, hidden_size=hidden_size)
    config = TrainingConfig(epochs=epochs, seed=seed, init_std=init_std)
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    validate_dataset(x, y)

    params = initialize_parameters(
        x.shape[1],
        hyperparameters.hidden_size,
        y.shape[1],
        config.seed,
        std=config.init_std,
    )
    history = TrainingHistory()
    use_wandb = log_wandb and wandb is not None

    if config.epochs == 0:
        final_loss = cross_entropy(forward(x, params).A2, y)
        return TrainingResult(final_loss, params, history, hyperparameters, config.epochs, config.seed)

    epoch_iter = range(1, config.epochs + 1)
    iterator = epoch_iter
    if progress:
        iterator = tqdm(epoch_iter, desc=f"train lr={learning_rate:g} h={hidden_size}", leave=False)

    loss = math.nan
    for epoch in iterator:
        with np.errstate(over="ignore", invalid="ignore"):
            cache = forward(x, params)
            loss = cross_entropy(cache.A2, y)
            grads = backward(x, y, cache, params.W2)
            params = update(params, grads, hyperparameters.learning_rate)
        history.losses.append(loss)
        if on_epoch is not None:
            on_epoch(epoch, loss)
        if use_wandb:
            wandb.log({"epoch": epoch, "loss": loss})
        if progress:
            iterator.set_postfix(loss=f"{loss:.4f}")

    return TrainingResult(loss, params, history, hyperparameters, config.epochs, config.seed)


def train_config(
    x: np.ndarray,
    y: np.ndarray,
    hyperparameters: HyperparameterConfig,
    config: TrainingConfig,
    **kwargs,
) -> TrainingResult:
    """Convenience wrapper taking typed configuration objects."""

    return train(
        x,
        y,
        hyperparameters.learning_rate,
        hyperparameters.hidden_size,
        config.epochs,
        seed=config.seed,
        init_std=config.init_std,
        **kwargs,
    )


__all__ = [
    "EpochCallback",
    "TrainingHistory",
    "TrainingResult",
    "train",
    "train_config",
    "validate_dataset",
]
