"""Hyperparameter sweeps over independently trained networks."""
from __future__ import annotations

import importlib
import importlib.util
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np
from tqdm.auto import tqdm

from ..config import HyperparameterConfig, TrainingConfig, is_integer
from ..core import accuracy
from ..errors import InvalidHyperparameterError
from .trainer import train_config, validate_dataset

wandb_spec = importlib.util.find_spec("wandb")
wandb = importlib.import_module("wandb") if wandb_spec is not None else None


@dataclass(frozen=True, slots=True)
class ResultRow:
    """Final metrics of one sweep entry."""

    learning_rate: float
    hidden_size: int
    final_loss: float
    final_accuracy: float

    @property
    def diverged(self) -> bool:
        return not math.isfinite(self.final_loss)

    def as_dict(self) -> Dict[str, float | int | bool]:
        return {**asdict(self), "diverged": self.diverged}


def grid(learning_rates: Iterable[float], hidden_sizes: Iterable[int]) -> List[HyperparameterConfig]:
    """Cartesian product of the two axes, learning rate varying slowest."""

    sizes = list(hidden_sizes)
    return [
        HyperparameterConfig(learning_rate=lr, hidden_size=size)
        for lr in learning_rates
        for size in sizes
    ]


def sweep(
    configs: Sequence[HyperparameterConfig],
    x: np.ndarray,
    y: np.ndarray,
    epochs: int,
    *,
    seed: int = 0,
    init_std: float = 0.01,
    max_workers: Optional[int] = None,
    progress: bool = False,
    log_wandb: bool = False,
) -> List[ResultRow]:
    """Train one fresh network per configuration and collect the final losses.

    Rows are returned in the order of ``configs`` whether runs execute
    sequentially (the default) or on ``max_workers`` threads. Every run
    starts from its own initialisation drawn with ``seed``; nothing is
    shared between runs.

    With ``log_wandb`` set and wandb installed, each row is sent to
    ``wandb.log`` in input order once all runs have finished.
    """

    configs = list(configs)
    for index, entry in enumerate(configs):
        if not isinstance(entry, HyperparameterConfig):
            raise TypeError(
                f"configs[{index}] must be a HyperparameterConfig, got {type(entry).__name__}"
            )
    if max_workers is not None and (not is_integer(max_workers) or max_workers < 1):
        raise InvalidHyperparameterError(f"max_workers must be a positive integer, got {max_workers!r}")
    training = TrainingConfig(epochs=epochs, seed=seed, init_std=init_std)
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    validate_dataset(x, y)

    def run(hyperparameters: HyperparameterConfig) -> ResultRow:
        result = train_config(x, y, hyperparameters, training)
        with np.errstate(over="ignore", invalid="ignore"):
            final_accuracy = accuracy(x, y, result.params)
        return ResultRow(
            learning_rate=hyperparameters.learning_rate,
            hidden_size=hyperparameters.hidden_size,
            final_loss=result.final_loss,
            final_accuracy=final_accuracy,
        )

    if max_workers is not None and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = executor.map(run, configs)
            if progress:
                results = tqdm(results, total=len(configs), desc="sweep")
            rows = list(results)
    else:
        iterator: Iterable[HyperparameterConfig] = configs
        if progress:
            iterator = tqdm(configs, desc="sweep")
        rows = [run(entry) for entry in iterator]

    if log_wandb and wandb is not None:
        for row in rows:
            wandb.log(row.as_dict())
    return rows


def format_results(rows: Sequence[ResultRow]) -> str:
    """Render rows as a fixed-width comparison table."""

    header = f"{'learning_rate':>14}  {'hidden_size':>11}  {'final_loss':>12}  {'accuracy':>8}"
    lines = [header, "-" * len(header)]
    for row in rows:
        loss = f"{row.final_loss:12.6f}" if not row.diverged else f"{'diverged':>12}"
        lines.append(
            f"{row.learning_rate:>14g}  {row.hidden_size:>11d}  {loss}  {row.final_accuracy:>8.3f}"
        )
    return "\n".join(lines)


__all__ = ["ResultRow", "grid", "sweep", "format_results"]
