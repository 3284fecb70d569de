"""Gaussian-cluster classification data for demos and tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True, slots=True)
class BlobsConfig:
    """Configuration for synthetic cluster datasets."""

    num_samples: int = 256
    num_features: int = 8
    num_classes: int = 3
    spread: float = 1.0
    separation: float = 4.0
    seed: int = 0

    def __post_init__(self) -> None:
        if self.num_samples <= 0:
            raise ValueError("num_samples must be positive")
        if self.num_features <= 0:
            raise ValueError("num_features must be positive")
        if self.num_classes <= 1:
            raise ValueError("num_classes must be at least 2")
        if self.spread <= 0:
            raise ValueError("spread must be positive")


def make_blobs(config: BlobsConfig | None = None) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(features, one_hot_labels)``.

    Features are min-max scaled column-wise into ``[0, 1]``; labels are an
    ``(num_samples, num_classes)`` one-hot matrix. Classes are assigned
    round-robin so every class is represented once ``num_samples`` reaches
    ``num_classes``.
    """

    cfg = config or BlobsConfig()
    rng = np.random.default_rng(cfg.seed)
    centres = rng.normal(0.0, cfg.separation, size=(cfg.num_classes, cfg.num_features))
    classes = np.arange(cfg.num_samples) % cfg.num_classes
    rng.shuffle(classes)
    features = centres[classes] + rng.normal(0.0, cfg.spread, size=(cfg.num_samples, cfg.num_features))

    low = features.min(axis=0)
    span = features.max(axis=0) - low
    span[span == 0] = 1.0
    features = (features - low) / span

    labels = np.zeros((cfg.num_samples, cfg.num_classes))
    labels[np.arange(cfg.num_samples), classes] = 1.0
    return features, labels


__all__ = ["BlobsConfig", "make_blobs"]
