"""Train the two-layer perceptron on an ``.npz`` dataset or synthetic clusters."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Tuple

import numpy as np

from scratch_mlp.core import accuracy, save_parameters
from scratch_mlp.tasks import BlobsConfig, make_blobs
from scratch_mlp.training import train


def load_dataset(path: Path) -> Tuple[np.ndarray, np.ndarray]:
    """Read preprocessed ``x`` (features) and ``y`` (one-hot labels) arrays."""

    with np.load(path) as archive:
        return np.asarray(archive["x"], dtype=np.float64), np.asarray(archive["y"], dtype=np.float64)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Train a two-layer perceptron with manual backprop")
    parser.add_argument("--data", type=Path, default=None, help="npz file holding 'x' and 'y' arrays")
    parser.add_argument("--num-samples", type=int, default=300)
    parser.add_argument("--num-features", type=int, default=8)
    parser.add_argument("--num-classes", type=int, default=3)
    parser.add_argument("--hidden-size", type=int, default=32)
    parser.add_argument("--lr", type=float, default=0.5)
    parser.add_argument("--epochs", type=int, default=200)
    parser.add_argument("--init-std", type=float, default=0.01)
    parser.add_argument("--log-every", type=int, default=20)
    parser.add_argument("--progress", action="store_true")
    parser.add_argument("--log-wandb", action="store_true", help="Send per-epoch losses to wandb if installed")
    parser.add_argument("--save-path", type=Path, default=None)
    parser.add_argument("--seed", type=int, default=0)
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if args.data is not None:
        x, y = load_dataset(args.data)
    else:
        x, y = make_blobs(
            BlobsConfig(
                num_samples=args.num_samples,
                num_features=args.num_features,
                num_classes=args.num_classes,
                seed=args.seed,
            )
        )
    print(f"Training on {x.shape[0]} samples, {x.shape[1]} features, {y.shape[1]} classes")

    def log_epoch(epoch: int, loss: float) -> None:
        if args.log_every > 0 and (epoch % args.log_every == 0 or epoch == args.epochs):
            print(f"Epoch {epoch}: loss={loss:.6f}")

    result = train(
        x,
        y,
        args.lr,
        args.hidden_size,
        args.epochs,
        seed=args.seed,
        init_std=args.init_std,
        on_epoch=log_epoch,
        progress=args.progress,
        log_wandb=args.log_wandb,
    )
    if result.diverged:
        print(f"Training diverged: final loss {result.final_loss}")
    else:
        print(f"Final loss: {result.final_loss:.6f}")
        print(f"Training accuracy: {accuracy(x, y, result.params):.3f}")

    if args.save_path:
        save_parameters(args.save_path, result.params)
        print(f"Saved parameters to {args.save_path}")


if __name__ == "__main__":
    main()
