#!/usr/bin/env python3
"""Sweep learning rates and hidden sizes on a fixed data subset and report final losses."""
from __future__ import annotations

import argparse
import json
from pathlib import Path

import numpy as np

from scratch_mlp.tasks import BlobsConfig, make_blobs
from scratch_mlp.training import format_results, grid, sweep


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--data", type=Path, default=None, help="npz file holding 'x' and 'y' arrays")
    p.add_argument("--subset", type=int, default=None, help="Use only the first N samples")
    p.add_argument("--num-samples", type=int, default=300)
    p.add_argument("--num-features", type=int, default=8)
    p.add_argument("--num-classes", type=int, default=3)
    p.add_argument("--learning-rates", type=float, nargs="+", default=[0.01, 0.1, 0.5])
    p.add_argument("--hidden-sizes", type=int, nargs="+", default=[16, 64])
    p.add_argument("--epochs", type=int, default=100)
    p.add_argument("--init-std", type=float, default=0.01)
    p.add_argument("--workers", type=int, default=None)
    p.add_argument("--progress", action="store_true")
    p.add_argument("--log-wandb", action="store_true", help="Send result rows to wandb if installed")
    p.add_argument("--out", type=Path, default=None, help="Optional JSON output path")
    p.add_argument("--seed", type=int, default=0)
    return p.parse_args()


def main() -> None:
    args = parse_args()
    if args.data is not None:
        with np.load(args.data) as archive:
            x = np.asarray(archive["x"], dtype=np.float64)
            y = np.asarray(archive["y"], dtype=np.float64)
    else:
        x, y = make_blobs(
            BlobsConfig(
                num_samples=args.num_samples,
                num_features=args.num_features,
                num_classes=args.num_classes,
                seed=args.seed,
            )
        )
    if args.subset is not None:
        x, y = x[: args.subset], y[: args.subset]

    configs = grid(args.learning_rates, args.hidden_sizes)
    rows = sweep(
        configs,
        x,
        y,
        args.epochs,
        seed=args.seed,
        init_std=args.init_std,
        max_workers=args.workers,
        progress=args.progress,
        log_wandb=args.log_wandb,
    )
    print(format_results(rows))
    if args.out is not None:
        args.out.write_text(json.dumps([row.as_dict() for row in rows], indent=2))
        print(f"Wrote results to {args.out.resolve()}")


if __name__ == "__main__":
    main()
