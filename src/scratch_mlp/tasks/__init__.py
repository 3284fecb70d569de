"""Synthetic datasets for exercising the training engine."""

from .blobs import BlobsConfig, make_blobs

__all__ = ["BlobsConfig", "make_blobs"]
