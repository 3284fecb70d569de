import numpy as np
import pytest

from scratch_mlp.tasks import BlobsConfig, make_blobs


def test_blobs_shapes_and_ranges() -> None:
    config = BlobsConfig(num_samples=30, num_features=6, num_classes=4, seed=1)
    x, y = make_blobs(config)
    assert x.shape == (30, 6)
    assert y.shape == (30, 4)
    assert x.min() >= 0.0 and x.max() <= 1.0
    np.testing.assert_array_equal(y.sum(axis=1), np.ones(30))
    # round-robin assignment keeps every class present
    assert set(np.argmax(y, axis=1)) == {0, 1, 2, 3}


def test_blobs_are_reproducible() -> None:
    first = make_blobs(BlobsConfig(seed=3))
    second = make_blobs(BlobsConfig(seed=3))
    np.testing.assert_array_equal(first[0], second[0])
    np.testing.assert_array_equal(first[1], second[1])


def test_blobs_config_validates() -> None:
    with pytest.raises(ValueError):
        BlobsConfig(num_classes=1)
    with pytest.raises(ValueError):
        BlobsConfig(num_samples=0)
