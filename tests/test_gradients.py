import numpy as np
import pytest

from scratch_mlp.core import backward, cross_entropy, forward, initialize_parameters, update
from scratch_mlp.tasks import BlobsConfig, make_blobs
from scratch_mlp.utils import gradient_check, numerical_gradient


def make_batch():
    x, y = make_blobs(BlobsConfig(num_samples=12, num_features=5, num_classes=4, seed=21))
    params = initialize_parameters(5, 7, 4, seed=2, std=0.5)
    return x, y, params


def test_analytic_gradients_agree_with_central_differences() -> None:
    x, y, params = make_batch()
    report = gradient_check(x, y, params, num_checks=15, seed=0)
    assert report["max_rel_error"] < 1e-4
    assert report["mean_rel_error"] <= report["max_rel_error"]


def test_single_weight_perturbation_matches_backprop() -> None:
    x, y, params = make_batch()
    grads = backward(x, y, forward(x, params), params.W2)
    for name, index in (("W2", (3, 1)), ("b2", (2,)), ("b1", (0,))):
        numeric = numerical_gradient(x, y, params, name, index)
        analytic = getattr(grads, "d" + name)[index]
        assert analytic == pytest.approx(numeric, rel=1e-4, abs=1e-9)


def test_small_update_reduces_loss_on_same_batch() -> None:
    x, y, params = make_batch()
    cache = forward(x, params)
    before = cross_entropy(cache.A2, y)
    stepped = update(params, backward(x, y, cache, params.W2), learning_rate=1e-3)
    assert cross_entropy(forward(x, stepped).A2, y) < before


def test_gradients_match_torch_autograd() -> None:
    torch = pytest.importorskip("torch")
    x, y, params = make_batch()
    grads = backward(x, y, forward(x, params), params.W2)

    tensors = {
        name: torch.tensor(value, dtype=torch.float64, requires_grad=True)
        for name, value in params.as_dict().items()
    }
    x_t = torch.tensor(x, dtype=torch.float64)
    y_t = torch.tensor(y, dtype=torch.float64)
    hidden = torch.relu(x_t @ tensors["W1"] + tensors["b1"])
    logits = hidden @ tensors["W2"] + tensors["b2"]
    log_probs = torch.log_softmax(logits, dim=1)
    loss = -(y_t * log_probs).sum() / x.shape[0]
    loss.backward()

    for name in ("W1", "b1", "W2", "b2"):
        np.testing.assert_allclose(
            getattr(grads, "d" + name),
            tensors[name].grad.numpy(),
            rtol=1e-6,
            atol=1e-10,
        )
