import math

import numpy as np
import pytest

from scratch_mlp.core import (
    GradientSet,
    ParameterSet,
    backward,
    cross_entropy,
    forward,
    initialize_parameters,
    relu_derivative,
    softmax,
    update,
)
from scratch_mlp.errors import InvalidHyperparameterError, ShapeMismatchError


def make_toy_problem():
    x = np.array(
        [
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
            [1.0, 1.0, 1.0],
        ]
    )
    y = np.array(
        [
            [1.0, 0.0],
            [0.0, 1.0],
            [0.0, 1.0],
            [1.0, 0.0],
        ]
    )
    params = ParameterSet(
        W1=np.array([[1.0, 0.0], [0.0, 1.0], [1.0, -1.0]]),
        b1=np.zeros(2),
        W2=np.eye(2),
        b2=np.zeros(2),
    )
    return x, y, params


def sigmoid(value: float) -> float:
    return 1.0 / (1.0 + math.exp(-value))


def test_toy_forward_pass_matches_hand_computation() -> None:
    x, y, params = make_toy_problem()
    cache = forward(x, params)

    np.testing.assert_allclose(cache.Z1, [[1, 0], [0, 1], [1, -1], [2, 0]])
    np.testing.assert_allclose(cache.A1, [[1, 0], [0, 1], [1, 0], [2, 0]])
    # with W2 = I and b2 = 0 the two-class softmax reduces to sigmoids of the logit gap
    expected = np.array(
        [
            [sigmoid(1), sigmoid(-1)],
            [sigmoid(-1), sigmoid(1)],
            [sigmoid(1), sigmoid(-1)],
            [sigmoid(2), sigmoid(-2)],
        ]
    )
    np.testing.assert_allclose(cache.A2, expected, rtol=1e-12)
    assert cache.A2[0, 0] == pytest.approx(0.7310585786300049)
    assert cache.A2[3, 1] == pytest.approx(0.11920292202211755)

    loss = cross_entropy(cache.A2, y)
    assert loss == pytest.approx(0.5166782683994103, abs=1e-6)


def test_toy_first_step_gradients_and_update() -> None:
    x, y, params = make_toy_problem()
    cache = forward(x, params)
    grads = backward(x, y, cache, params.W2)

    a = sigmoid(-1) / 4
    b = sigmoid(1) / 4
    c = sigmoid(-2) / 4
    np.testing.assert_allclose(grads.db2, [b - c, c - b], rtol=1e-12)
    assert grads.db2[0] == pytest.approx(0.15296391415197183)
    np.testing.assert_allclose(grads.dW2, [[b - a - 2 * c, a - b + 2 * c], [a, -a]], rtol=1e-12)

    updated = update(params, grads, learning_rate=0.5)
    np.testing.assert_allclose(updated.b2, -0.5 * grads.db2)
    np.testing.assert_allclose(params.b2, np.zeros(2))
    assert cross_entropy(forward(x, updated).A2, y) < cross_entropy(cache.A2, y)


def test_softmax_rows_are_distributions_for_large_logits() -> None:
    logits = np.array([[1000.0, 1001.0, 999.0], [-1000.0, 0.0, 1000.0], [0.0, 0.0, 0.0]])
    probs = softmax(logits)
    assert np.all(np.isfinite(probs))
    assert np.all(probs >= 0.0)
    np.testing.assert_allclose(probs.sum(axis=1), np.ones(3), atol=1e-6)
    np.testing.assert_allclose(probs[2], np.full(3, 1.0 / 3.0))


def test_forward_output_rows_sum_to_one() -> None:
    rng = np.random.default_rng(3)
    x = rng.uniform(0.0, 1.0, size=(17, 6))
    params = initialize_parameters(6, 9, 4, seed=5, std=2.0)
    cache = forward(x, params)
    assert cache.A2.shape == (17, 4)
    assert np.all(cache.A2 >= 0.0)
    np.testing.assert_allclose(cache.A2.sum(axis=1), np.ones(17), atol=1e-6)


def test_relu_derivative_is_zero_at_zero() -> None:
    assert relu_derivative(0.0) == 0
    np.testing.assert_array_equal(relu_derivative(np.array([-1.0, 0.0, 1e-12, 3.0])), [0.0, 0.0, 1.0, 1.0])


@pytest.mark.parametrize("n_in,hidden,n_out", [(1, 1, 1), (3, 5, 2), (7, 2, 10), (4, 16, 3)])
def test_gradient_shapes_match_parameters(n_in: int, hidden: int, n_out: int) -> None:
    rng = np.random.default_rng(n_in * 100 + hidden)
    x = rng.uniform(size=(6, n_in))
    y = np.eye(n_out)[rng.integers(0, n_out, size=6)]
    params = initialize_parameters(n_in, hidden, n_out, seed=1)
    grads = backward(x, y, forward(x, params), params.W2)
    assert grads.dW1.shape == params.W1.shape
    assert grads.db1.shape == params.b1.shape
    assert grads.dW2.shape == params.W2.shape
    assert grads.db2.shape == params.b2.shape


def test_forward_and_backward_do_not_mutate_inputs() -> None:
    x, y, params = make_toy_problem()
    before = params.as_dict()
    x_before = x.copy()
    cache = forward(x, params)
    backward(x, y, cache, params.W2)
    for name, value in before.items():
        np.testing.assert_array_equal(getattr(params, name), value)
    np.testing.assert_array_equal(x, x_before)


def test_forward_rejects_feature_mismatch() -> None:
    params = initialize_parameters(3, 4, 2)
    with pytest.raises(ShapeMismatchError):
        forward(np.ones((5, 4)), params)
    with pytest.raises(ShapeMismatchError):
        forward(np.ones(3), params)


def test_backward_rejects_label_mismatch() -> None:
    x, _, params = make_toy_problem()
    cache = forward(x, params)
    with pytest.raises(ShapeMismatchError):
        backward(x, np.ones((4, 3)), cache, params.W2)
    with pytest.raises(ShapeMismatchError):
        backward(x[:3], np.ones((3, 2)), cache, params.W2)


def test_update_rejects_mismatched_gradients() -> None:
    x, y, params = make_toy_problem()
    grads = backward(x, y, forward(x, params), params.W2)
    wrong = GradientSet(dW1=grads.dW1.T, db1=grads.db1, dW2=grads.dW2, db2=grads.db2)
    with pytest.raises(ShapeMismatchError):
        update(params, wrong, learning_rate=0.1)


@pytest.mark.parametrize("learning_rate", ["0.1", None, True, 0.0])
def test_update_rejects_invalid_learning_rate(learning_rate) -> None:
    x, y, params = make_toy_problem()
    grads = backward(x, y, forward(x, params), params.W2)
    with pytest.raises(InvalidHyperparameterError):
        update(params, grads, learning_rate=learning_rate)
