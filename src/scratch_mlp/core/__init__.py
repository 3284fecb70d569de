"""Numerical building blocks of the perceptron."""

from .backward import GradientSet, backward
from .forward import ForwardCache, accuracy, forward, predict, predict_proba
from .functional import add_bias, check_matmul, relu, relu_derivative, softmax
from .loss import EPSILON, cross_entropy
from .optimizer import update
from .params import (
    PARAMETER_NAMES,
    ParameterSet,
    initialize_parameters,
    load_parameters,
    save_parameters,
)

__all__ = [
    "GradientSet",
    "backward",
    "ForwardCache",
    "accuracy",
    "forward",
    "predict",
    "predict_proba",
    "add_bias",
    "check_matmul",
    "relu",
    "relu_derivative",
    "softmax",
    "EPSILON",
    "cross_entropy",
    "update",
    "PARAMETER_NAMES",
    "ParameterSet",
    "initialize_parameters",
    "load_parameters",
    "save_parameters",
]
