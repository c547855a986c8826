# gdlogit/model/functions.py
"""
Activation / loss strategies.

Only sigmoid activation and squared-error loss exist. They are paired on
purpose: the per-sample derivative used by the gradient engine is
``a - y`` (the derivative of 1/2 (y - a)^2 w.r.t. the activation output),
and the reported cost is the mean squared error. Do not swap in
cross-entropy here, it changes every learned weight.

New strategies are added by subclassing and registering them below;
the gradient engine only talks to the base classes.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict

import numpy as np

from gdlogit.config.training_config import ActivationFunction, LossFunction
from gdlogit.utils.errors import InvalidInputError


class Activation(ABC):
    name: str = ""

    @abstractmethod
    def __call__(self, z):
        """Scalar or array in, same shape out."""
        raise NotImplementedError


class Sigmoid(Activation):
    name = "sigmoid"

    # float64 rounds to exactly 0.0 / 1.0 once |z| passes ~745 / ~37;
    # clipping keeps every finite input strictly inside (0, 1)
    eps = float(np.finfo(np.float64).eps)

    def __call__(self, z):
        z = np.asarray(z, dtype=np.float64)
        # exp overflow for very negative z is expected and yields 0.0
        with np.errstate(over="ignore"):
            out = 1.0 / (1.0 + np.exp(-z))
        out = np.clip(out, self.eps, 1.0 - self.eps)
        return out if out.ndim else float(out)


class Loss(ABC):
    name: str = ""

    @abstractmethod
    def value(self, predictions: np.ndarray, labels: np.ndarray) -> float:
        """Aggregate loss: mean over all samples."""
        raise NotImplementedError

    @abstractmethod
    def derivative(self, prediction, label):
        """Per-sample derivative w.r.t. the prediction (elementwise on arrays)."""
        raise NotImplementedError

    @abstractmethod
    def mean_derivative(self, predictions: np.ndarray, labels: np.ndarray) -> float:
        """Aggregate derivative: mean of the per-sample derivatives."""
        raise NotImplementedError


class MeanSquaredError(Loss):
    name = "mse"

    def value(self, predictions: np.ndarray, labels: np.ndarray) -> float:
        diff = np.asarray(labels, dtype=np.float64) - np.asarray(predictions, dtype=np.float64)
        return float(np.mean(0.5 * diff ** 2))

    def derivative(self, prediction, label):
        return prediction - label

    def mean_derivative(self, predictions: np.ndarray, labels: np.ndarray) -> float:
        diff = np.asarray(predictions, dtype=np.float64) - np.asarray(labels, dtype=np.float64)
        return float(np.mean(diff))


_ACTIVATION_REGISTRY: Dict[ActivationFunction, Callable[[], Activation]] = {
    ActivationFunction.SIGMOID: Sigmoid,
}

_LOSS_REGISTRY: Dict[LossFunction, Callable[[], Loss]] = {
    LossFunction.MSE: MeanSquaredError,
}


def resolve_activation(kind: ActivationFunction | str) -> Activation:
    try:
        key = ActivationFunction(kind)
    except ValueError:
        available = ", ".join(k.value for k in _ACTIVATION_REGISTRY)
        raise InvalidInputError(
            f"No activation function '{kind}'. Available: {available}"
        ) from None
    return _ACTIVATION_REGISTRY[key]()


def resolve_loss(kind: LossFunction | str) -> Loss:
    try:
        key = LossFunction(kind)
    except ValueError:
        available = ", ".join(k.value for k in _LOSS_REGISTRY)
        raise InvalidInputError(
            f"No loss function '{kind}'. Available: {available}"
        ) from None
    return _LOSS_REGISTRY[key]()
