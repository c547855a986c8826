# gdlogit/inference/predictor.py
"""
Predictor

Forward pass only: p = sigmoid(dot(w, x) + b).

Responsibilities:
- validate the feature vector against the trained feature length
- return a probability per sample

Non-responsibilities:
- training, loading policy, thresholding into classes (see report)

A Predictor holds a private read-only copy of the parameters, so any
number of threads may call predict() on it; reloading means building a
new Predictor, never mutating this one.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from gdlogit.config.training_config import ActivationFunction
from gdlogit.model.functions import Activation, resolve_activation
from gdlogit.model.params import ModelParams
from gdlogit.model.persistence import load_model
from gdlogit.utils.errors import InvalidInputError


class Predictor:

    def __init__(
        self,
        params: ModelParams,
        activation: Activation | ActivationFunction | str = ActivationFunction.SIGMOID,
    ):
        params = params.copy()
        params.weights.setflags(write=False)
        self.params = params
        self.activation = (
            activation if isinstance(activation, Activation) else resolve_activation(activation)
        )

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        activation: ActivationFunction | str = ActivationFunction.SIGMOID,
    ) -> "Predictor":
        return cls(load_model(path), activation=activation)

    @property
    def feature_length(self) -> int:
        return self.params.feature_length

    def predict(self, features: Sequence[float], feature_length: Optional[int] = None) -> float:
        x = np.asarray(features, dtype=np.float32).reshape(-1)
        if feature_length is None:
            feature_length = x.shape[0]

        if feature_length != self.feature_length:
            raise InvalidInputError(
                f"feature length {feature_length} != model feature length {self.feature_length}"
            )
        if x.shape[0] != feature_length:
            raise InvalidInputError(
                f"declared feature length {feature_length} but got {x.shape[0]} values"
            )

        return float(self.activation(float(np.dot(x, self.params.weights)) + float(self.params.bias)))

    def predict_batch(self, samples) -> np.ndarray:
        X = np.asarray(samples, dtype=np.float32)
        if X.ndim != 2 or X.shape[1] != self.feature_length:
            raise InvalidInputError(
                f"expected shape (n, {self.feature_length}), got {X.shape}"
            )
        return np.asarray(self.activation(X @ self.params.weights + self.params.bias), dtype=np.float64)
