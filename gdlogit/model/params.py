# gdlogit/model/params.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class ModelParams:
    """
    Learned parameters: float32 weight vector + float32 bias.

    Mutated in place by the gradient engine during training only.
    """

    weights: np.ndarray
    bias: np.float32

    def __post_init__(self):
        self.weights = np.ascontiguousarray(self.weights, dtype=np.float32).reshape(-1)
        self.bias = np.float32(self.bias)

    @property
    def feature_length(self) -> int:
        return int(self.weights.shape[0])

    def copy(self) -> "ModelParams":
        return ModelParams(weights=self.weights.copy(), bias=self.bias)
