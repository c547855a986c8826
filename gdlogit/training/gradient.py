# gdlogit/training/gradient.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

import numpy as np

from gdlogit.config.training_config import Optimization
from gdlogit.data.dataset import Dataset
from gdlogit.model.functions import Activation, Loss
from gdlogit.model.params import ModelParams


@dataclass(frozen=True)
class GradientStep:
    """Range-averaged gradient that was just applied."""
    dw: np.ndarray
    db: float
    size: int


def _batch_rows(
    dataset: Dataset,
    start: int,
    end: int,
    order: Optional[np.ndarray],
) -> np.ndarray:
    # BGD walks the dataset in storage order over the whole range
    return np.arange(dataset.samples.shape[0])


def _shuffled_rows(
    dataset: Dataset,
    start: int,
    end: int,
    order: Optional[np.ndarray],
) -> np.ndarray:
    if order is None:
        raise ValueError("[GradientEngine] shuffled optimizers need a shuffle index")
    return order[start:end]


_ROW_SELECTORS: Dict[Optimization, Callable[..., np.ndarray]] = {
    Optimization.BGD: _batch_rows,
    Optimization.SGD: _shuffled_rows,
    Optimization.MBGD: _shuffled_rows,
}


class GradientEngine:
    """
    GradientEngine

    One update step over the sample range [start, end):

        z  = X @ w + b
        a  = activation(z)
        d  = loss.derivative(a, y)          # a - y for squared error
        dw = X.T @ d / len(range)
        db = sum(d) / len(range)
        w -= alpha * dw ; b -= alpha * db

    The optimizer variant only decides which rows form the range:
    BGD uses every sample in storage order, SGD / MBGD read
    ``order[start:end]`` (the per-epoch shuffle index).

    BGD additionally writes the activations it computed into
    ``activations`` (the trainer's cache), so the cost reported for an
    epoch is the cost of the parameters that entered it.
    """

    def __init__(
        self,
        *,
        dataset: Dataset,
        activation: Activation,
        loss: Loss,
        learning_rate: float,
        optimizer: Optimization,
    ):
        self.dataset = dataset
        self.activation = activation
        self.loss = loss
        self.alpha = learning_rate
        self.optimizer = Optimization(optimizer)
        self._select_rows = _ROW_SELECTORS[self.optimizer]

    def step(
        self,
        params: ModelParams,
        start: int = 0,
        end: Optional[int] = None,
        *,
        order: Optional[np.ndarray] = None,
        activations: Optional[np.ndarray] = None,
    ) -> GradientStep:
        if end is None:
            end = len(self.dataset)

        rows = self._select_rows(self.dataset, start, end, order)
        size = len(rows)
        if size == 0:
            raise ValueError(f"[GradientEngine] empty sample range [{start}, {end})")

        X = self.dataset.samples[rows]
        y = self.dataset.labels[rows]

        a = self.activation(X @ params.weights + params.bias)
        if self.optimizer is Optimization.BGD and activations is not None:
            activations[:] = a

        d = self.loss.derivative(a, y)
        dw = (X.T @ d) / size
        db = float(np.sum(d)) / size

        params.weights -= self.alpha * dw
        params.bias = np.float32(params.bias - self.alpha * db)

        return GradientStep(dw=dw, db=db, size=size)
