# tests/training/test_gradient_engine.py
from __future__ import annotations

import numpy as np
import pytest

from gdlogit.config.training_config import Optimization
from gdlogit.model.functions import MeanSquaredError, Sigmoid
from gdlogit.model.params import ModelParams
from gdlogit.training.gradient import GradientEngine


def _engine(dataset, optimizer, lr=0.1) -> GradientEngine:
    return GradientEngine(
        dataset=dataset,
        activation=Sigmoid(),
        loss=MeanSquaredError(),
        learning_rate=lr,
        optimizer=optimizer,
    )


def _zero_params(n=2) -> ModelParams:
    return ModelParams(weights=np.zeros(n), bias=0.0)


def test_batch_step_gradient_and_update(and_dataset):
    """
    At w=0, b=0 every activation is 0.5, so d = [.5, .5, .5, -.5]:
    dw = X.T @ d / 4 = [0, 0], db = 1.0 / 4.
    """
    params = _zero_params()
    cache = np.zeros(4)

    step = _engine(and_dataset, Optimization.BGD).step(params, activations=cache)

    np.testing.assert_allclose(step.dw, [0.0, 0.0], atol=1e-7)
    assert step.db == pytest.approx(0.25)
    assert step.size == 4
    np.testing.assert_allclose(params.weights, [0.0, 0.0], atol=1e-7)
    assert float(params.bias) == pytest.approx(-0.025)
    np.testing.assert_allclose(cache, [0.5] * 4)


def test_batch_step_ignores_range_and_uses_every_sample(and_dataset):
    params = _zero_params()

    step = _engine(and_dataset, Optimization.BGD).step(params, 0, 1)

    assert step.size == 4


def test_shuffled_step_reads_through_order(and_dataset):
    """
    order[0:1] = [3] -> only sample [1, 1] with label 1:
    d = 0.5 - 1 = -0.5, dw = [-.5, -.5], db = -.5
    """
    params = _zero_params()
    order = np.array([3, 0, 1, 2])
    cache = np.full(4, 7.0)

    step = _engine(and_dataset, Optimization.MBGD).step(params, 0, 1, order=order, activations=cache)

    np.testing.assert_allclose(step.dw, [-0.5, -0.5])
    assert step.db == pytest.approx(-0.5)
    np.testing.assert_allclose(params.weights, [0.05, 0.05], rtol=1e-6)
    assert float(params.bias) == pytest.approx(0.05)
    # only BGD refreshes the cache
    np.testing.assert_array_equal(cache, np.full(4, 7.0))


def test_mini_batch_gradient_is_range_averaged(and_dataset):
    params = _zero_params()
    order = np.array([0, 3, 1, 2])

    step = _engine(and_dataset, Optimization.MBGD, lr=1.0).step(params, 0, 2, order=order)

    # samples [0,0] (y=0, d=.5) and [1,1] (y=1, d=-.5)
    np.testing.assert_allclose(step.dw, [-0.25, -0.25])
    assert step.db == pytest.approx(0.0)
    assert step.size == 2


def test_shuffled_step_requires_order(and_dataset):
    with pytest.raises(ValueError, match="shuffle index"):
        _engine(and_dataset, Optimization.SGD).step(_zero_params(), 0, 1)


def test_empty_range_rejected(and_dataset):
    with pytest.raises(ValueError, match="empty sample range"):
        _engine(and_dataset, Optimization.MBGD).step(_zero_params(), 2, 2, order=np.arange(4))


def test_weights_stay_float32(and_dataset):
    params = _zero_params()

    _engine(and_dataset, Optimization.BGD).step(params)

    assert params.weights.dtype == np.float32
    assert isinstance(params.bias, np.float32)
