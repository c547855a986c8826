# tests/training/test_model_report.py
from __future__ import annotations

import numpy as np
import pytest

from gdlogit.data.dataset import Dataset
from gdlogit.inference.predictor import Predictor
from gdlogit.model.params import ModelParams
from gdlogit.training.report import ModelReportEngine
from gdlogit.utils.errors import InvalidInputError


@pytest.fixture
def and_predictor() -> Predictor:
    # separates AND: only 2*6 - 9 > 0
    return Predictor(ModelParams(weights=np.array([6.0, 6.0]), bias=-9.0))


def test_perfect_model_scores_one(and_predictor, and_dataset):
    metrics = ModelReportEngine().evaluate(predictor=and_predictor, dataset=and_dataset)

    assert metrics["accuracy"] == pytest.approx(1.0)
    assert metrics["f1"] == pytest.approx(1.0)
    assert metrics["auc"] == pytest.approx(1.0)


def test_threshold_changes_predictions(and_predictor, and_dataset):
    metrics = ModelReportEngine().evaluate(
        predictor=and_predictor, dataset=and_dataset, threshold=0.9999
    )

    # p([1,1]) = sigmoid(3) ~ 0.95 falls below the threshold
    assert metrics["accuracy"] == pytest.approx(0.75)
    assert metrics["f1"] == pytest.approx(0.0)


def test_auc_skipped_for_single_class(and_predictor):
    ds = Dataset.from_sequences([[0, 0], [1, 0]], [0, 0])

    metrics = ModelReportEngine().evaluate(predictor=and_predictor, dataset=ds)

    assert "auc" not in metrics
    assert metrics["accuracy"] == pytest.approx(1.0)


def test_empty_dataset_rejected(and_predictor):
    ds = Dataset(samples=np.empty((0, 2)), labels=np.empty(0))

    with pytest.raises(InvalidInputError, match="empty"):
        ModelReportEngine().evaluate(predictor=and_predictor, dataset=ds)


def test_non_binary_labels_get_accuracy_only(and_predictor):
    ds = Dataset.from_sequences([[0, 0], [0, 1], [1, 0], [1, 1]], [0, 2, 0, 1])

    metrics = ModelReportEngine().evaluate(predictor=and_predictor, dataset=ds)

    assert set(metrics) == {"accuracy"}
    assert metrics["accuracy"] == pytest.approx(0.75)
