# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from loguru import logger

from gdlogit.config.training_config import TrainingConfig
from gdlogit.data.dataset import Dataset
from gdlogit.utils.random_source import RandomSource


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def captured_logs():
    """
    Collect every log message emitted during the test.
    """
    lines: list[str] = []
    sink_id = logger.add(lambda msg: lines.append(str(msg).rstrip("\n")), format="{message}")
    yield lines
    logger.remove(sink_id)


@pytest.fixture
def and_dataset() -> Dataset:
    """
    AND gate: only [1, 1] is positive.
    """
    return Dataset.from_sequences(
        [[0, 0], [0, 1], [1, 0], [1, 1]],
        [0, 0, 0, 1],
    )


@pytest.fixture
def separable_dataset() -> Dataset:
    """
    40 samples, 3 features, label = 1 when x0 + x1 - x2 > 0.
    """
    rng = np.random.default_rng(7)
    X = rng.uniform(-1.0, 1.0, size=(40, 3))
    y = (X[:, 0] + X[:, 1] - X[:, 2] > 0).astype(np.float32)
    return Dataset(samples=X, labels=y)


@pytest.fixture
def seeded_random() -> RandomSource:
    return RandomSource(seed=1234)


@pytest.fixture
def model_path(tmp_path: Path) -> Path:
    return tmp_path / "models" / "model.bin"


@pytest.fixture
def make_training_config():
    """
    Factory fixture: TrainingConfig with test-friendly defaults.

        cfg = make_training_config(optimizer="mbgd", batch_size=2)
    """

    def _make(**overrides) -> TrainingConfig:
        params = dict(learning_rate=0.1, epochs=50, convergence_threshold=0.0)
        params.update(overrides)
        return TrainingConfig(**params)

    return _make
