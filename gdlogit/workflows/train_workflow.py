# gdlogit/workflows/train_workflow.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from gdlogit.utils.logger import logs
from gdlogit.config.training_config import TrainingConfig
from gdlogit.data.dataset import Dataset
from gdlogit.observability.instrumentation import Instrumentation
from gdlogit.training.result import TrainResult
from gdlogit.training.trainer import LogisticRegressionTrainer
from gdlogit.utils.errors import InvalidInputError, ModelSaveError
from gdlogit.utils.random_source import RandomSource


def build_training_config(
    base: Optional[TrainingConfig] = None,
    **overrides: Any,
) -> TrainingConfig:
    """
    ``base`` with every non-None override applied, re-validated.
    """
    base = base if base is not None else TrainingConfig()
    updates = {k: v for k, v in overrides.items() if v is not None}
    try:
        return TrainingConfig(**{**base.model_dump(), **updates})
    except ValidationError as e:
        raise InvalidInputError(f"invalid training config: {e}") from e


def train_model(
    dataset: Dataset,
    cfg: TrainingConfig,
    *,
    model_path: str | Path | None = None,
    random_source: Optional[RandomSource] = None,
    inst: Optional[Instrumentation] = None,
) -> TrainResult:
    inst = inst if inst is not None else Instrumentation(enabled=True)

    trainer = LogisticRegressionTrainer(dataset, cfg, random_source=random_source, inst=inst)
    result = trainer.train(model_path)

    inst.report("training")
    return result


def run_training(
    dataset: Dataset,
    feature_length: int,
    learning_rate: float,
    epochs: int,
    *,
    model_path: str | Path | None = None,
    cfg: Optional[TrainingConfig] = None,
    random_source: Optional[RandomSource] = None,
) -> bool:
    """
    Training entry point: True when a model was trained and saved.

    Invalid input and save failures are logged and reported as False;
    anything else propagates.
    """
    try:
        cfg = build_training_config(
            cfg,
            feature_length=feature_length,
            learning_rate=learning_rate,
            epochs=epochs,
        )
        train_model(dataset, cfg, model_path=model_path, random_source=random_source)
    except (InvalidInputError, ModelSaveError) as e:
        logs.error(f"[Train] {e}")
        return False

    return True
