# gdlogit/workflows/predict_workflow.py
from __future__ import annotations

from pathlib import Path
from typing import Sequence

from gdlogit.inference.predictor import Predictor


def run_inference(
    features: Sequence[float],
    feature_length: int,
    model_path: str | Path,
) -> float:
    """
    Inference entry point: probability in [0, 1] for one feature vector.

    Raises ModelIOError (model file) or InvalidInputError (length mismatch).
    """
    predictor = Predictor.from_file(model_path)
    return predictor.predict(features, feature_length)
