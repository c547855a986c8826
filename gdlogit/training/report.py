# gdlogit/training/report.py
from __future__ import annotations

from typing import Dict

import numpy as np
from sklearn.metrics import accuracy_score, f1_score, roc_auc_score

from gdlogit.utils.logger import logs
from gdlogit.data.dataset import Dataset
from gdlogit.inference.predictor import Predictor
from gdlogit.utils.errors import InvalidInputError


class ModelReportEngine:
    """
    ModelReportEngine

    Responsibility:
    - Score a predictor on a labelled dataset
    - Return pure metrics dict (no side effects)
    """

    def evaluate(
        self,
        *,
        predictor: Predictor,
        dataset: Dataset,
        threshold: float = 0.5,
    ) -> Dict[str, float]:
        if len(dataset) == 0:
            raise InvalidInputError("[ModelReportEngine] empty eval dataset")

        y_prob = predictor.predict_batch(dataset.samples)
        y_pred = (y_prob >= threshold).astype(np.int64)

        # f1 / AUC are binary metrics; other label values only get plain accuracy
        if not np.isin(dataset.labels, (0.0, 1.0)).all():
            labels = np.unique(dataset.labels).tolist()
            logs.warning(f"[ModelReportEngine] skip f1/AUC: labels are not binary {labels}")
            return {"accuracy": float(np.mean(y_pred == dataset.labels))}

        y_true = dataset.labels.astype(np.int64)
        metrics: Dict[str, float] = {
            "accuracy": float(accuracy_score(y_true, y_pred)),
            "f1": float(f1_score(y_true, y_pred, zero_division=0)),
        }

        # AUC is undefined when only one class is present
        classes = np.unique(y_true)
        if len(classes) == 2:
            metrics["auc"] = float(roc_auc_score(y_true, y_prob))
        else:
            logs.info(f"[ModelReportEngine] skip AUC: labels contain classes {classes.tolist()}")

        return metrics
