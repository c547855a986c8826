# gdlogit/training/trainer.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np

from gdlogit.utils.logger import logs
from gdlogit.config.training_config import Optimization, TrainingConfig
from gdlogit.data.dataset import Dataset
from gdlogit.inference.predictor import Predictor
from gdlogit.model.functions import resolve_activation, resolve_loss
from gdlogit.model.params import ModelParams
from gdlogit.model.persistence import load_model, store_model
from gdlogit.observability.instrumentation import Instrumentation, NoOpInstrumentation
from gdlogit.training.gradient import GradientEngine
from gdlogit.training.result import CostRecord, TrainResult
from gdlogit.utils.errors import InvalidInputError, ModelIOError, ModelSaveError
from gdlogit.utils.random_source import RandomSource

INIT_LOW = -0.01
INIT_HIGH = 0.01


class LogisticRegressionTrainer:
    """
    LogisticRegressionTrainer

    Contract:
    - __init__ validates dataset + config, allocates the activation cache,
      does NOT create parameters
    - train() creates parameters from scratch, optimizes, persists
    - a trainer owns its dataset and parameters; not thread-safe

    Stopping:
    - after ``epochs`` epochs, or
    - as soon as a logged cost drops below ``convergence_threshold``
    """

    def __init__(
        self,
        dataset: Dataset,
        cfg: Optional[TrainingConfig] = None,
        *,
        random_source: Optional[RandomSource] = None,
        inst: Optional[Instrumentation] = None,
    ):
        cfg = cfg if cfg is not None else TrainingConfig()

        m = len(dataset)
        if m != len(dataset.labels):
            raise InvalidInputError(
                f"samples ({m}) and labels ({len(dataset.labels)}) differ in count"
            )
        if m < 2:
            raise InvalidInputError(f"logistic regression train samples num is too little: {m}")
        if cfg.learning_rate <= 0:
            raise InvalidInputError(f"learning rate must be greater 0: {cfg.learning_rate}")
        if cfg.epochs < 1:
            raise InvalidInputError(
                f"number of epochs cannot be zero or a negative number: {cfg.epochs}"
            )
        if cfg.batch_size < 1:
            raise InvalidInputError(f"batch size must be greater 0: {cfg.batch_size}")
        if dataset.feature_length < 1:
            raise InvalidInputError(
                f"samples need at least one feature, got {dataset.feature_length}"
            )

        feature_length = cfg.feature_length if cfg.feature_length is not None else dataset.feature_length
        if feature_length != dataset.feature_length:
            raise InvalidInputError(
                f"feature length {feature_length} does not match samples of length "
                f"{dataset.feature_length}"
            )

        self.dataset = dataset
        self.cfg = cfg
        self.m = m
        self.feature_length = feature_length
        self.alpha = cfg.learning_rate
        self.epochs = cfg.epochs
        self.optimizer = Optimization(cfg.optimizer)
        self.batch_size = 1 if self.optimizer is Optimization.SGD else cfg.batch_size
        self.threshold = cfg.convergence_threshold

        self.activation = resolve_activation(cfg.activation)
        self.loss = resolve_loss(cfg.loss)
        self.engine = GradientEngine(
            dataset=dataset,
            activation=self.activation,
            loss=self.loss,
            learning_rate=self.alpha,
            optimizer=self.optimizer,
        )

        self.random_source = random_source if random_source is not None else RandomSource(cfg.seed)
        self.inst = inst if inst is not None else NoOpInstrumentation()

        self.activations = np.zeros(m, dtype=np.float64)
        self.params: Optional[ModelParams] = None
        self.shuffle_index: Optional[np.ndarray] = None

    # ------------------------------------------------------------------
    # Parameters / cost
    # ------------------------------------------------------------------
    def initialize_parameters(self) -> ModelParams:
        weights = self.random_source.uniform(INIT_LOW, INIT_HIGH, self.feature_length)
        bias = self.random_source.uniform(INIT_LOW, INIT_HIGH, 1)[0]
        self.params = ModelParams(weights=weights, bias=bias)
        return self.params

    def refresh_activations(self) -> np.ndarray:
        params = self._require_params()
        self.activations[:] = self.activation(self.dataset.samples @ params.weights + params.bias)
        return self.activations

    def calculate_cost(self) -> float:
        """Mean of 1/2 (y_i - a_i)^2 over the cached activations."""
        return self.loss.value(self.activations, self.dataset.labels)

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def train(self, model_path: str | Path | None = None) -> TrainResult:
        model_path = Path(model_path if model_path is not None else self.cfg.model_path)
        # a model loaded in between may have another width; retraining follows the dataset
        self.feature_length = self.dataset.feature_length

        logs.info(
            f"[Trainer] START optimizer={self.optimizer.value} samples={self.m} "
            f"features={self.feature_length} alpha={self.alpha} epochs={self.epochs}"
        )

        self.initialize_parameters()
        history: List[CostRecord] = []

        with self.inst.timer("optimize"):
            if self.optimizer is Optimization.BGD:
                self._train_batch(history)
            else:
                self._train_shuffled(history)

        final_cost = history[-1][2]
        epochs_run = history[-1][0] + 1
        converged = final_cost < self.threshold

        with self.inst.timer("store_model"):
            try:
                store_model(self.params, model_path)
            except ModelIOError as e:
                logs.error(f"[Trainer] failed to store model: {e}")
                raise ModelSaveError(f"trained model could not be saved to {model_path}") from e

        self.inst.metrics.record("epochs_run", epochs_run)
        self.inst.metrics.record("final_cost", final_cost)

        metrics = {
            "epochs_run": epochs_run,
            "final_cost": final_cost,
            "converged": converged,
            **{f"time_{k}": v for k, v in self.inst.timeline.items()},
        }

        logs.info(
            f"[Trainer] DONE epochs_run={epochs_run} final_cost={final_cost:.6f} "
            f"converged={converged}"
        )

        return TrainResult(
            params=self.params.copy(),
            model_path=model_path,
            history=history,
            metrics=metrics,
        )

    def _train_batch(self, history: List[CostRecord]) -> None:
        for epoch in range(self.epochs):
            self.engine.step(self.params, 0, self.m, activations=self.activations)
            cost = self.calculate_cost()
            logs.info(f"epochs: {epoch}, cost function: {cost:.6f}")
            history.append((epoch, None, cost))
            if cost < self.threshold:
                break

    def _train_shuffled(self, history: List[CostRecord]) -> None:
        self.shuffle_index = np.arange(self.m)
        loops = (self.m + self.batch_size - 1) // self.batch_size

        cost = float("inf")
        for epoch in range(self.epochs):
            self.random_source.shuffle(self.shuffle_index)

            for loop in range(loops):
                start = loop * self.batch_size
                end = min(start + self.batch_size, self.m)
                self.engine.step(self.params, start, end, order=self.shuffle_index)

                self.refresh_activations()
                cost = self.calculate_cost()
                logs.info(f"epochs: {epoch}, loop: {loop}, cost function: {cost:.6f}")
                history.append((epoch, loop, cost))
                if cost < self.threshold:
                    break

            if cost < self.threshold:
                break

    # ------------------------------------------------------------------
    # Persistence / inference
    # ------------------------------------------------------------------
    def store_model(self, path: str | Path) -> Path:
        return store_model(self._require_params(), path)

    def load_model(self, path: str | Path) -> ModelParams:
        """
        Replace the parameters with the ones in ``path``; the trainer's
        feature length follows the loaded weight count.
        """
        self.params = load_model(path)
        self.feature_length = self.params.feature_length
        return self.params

    def predict(self, features: Sequence[float], feature_length: Optional[int] = None) -> float:
        if feature_length is not None and feature_length != self.feature_length:
            raise InvalidInputError(
                f"feature length {feature_length} != model feature length {self.feature_length}"
            )
        return Predictor(self._require_params(), activation=self.activation).predict(
            features, feature_length
        )

    def _require_params(self) -> ModelParams:
        if self.params is None:
            raise RuntimeError("[Trainer] no model parameters: call train() or load_model() first")
        return self.params
