# gdlogit/config/training_config.py
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Optimization(str, Enum):
    BGD = "bgd"     # batch: full dataset per update
    SGD = "sgd"     # stochastic: one shuffled sample per update
    MBGD = "mbgd"   # mini-batch: batch_size shuffled samples per update


class ActivationFunction(str, Enum):
    SIGMOID = "sigmoid"


class LossFunction(str, Enum):
    MSE = "mse"


class TrainingConfig(BaseModel):
    """
    TrainingConfig（FROZEN）

    Set once before training. Range checks (learning_rate > 0,
    epochs >= 1, batch_size >= 1) are enforced by the trainer at
    initialization and raise InvalidInputError, not ValidationError.
    """

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    # dataset
    feature_length: Optional[int] = None   # None -> taken from the dataset

    # optimization
    learning_rate: float = 0.01
    epochs: int = 1000
    optimizer: Optimization = Optimization.BGD
    batch_size: int = 128
    convergence_threshold: float = 1e-5

    # strategies
    activation: ActivationFunction = ActivationFunction.SIGMOID
    loss: LossFunction = LossFunction.MSE

    # reproducibility
    seed: Optional[int] = None

    # output
    model_path: str = "models/logistic_regression.bin"
