"""
Training

One training run == one LogisticRegressionTrainer.train() call:

- parameters are drawn fresh from the random source (uniform in
  [-0.01, 0.01]); nothing carries over from a previous run
- the optimizer variant is fixed at construction:
    bgd   full dataset per update, one cost record per epoch
    sgd   one shuffled sample per update, one cost record per update
    mbgd  batch_size shuffled samples per update, one record per update
- the run ends after `epochs` epochs or when a cost record falls
  below `convergence_threshold`
- the result is always persisted; failing to persist is fatal
  (ModelSaveError)

Training is not resumable.
"""
from gdlogit.training.gradient import GradientEngine
from gdlogit.training.result import TrainResult
from gdlogit.training.trainer import LogisticRegressionTrainer

__all__ = ["GradientEngine", "LogisticRegressionTrainer", "TrainResult"]
