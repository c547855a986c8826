from gdlogit.workflows.predict_workflow import run_inference
from gdlogit.workflows.train_workflow import build_training_config, run_training, train_model

__all__ = ["build_training_config", "run_inference", "run_training", "train_model"]
