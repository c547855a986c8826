from gdlogit.inference.predictor import Predictor

__all__ = ["Predictor"]
