from gdlogit.model.params import ModelParams
from gdlogit.model.persistence import load_model, store_model

__all__ = ["ModelParams", "load_model", "store_model"]
