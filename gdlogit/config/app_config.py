#!filepath: gdlogit/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from gdlogit.utils.errors import InvalidInputError
from gdlogit.utils.logger import logs
from .log_config import LogConfig
from .training_config import TrainingConfig


def project_root() -> str:
    """
    gdlogit/config/app_config.py -> gdlogit/config -> gdlogit -> project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    training: TrainingConfig = Field(default_factory=TrainingConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - default: gdlogit/config/base.yml
        - GDLOGIT_LOG_LEVEL / GDLOGIT_MODEL_PATH override the YAML values
        """
        root = project_root()

        # 1) .env in the project root (silently skipped when absent)
        load_dotenv(os.path.join(root, ".env"))

        # 2) config file
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        raw.setdefault("log", {})
        raw.setdefault("training", {})

        # 4) env overrides
        level = os.getenv("GDLOGIT_LOG_LEVEL")
        if level:
            raw["log"]["level"] = level

        model_path = os.getenv("GDLOGIT_MODEL_PATH")
        if model_path:
            raw["training"]["model_path"] = model_path

        try:
            cfg = cls(**raw)
        except ValidationError as e:
            raise InvalidInputError(f"invalid config {path}: {e}") from e

        logs.debug(f"[AppConfig] loaded {path}")
        return cfg
