#!filepath: gdlogit/utils/logger.py
import os
import sys

from loguru import logger


class Logging:
    """
    Training log module
    ---------------------------------------
    - daily file rotation + retention
    - console sink on stdout for training progress lines
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: str = "logs",
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
        console: bool = True,
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level
        self.console = console

        os.makedirs(self.log_dir, exist_ok=True)
        self._configure()

    def _configure(self) -> None:
        """
        Replace every loguru sink with the configured ones.
        """
        logger.remove()

        logger.add(
            sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
            rotation=self.rotation,
            retention=self.retention,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            enqueue=True,
            backtrace=True,
            diagnose=True,
        )

        # progress lines ("epochs: 3, cost function: 0.1234") go to stdout verbatim
        if self.console:
            logger.add(
                sink=sys.stdout,
                level=self.level,
                format="{message}",
                colorize=False,
            )

    # ----------- log methods -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)


def init_logging(cfg) -> Logging:
    """
    Rebuild the sinks of the global ``logs`` in place from a LogConfig,
    so modules that already imported ``logs`` see the new configuration.
    """
    logs.log_dir = cfg.dir
    logs.rotation = cfg.rotation
    logs.retention = cfg.retention
    logs.level = cfg.level
    logs.console = cfg.console

    os.makedirs(logs.log_dir, exist_ok=True)
    logs._configure()
    return logs


# default global logs (sinks replaced by init_logging)
logs = Logging()
