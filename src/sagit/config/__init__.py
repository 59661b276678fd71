"""Config module exports."""

from sagit.config.loader import load_config
from sagit.config.models import LoggingConfig, LogOutputConfig, SagitConfig

__all__ = [
    "load_config",
    "SagitConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
