"""Core utilities: errors, logging, results."""

from sagit.core.errors import (
    ConfigError,
    ErrorCode,
    MetaStoreError,
    ParseFailure,
    RuleLoadError,
    SagitError,
)
from sagit.core.logging import configure_logging, get_logger
from sagit.core.result import Err, Ok, Result

__all__ = [
    "ErrorCode",
    "SagitError",
    "ConfigError",
    "MetaStoreError",
    "RuleLoadError",
    "ParseFailure",
    "configure_logging",
    "get_logger",
    "Ok",
    "Err",
    "Result",
]
