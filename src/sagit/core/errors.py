"""Sagit error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 4xxx: Metadata store
- 5xxx: Impact rules
- 6xxx: Structural parsing

Git failures live in ``sagit.git.errors``.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Metadata store (4xxx)
    STORE_IO_FAILURE = 4001

    # Impact rules (5xxx)
    RULE_LOAD_FAILURE = 5001

    # Structural parsing (6xxx)
    PARSE_FAILURE = 6001


@dataclass(frozen=True, slots=True)
class SagitError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'STORE_IO_FAILURE')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class ConfigError(SagitError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class MetaStoreError(SagitError):
    """Metadata log could not be read or appended."""

    @classmethod
    def io_failure(cls, path: str, operation: str, reason: str) -> "MetaStoreError":
        return cls(
            code=ErrorCode.STORE_IO_FAILURE,
            message=f"Metadata {operation} failed for {path}: {reason}",
            details={"path": path, "operation": operation, "reason": reason},
        )


class RuleLoadError(SagitError):
    """Impact rule file is malformed."""

    @classmethod
    def bad_pattern(cls, line_no: int, pattern: str, reason: str) -> "RuleLoadError":
        return cls(
            code=ErrorCode.RULE_LOAD_FAILURE,
            message=f"Invalid rule pattern on line {line_no}: {reason}",
            details={"line": line_no, "pattern": pattern, "reason": reason},
        )


class ParseFailure(SagitError):
    """Source text could not be parsed. Always recovered as zero stats."""

    @classmethod
    def syntax(cls, language: str, error_count: int) -> "ParseFailure":
        return cls(
            code=ErrorCode.PARSE_FAILURE,
            message=f"{language} source has {error_count} syntax error node(s)",
            details={"language": language, "error_count": error_count},
        )

