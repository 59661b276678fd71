"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (SAGIT__KEY, SAGIT__SECTION__KEY)
3. Repo JSON (.sagit/config.json)
4. Built-in defaults (this file)

Examples:
    SAGIT__IMPACTED_RULES=ci/tests.map
    SAGIT__LANGUAGES='["java"]'
    SAGIT__LOGGING__LEVEL=DEBUG
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sagit.config.constants import DEFAULT_RULES_PATH

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        SAGIT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Interactive output goes to stdout, not the log.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SagitConfig(BaseModel):
    """Resolved configuration for one invocation. Loaded once, never mutated."""

    model_config = ConfigDict(frozen=True)

    commit_template: str | None = Field(
        default=None,
        description="Optional header override. Format fields: {type}, {scope}, {headline}.",
    )
    impacted_rules: str = Field(
        default=DEFAULT_RULES_PATH,
        description="Impact rule file, relative to the repository root.",
    )
    languages: frozenset[str] = Field(
        default_factory=frozenset,
        description="Languages allowed for structural analysis. Empty means all.",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("commit_template")
    @classmethod
    def validate_commit_template(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            v.format(type="", scope="", headline="")
        except (KeyError, IndexError, AttributeError, ValueError) as e:
            raise ValueError(
                f"Template may only use {{type}}, {{scope}} and {{headline}}: {e!r}"
            ) from e
        return v

    @field_validator("languages", mode="before")
    @classmethod
    def normalize_languages(cls, v: object) -> object:
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple, set, frozenset)):
            return frozenset(str(item).strip().lower() for item in v if str(item).strip())
        return v

    def allows_language(self, language: str) -> bool:
        return not self.languages or language in self.languages

    def rules_path(self, repo_root: Path) -> Path:
        return repo_root / self.impacted_rules
