"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (SAGIT__KEY)
3. Repo config (.sagit/config.json)
4. Built-in defaults (lowest priority)

The JSON file is decoded against the typed schema in models.py. The camelCase
keys written by earlier releases (``impactedRules``, ``commitTemplate``) are
accepted alongside snake_case.
"""

import json
import re
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    SettingsError,
)

from sagit.config.constants import CONFIG_FILE, DEFAULT_RULES_PATH, SAGIT_DIR
from sagit.config.models import LoggingConfig, SagitConfig
from sagit.core.errors import ConfigError

_LEGACY_KEYS = {
    "commitTemplate": "commit_template",
    "impactedRules": "impacted_rules",
}

# Env decode failures name the field: error parsing value for field "languages"
_SETTINGS_FIELD = re.compile(r'field "(\w+)"')


def _load_json(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8") or "{}")
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top-level value must be an object")
    return {_LEGACY_KEYS.get(key, key): value for key, value in data.items()}


class _JsonSource(PydanticBaseSettingsSource):
    """Settings source that reads from pre-loaded JSON config."""

    def __init__(self, settings_cls: type[BaseSettings], json_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._json_config = json_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._json_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return {k: v for k, v in self._json_config.items() if v is not None}


def _make_settings_class(json_config: dict[str, Any]) -> type[BaseSettings]:
    """Create a Settings class with an instance-bound JSON source."""

    class SagitSettings(BaseSettings):
        """Root config. Env vars: SAGIT__IMPACTED_RULES, SAGIT__LOGGING__LEVEL, etc."""

        model_config = SettingsConfigDict(
            env_prefix="SAGIT__",
            env_nested_delimiter="__",
            case_sensitive=False,
            extra="ignore",
        )

        commit_template: str | None = None
        impacted_rules: str = DEFAULT_RULES_PATH
        languages: frozenset[str] = frozenset()
        logging: LoggingConfig = LoggingConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # Precedence (first wins): init kwargs > env vars > json file
            return (init_settings, env_settings, _JsonSource(settings_cls, json_config))

    return SagitSettings


def config_path(repo_root: Path) -> Path:
    return repo_root / SAGIT_DIR / CONFIG_FILE


def load_config(repo_root: Path | None = None, **kwargs: Any) -> SagitConfig:
    """Load config: defaults < .sagit/config.json < env vars < kwargs.

    Args:
        repo_root: Repository root to load config from.
                   Defaults to current working directory.
        **kwargs: Override values (highest precedence).

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On unreadable JSON, undecodable env values or validation errors.
    """
    repo_root = repo_root or Path.cwd()
    json_config = _load_json(config_path(repo_root))

    settings_cls = _make_settings_class(json_config)
    try:
        settings = settings_cls(**kwargs)
        return SagitConfig.model_validate(settings.model_dump())
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
    except (SettingsError, ValueError) as e:
        m = _SETTINGS_FIELD.search(str(e))
        field = m.group(1) if m else "settings"
        raise ConfigError.invalid_value(field, None, str(e)) from e
