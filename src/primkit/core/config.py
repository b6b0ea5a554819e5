import json
import os
from pathlib import Path
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from primkit.logger.logger import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "PRIMKIT_"
CONFIG_ENV_VAR = "PRIMKIT_CONFIG"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _normalize_level(value: str) -> str:
    value = value.strip().upper()
    return "WARNING" if value == "WARN" else value


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    TRUNCATE_SUFFIX: str = "..."
    YES_LABEL: str = "yes"
    NO_LABEL: str = "no"
    ON_LABEL: str = "on"
    OFF_LABEL: str = "off"
    ENABLED_LABEL: str = "enabled"
    DISABLED_LABEL: str = "disabled"
    TIMEZONE: Optional[str] = Field(
        default=None, description="IANA zone for the system clock, local time if unset."
    )
    CONFIG_PATH: Path = Field(default_factory=lambda: Path().home() / ".primkit.json")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = _normalize_level(value)
        if value not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return value

    @field_validator("TIMEZONE")
    @classmethod
    def _check_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is None or value == "":
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{value}'") from e
        return value

    @classmethod
    def load(cls, environ: Optional[Dict[str, str]] = None) -> "Settings":
        """Build settings from an optional JSON file and the environment.

        The JSON file is read from ``$PRIMKIT_CONFIG`` (default
        ``~/.primkit.json``) when it exists. ``PRIMKIT_<FIELD>`` environment
        variables override values from the file.

        Args:
            environ: Mapping used instead of ``os.environ`` (tests).

        Returns:
            Validated settings instance.

        Raises:
            ValueError: If the file is not a JSON object or a value is invalid.
                An unknown plain ``LOG_LEVEL`` is ignored with a warning.
        """
        environ = os.environ if environ is None else environ

        config_path = Path(
            environ.get(CONFIG_ENV_VAR, Path().home() / ".primkit.json")
        ).expanduser()

        values: Dict[str, Any] = {}
        if config_path.exists():
            with open(config_path, "r") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError(f"Config file {config_path} must hold a JSON object")
            values.update({str(k).upper(): v for k, v in loaded.items()})
            logger.debug(f"Loaded settings file {config_path}")

        for field in cls.model_fields:
            env_value = environ.get(f"{ENV_PREFIX}{field}")
            if env_value is not None:
                values[field] = env_value

        # Plain LOG_LEVEL is shared with other tools, unknown values are skipped
        if "LOG_LEVEL" not in values and "LOG_LEVEL" in environ:
            level = _normalize_level(environ["LOG_LEVEL"])
            if level in _LOG_LEVELS:
                values["LOG_LEVEL"] = level
            else:
                logger.warning(
                    f"Ignoring unknown LOG_LEVEL={environ['LOG_LEVEL']!r}, "
                    f"expected one of {sorted(_LOG_LEVELS)}"
                )

        values["CONFIG_PATH"] = config_path
        return cls(**values)


settings = Settings.load()
