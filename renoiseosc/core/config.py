"""Client settings: destination and OSC root path.

Settings live in a JSON file, by default ~/.renoiseosc/config.json:

    {"host": "192.168.1.20", "port": 8000, "root": "/renoise"}
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from renoiseosc.core.destination import DEFAULT_HOST, DEFAULT_PORT
from renoiseosc.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path.home() / ".renoiseosc" / "config.json"
DEFAULT_ROOT = "/renoise"


class Settings(BaseModel):
    """Connection settings for the Renoise OSC server."""

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    root: str = DEFAULT_ROOT

    @field_validator("root")
    @classmethod
    def _root_is_absolute(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("root must start with '/'")
        return value.rstrip("/") or "/"


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a JSON file.

    Args:
        path: Config file. None returns the defaults.

    Returns:
        Validated settings.

    Raises:
        ConfigError: If the file can't be read, parsed or validated.
    """
    if path is None:
        return Settings()

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must hold a JSON object")

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e

    logger.debug("Config loaded: %s", path)
    return settings
