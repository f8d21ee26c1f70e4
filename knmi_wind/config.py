"""
Configuration for the KNMI wind push.

Values come from an optional JSON file and are overridden by environment
variables. Nothing is validated here: a missing device id or token only
shows up as a failed push.
"""

import os
import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Dict, Any, Union

from .sources.knmi_web import OBSERVATIONS_URL

logger = logging.getLogger(__name__)

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

CONFIG_PATH_ENV = "KNMI_WIND_CONFIG"

# JSON key -> environment variable overriding it
ENV_OVERRIDES = {
    'DEVICE_ID': 'KNMI_WIND_DEVICE_ID',
    'ACCESS_TOKEN': 'KNMI_WIND_ACCESS_TOKEN',
    'WEATHER_STATION': 'KNMI_WIND_STATION',
    'OBSERVATIONS_URL': 'KNMI_WIND_URL',
}


class ConfigurationError(Exception):
    """Raised when a configuration file exists but cannot be read."""


@dataclass(frozen=True)
class PushConfig:
    """Settings for one pipeline run."""

    device_id: str
    access_token: str
    station: str
    observations_url: str = OBSERVATIONS_URL

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PushConfig':
        return cls(
            device_id=str(data.get('DEVICE_ID', '')),
            access_token=str(data.get('ACCESS_TOKEN', '')),
            station=str(data.get('WEATHER_STATION', '')),
            observations_url=str(data.get('OBSERVATIONS_URL') or OBSERVATIONS_URL),
        )

    def with_overrides(self, **changes: Optional[str]) -> 'PushConfig':
        """Copy with the given fields replaced, ignoring None values."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _read_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.debug(f"No configuration file at {path}")
        return {}
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
    return data


def load_config(path: Optional[Union[str, Path]] = None) -> PushConfig:
    """
    Load the push configuration.

    Args:
        path: JSON configuration file. Defaults to $KNMI_WIND_CONFIG, then config.json.

    Returns:
        PushConfig built from the file and the environment
    """
    if path is None:
        path = os.getenv(CONFIG_PATH_ENV, "config.json")
    data = _read_config_file(Path(path))

    for key, env_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[key] = value

    return PushConfig.from_dict(data)
