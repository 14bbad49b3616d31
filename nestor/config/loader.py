"""Config resolution: a JSON file underneath NESTOR_ environment variables.

Response and NestorClient call load_config() whenever no config was
injected, so a token rotated in the environment is picked up on the next
message without restarting the bot.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger
from pydantic_settings import EnvSettingsSource
from pydantic_settings.main import JsonConfigSettingsSource

from nestor.config.schema import NestorConfig


def get_config_path() -> Path:
    """Path of the JSON file NestorConfig reads by default."""
    return Path(NestorConfig.model_config["json_file"]).expanduser()


def load_config(path: Path | None = None) -> NestorConfig:
    """Resolve the config from a JSON file and the environment.

    Without a path, the default file (see get_config_path) is used. Values
    from NESTOR_ environment variables always win over the file, matching
    the precedence NestorConfig applies on its own.
    """
    if path is None:
        return NestorConfig()

    config_path = path.expanduser().resolve()
    file_values = JsonConfigSettingsSource(NestorConfig, json_file=config_path)()
    env_values = EnvSettingsSource(NestorConfig)()
    if file_values:
        logger.debug(
            "Loaded config from {} ({} key(s) overridden by env)",
            config_path,
            len(set(file_values) & set(env_values)),
        )
    return NestorConfig(**{**file_values, **env_values})
