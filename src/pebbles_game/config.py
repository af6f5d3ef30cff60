# Area: Shared
"""
pebbles_game.config - Game configuration loading
================================================

Builds a PebblesInit from, in increasing priority:
    1. built-in defaults
    2. a JSON config file
    3. environment variables (a .env file in the working directory is
       loaded first)

Environment variables:
    PEBBLES_COUNT=15
    PEBBLES_MAX_PER_TURN=2
    PEBBLES_DIFFICULTY=hard
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from .errors import ConfigurationError
from .messages import PebblesInit

logger = logging.getLogger("pebbles_game.config")

DEFAULT_CONFIG: Dict[str, Any] = {
    "pebbles_count": 15,
    "max_pebbles_per_turn": 2,
    "difficulty": "easy",
}

ENV_MAPPINGS = {
    "PEBBLES_COUNT": "pebbles_count",
    "PEBBLES_MAX_PER_TURN": "max_pebbles_per_turn",
    "PEBBLES_DIFFICULTY": "difficulty",
}

INT_KEYS = {"pebbles_count", "max_pebbles_per_turn"}


def load_config_file(config_path: str) -> Dict[str, Any]:
    """
    Read a JSON config file.

    Raises:
        ConfigurationError: If the file is missing or not a JSON object
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(
            f"Config file not found: {path}", action="load_config"
        )
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Config file is not valid JSON: {e}", action="load_config",
            context={"path": str(path)},
        ) from e
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Config file must contain a JSON object", action="load_config",
            context={"path": str(path)},
        )
    return data


def env_overrides(environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Collect config values from environment variables."""
    environ = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key not in environ:
            continue
        value: Any = environ[env_key]
        if config_key in INT_KEYS:
            try:
                value = int(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"{env_key} must be an integer, got {value!r}",
                    action="load_config",
                ) from e
        overrides[config_key] = value
    return overrides


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
    use_dotenv: bool = True,
) -> PebblesInit:
    """
    Load the game configuration.

    Args:
        config_path: Optional JSON file
        overrides: Values that win over every other source (CLI flags)
        use_dotenv: Load a .env file into the environment first

    Raises:
        ConfigurationError: If a source is unreadable or the merged
            values do not form a PebblesInit
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    config: Dict[str, Any] = dict(DEFAULT_CONFIG)
    if config_path:
        config.update(load_config_file(config_path))
    config.update(env_overrides())
    if overrides:
        config.update({k: v for k, v in overrides.items() if v is not None})

    try:
        init = PebblesInit.model_validate(config)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid game configuration",
            action="load_config",
            context=config,
            details=[f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()],
        ) from e

    logger.debug(f"Loaded config: {init.model_dump(mode='json')}")
    return init
