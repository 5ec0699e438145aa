"""
Environment-driven settings for chardraft.

Values are read from the process environment, optionally seeded from a
.env file via python-dotenv.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError as SchemaError

from .constants import AbilityScoreMethod
from .exceptions import EngineConfigError
from .logutils import logger

ENV_RULES_PATH = "CHARDRAFT_RULES_PATH"
ENV_LOG_LEVEL = "CHARDRAFT_LOG_LEVEL"
ENV_DEFAULT_ABILITY_METHOD = "CHARDRAFT_DEFAULT_ABILITY_METHOD"


class EngineSettings(BaseModel):
    """Engine configuration."""
    rules_path: Path | None = None
    log_level: str = "INFO"
    default_ability_method: AbilityScoreMethod = AbilityScoreMethod.MANUAL


def load_settings(env_file: Path | str | None = None) -> EngineSettings:
    """Build EngineSettings from the environment.

    Args:
        env_file: Optional .env file to load first. When omitted, python-dotenv
            searches for a .env file from the working directory upwards.

    Raises:
        EngineConfigError: If a value cannot be parsed.
    """
    if env_file is not None:
        if not load_dotenv(env_file):
            logger.warning(f"⚠️ .env file {env_file} not found or empty, using process environment")
    else:
        load_dotenv()

    rules_path = os.getenv(ENV_RULES_PATH, "").strip()
    raw = {
        "rules_path": Path(rules_path).expanduser() if rules_path else None,
        "log_level": os.getenv(ENV_LOG_LEVEL, "INFO").strip().upper() or "INFO",
        "default_ability_method": os.getenv(ENV_DEFAULT_ABILITY_METHOD, "manual").strip().lower() or "manual",
    }

    try:
        settings = EngineSettings(**raw)
    except SchemaError as e:
        raise EngineConfigError(f"Invalid chardraft settings: {e}") from e

    logger.debug(f"⚙️ Loaded settings: rules_path={settings.rules_path}, log_level={settings.log_level}")
    return settings
