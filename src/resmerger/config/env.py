"""Access to ``RESMERGER_*`` environment settings."""

from __future__ import annotations

import os
from typing import Final

from .errors import MissingConfigurationError

ENV_PREFIX: Final[str] = "RESMERGER_"


def env_name(setting: str) -> str:
    return f"{ENV_PREFIX}{setting.upper()}"


def optional_setting(setting: str) -> str | None:
    """Return ``RESMERGER_<SETTING>``, or ``None`` when it is unset or blank."""

    value = os.getenv(env_name(setting), "").strip()
    return value or None


def require_setting(setting: str) -> str:
    value = optional_setting(setting)
    if value is None:
        raise MissingConfigurationError(env_name(setting))
    return value
