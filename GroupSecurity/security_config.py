"""
SECURITY CONFIG
===============
Centralized group security settings loaded from environment.
"""

# FLOW:
# - Load the active .env file once and expose SECURITY_SETTINGS.
# - feature_enabled() reads FEATURE_<NAME> toggles at call time.
# WHY:
# - Cooldowns, log locations and metrics differ per environment.
# HOW:
# - Reads env vars and stores them in a dict.

from __future__ import annotations

import logging
import os

import dotenv


def get_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).strip().lower() == "true"


def get_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def get_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_name() -> str:
    env = os.getenv("APP_ENV", "").strip().lower()
    if env in {"prod", "production"}:
        return ".env.production"
    return ".env.localhost"


def _env_path() -> str:
    root = os.path.dirname(os.path.dirname(__file__))
    return os.path.join(root, _env_name())


dotenv.load_dotenv(_env_path())

if get_bool("APP_ENV_LOG"):
    logging.getLogger("security.env").info("Active env file: %s", _env_path())

SECURITY_SETTINGS = {
    "LOG_DIR": get_str("LOG_DIR", "logs"),
    "LOG_LEVEL": get_str("LOG_LEVEL", "INFO").upper(),
    "LOG_MAX_BYTES": get_int("LOG_MAX_BYTES", 2_000_000),
    "LOG_BACKUP_COUNT": get_int("LOG_BACKUP_COUNT", 3),
    "GROUP_CREATE_COOLDOWN": get_int("GROUP_CREATE_COOLDOWN", 60),
    "JOIN_REQUEST_COOLDOWN": get_int("JOIN_REQUEST_COOLDOWN", 10),
    "PROMETHEUS_ENABLED": get_bool("PROMETHEUS_ENABLED", True),
}


def _feature_var(feature: str) -> str:
    return "FEATURE_" + feature.strip().upper().replace("-", "_")


def feature_enabled(feature: str, default: bool = True) -> bool:
    """Return whether a named feature (e.g. "audit-trail") is switched on."""
    return get_bool(_feature_var(feature), default)
