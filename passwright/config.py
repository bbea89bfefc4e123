# passwright/config.py
"""
Settings persistence and the length policy shared by the generator and evaluator.
Settings saved as JSON in %APPDATA%/Passwright/config.json (Windows) or ~/.passwright/config.json (fallback)
"""

import os
import json
import logging
from typing import Any, Dict, NamedTuple, Optional

from .storage import atomic_write_text, read_text

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a generator configuration or password policy cannot be satisfied."""


class PasswordPolicy(NamedTuple):
    allowed_min: int = 13   # absolute floor for generated and evaluated passwords
    default_min: int = 20   # length range drawn from when no length is requested
    default_max: int = 25


DEFAULT_POLICY = PasswordPolicy()

DEFAULTS: Dict[str, Any] = {
    "allowed_min": DEFAULT_POLICY.allowed_min,
    "default_min": DEFAULT_POLICY.default_min,
    "default_max": DEFAULT_POLICY.default_max,
    "common_passwords_path": None,  # if None, the bundled word list is used
    "check_common": True,
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "Passwright")
    return os.path.join(os.path.expanduser("~"), ".passwright")

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        data = json.loads(read_text(p))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out

def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    atomic_write_text(p, json.dumps(cfg, ensure_ascii=False, indent=2))
    logger.debug("Saved settings to %s", p)
    return p

def validate_policy(policy: PasswordPolicy) -> PasswordPolicy:
    if policy.allowed_min < 1:
        raise ConfigError(f"allowed_min must be >= 1, got {policy.allowed_min}")
    if policy.default_min < policy.allowed_min:
        raise ConfigError(
            f"default_min ({policy.default_min}) must not be below allowed_min ({policy.allowed_min})"
        )
    if policy.default_max < policy.default_min:
        raise ConfigError(
            f"default_max ({policy.default_max}) must not be below default_min ({policy.default_min})"
        )
    return policy

def policy_from_config(cfg: Dict[str, Any]) -> PasswordPolicy:
    """Build a validated PasswordPolicy from a settings dict (missing keys use DEFAULTS)."""
    try:
        policy = PasswordPolicy(
            allowed_min=int(cfg.get("allowed_min", DEFAULTS["allowed_min"])),
            default_min=int(cfg.get("default_min", DEFAULTS["default_min"])),
            default_max=int(cfg.get("default_max", DEFAULTS["default_max"])),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid policy value in settings: {e}") from e
    return validate_policy(policy)
