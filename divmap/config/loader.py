"""
divmap Settings Loader
======================

Load evaluator settings from settings.yaml.

The file has a 'defaults' section and named 'profiles'; a profile overrides
the defaults key by key.

Usage:
    from divmap.config import load_settings

    settings = load_settings()            # packaged defaults
    settings = load_settings('strict')    # reject negative intensities
"""

import logging
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Any, Optional, List

import yaml

from divmap.validation import InvalidParameterError, check_negative_policy

logger = logging.getLogger(__name__)


# Packaged settings file (can be overridden by DIVMAP_CONFIG or path=)
CONFIG_PATH = Path(__file__).parent / 'settings.yaml'
CONFIG_ENV_VAR = 'DIVMAP_CONFIG'


@dataclass(frozen=True)
class EvaluatorSettings:
    """Settings shared by every evaluator built from the same config."""
    negative_policy: str = "clamp"   # clamp, reject
    check_finite: bool = True

    def __post_init__(self):
        check_negative_policy(self.negative_policy)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_SETTINGS = EvaluatorSettings()


def get_config_path(path: Optional[Path] = None) -> Path:
    """Resolve the settings file: explicit path, then env var, then packaged file."""
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    return CONFIG_PATH


def _read_config(config_file: Path) -> Dict[str, Any]:
    if not config_file.exists():
        logger.warning("No settings file at %s, using defaults", config_file)
        return {}

    with open(config_file) as f:
        raw = yaml.safe_load(f)

    return raw or {}


def load_settings(
    profile: Optional[str] = None,
    path: Optional[Path] = None,
) -> EvaluatorSettings:
    """
    Load evaluator settings.

    Args:
        profile: Profile name (e.g. 'strict'). If None, returns defaults only
        path: Settings file to read instead of the packaged one

    Returns:
        EvaluatorSettings with profile values merged over defaults
    """
    config_file = get_config_path(path)
    all_config = _read_config(config_file)

    merged = {**DEFAULT_SETTINGS.to_dict(), **(all_config.get('defaults') or {})}

    if profile is not None:
        profiles = all_config.get('profiles') or {}
        if profile not in profiles:
            available = ", ".join(sorted(profiles)) or "none"
            raise InvalidParameterError(
                f"Unknown settings profile: '{profile}'. Available: {available}"
            )
        # Merge: profile overrides defaults
        merged = {**merged, **(profiles[profile] or {})}

    unknown = set(merged) - set(DEFAULT_SETTINGS.to_dict())
    if unknown:
        raise InvalidParameterError(
            f"Unknown settings keys in {config_file}: {', '.join(sorted(unknown))}"
        )

    settings = EvaluatorSettings(**merged)
    logger.debug("Loaded settings %s (profile=%s) from %s", settings, profile, config_file)
    return settings


def list_profiles(path: Optional[Path] = None) -> List[str]:
    """List all configured profiles."""
    all_config = _read_config(get_config_path(path))
    return sorted((all_config.get('profiles') or {}).keys())
