"""divmap Configuration Module."""

from divmap.config.loader import (
    EvaluatorSettings,
    DEFAULT_SETTINGS,
    CONFIG_ENV_VAR,
    get_config_path,
    load_settings,
    list_profiles,
)

__all__ = [
    'EvaluatorSettings',
    'DEFAULT_SETTINGS',
    'CONFIG_ENV_VAR',
    'get_config_path',
    'load_settings',
    'list_profiles',
]
