from .config_data import (
    AppConfig,
    AuthConfig,
    ConfigData,
    LoggingConfig,
    PaginationConfig,
    StoreConfig,
)
from .config_template import load_templated_yaml, substitute_env_vars

__all__ = [
    "AppConfig",
    "AuthConfig",
    "ConfigData",
    "LoggingConfig",
    "PaginationConfig",
    "StoreConfig",
    "load_templated_yaml",
    "substitute_env_vars",
]
