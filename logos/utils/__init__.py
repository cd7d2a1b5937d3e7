# logos/utils/__init__.py
# logging, configuration and persistence helpers

from .logger_utils import Log
from .config_manager import Config, ConfigError, LogosConfig
from .model_store import ModelStoreError, load_body, load_matrix, load_word_list, save_matrix

__all__ = [
    "Log",
    "Config",
    "ConfigError",
    "LogosConfig",
    "ModelStoreError",
    "load_body",
    "load_matrix",
    "load_word_list",
    "save_matrix",
]
