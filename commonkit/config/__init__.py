# commonkit/config/__init__.py
from .app_config import AppConfig, get_config, set_config, package_config_file
from .json_config import JsonConfig
from .log_config import LogConfig
from .text_config import TextConfig

__all__ = [
    "AppConfig",
    "get_config",
    "set_config",
    "package_config_file",
    "JsonConfig",
    "LogConfig",
    "TextConfig",
]
