#!filepath: commonkit/__init__.py

# logs 必须最先导入：下面的模块都 from commonkit import logs
from .utils.logger import Logging, logs, init_logging
from .config import AppConfig, get_config, set_config
from .errors import (
    CommonKitError,
    CursorExhausted,
    InvalidAmount,
    InvalidArgumentError,
    InvalidKeyType,
    InvalidOffset,
    NonNumericValue,
)
from .cursor import KeyValueCursor
from .key_value import KeyValue, SortOrder
from .text import CodepointString

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "AppConfig", "get_config", "set_config",
    "KeyValue", "KeyValueCursor", "SortOrder",
    "CodepointString",
    "CommonKitError",
    "InvalidArgumentError",
    "InvalidKeyType",
    "InvalidAmount",
    "InvalidOffset",
    "NonNumericValue",
    "CursorExhausted",
]
