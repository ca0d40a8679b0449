# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from commonkit.config import AppConfig, set_config


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture(autouse=True)
def default_config():
    """每个测试使用干净的默认配置，不读 base.yml / .env"""
    set_config(AppConfig())
    yield
    set_config(None)


@pytest.fixture
def captured_logs():
    """收集 loguru 输出（DEBUG 及以上）"""
    messages = []
    handler_id = logger.add(lambda msg: messages.append(str(msg)), level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def samples() -> dict:
    return {
        "alpha": "abcd",
        "integer": 123,
        "float": 23.45,
        "boolean": True,
    }


@pytest.fixture
def check_key_order():
    """key_order 必须与 items 的 key 完全一致（含顺序）"""

    def _check(kv) -> None:
        assert kv.key_order() == list(kv._items)
        assert len(kv.key_order()) == len(set(kv.key_order()))

    return _check
