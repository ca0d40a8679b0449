#!filepath: commonkit/config/app_config.py
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .json_config import JsonConfig
from .log_config import LogConfig
from .text_config import TextConfig

# 环境变量 → (section, field)
ENV_OVERRIDES = {
    "COMMONKIT_LOG_LEVEL": ("log", "level"),
    "COMMONKIT_LOG_DIR": ("log", "dir"),
    "COMMONKIT_TEXT_ENCODING": ("text", "encoding"),
}


def package_config_file() -> Path:
    """
    包内自带的默认配置：commonkit/config/base.yml
    """
    return Path(__file__).resolve().parent / "base.yml"


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    text: TextConfig = Field(default_factory=TextConfig)
    export: JsonConfig = Field(default_factory=JsonConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 base.yml
        - .env 从当前工作目录读取（不存在则忽略）
        - COMMONKIT_* 环境变量覆盖 YAML
        """
        # 1) 先加载 .env
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = package_config_file()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) 从 env 注入覆盖项
        for env_name, (section, field) in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is not None:
                raw.setdefault(section, {})[field] = value

        return cls(**raw)


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """进程级配置，第一次调用时加载"""
    global _config
    if _config is None:
        _config = AppConfig.load()
    return _config


def set_config(cfg: Optional[AppConfig]) -> None:
    """替换进程级配置；传 None 则下次 get_config() 重新加载"""
    global _config
    _config = cfg
