#!filepath: commonkit/utils/logger.py
import os
import sys
from typing import Optional

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message}"


class Logging:
    """
    commonkit 日志模块（基于 loguru）
    ---------------------------------------
    - 配置了 log_dir → 按日期切割文件 + 保留周期
    - 未配置 log_dir → 输出到 stderr
    - 配置时先 logger.remove()：清掉 loguru 默认的 DEBUG stderr handler，
      级别以 LogConfig.level 为准
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level
        self._handler_id: Optional[int] = None

        self._configure()

    def _configure(self) -> None:
        """
        配置全局 logger（含 loguru 默认 handler 一并移除）
        """
        logger.remove()
        self._handler_id = None

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
            self._handler_id = logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format=_FORMAT,
                enqueue=True,  # 多进程安全
                backtrace=True,
                diagnose=True,
            )
        else:
            self._handler_id = logger.add(
                sink=sys.stderr,
                level=self.level,
                format=_FORMAT,
            )

    def close(self) -> None:
        if self._handler_id is None:
            return
        try:
            logger.remove(self._handler_id)
        except ValueError:
            # handler 已被外部 logger.remove() 清掉
            pass
        self._handler_id = None

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)


def init_logging(cfg) -> Logging:
    """
    按 LogConfig 重新配置全局 logs（原地替换 handler）。

    用法：
        from commonkit import init_logging
        from commonkit.config import AppConfig

        init_logging(AppConfig.load().log)
    """
    logs.log_dir = cfg.dir
    logs.rotation = cfg.rotation
    logs.retention = cfg.retention
    logs.level = cfg.level
    logs._configure()
    logs.info(f"[Logging] reconfigured level={cfg.level} dir={cfg.dir}")
    return logs


# 默认全局 logs（可被 init_logging 重新配置）
logs = Logging()
