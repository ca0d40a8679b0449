#!filepath: commonkit/config/text_config.py
from typing import List

from pydantic import BaseModel, Field


class TextConfig(BaseModel):
    encoding: str = "utf-8"
    # encoding=None 时按顺序尝试
    detect_order: List[str] = Field(default_factory=lambda: ["ascii", "utf-8"])
