# commonkit/config/json_config.py
from pydantic import BaseModel


class JsonConfig(BaseModel):
    ensure_ascii: bool = True
