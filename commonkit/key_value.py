#!filepath: commonkit/key_value.py
from __future__ import annotations

import json
import random
from collections.abc import Mapping, MutableMapping
from enum import Enum
from numbers import Integral
from typing import Any, Callable, Dict, Iterator, List, Optional

from commonkit import logs
from commonkit.config import get_config
from commonkit.cursor import KeyValueCursor
from commonkit.errors import InvalidAmount, InvalidKeyType, NonNumericValue
from commonkit.utils.numeric import is_compatible, is_numeric


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class KeyValue(MutableMapping):
    """
    有序 key/value 容器
    ---------------------------------------
    - key 只能是 str，value 任意（可以是 None）
    - 迭代 / 导出顺序由 key_order 决定：
        插入      → 新 key 追加到末尾，已有 key 位置不变
        shuffle   → 随机顺序
        sort      → 按 key 升序 / 降序
    - increase / decrease 只作用于数值
    - 内置一个外部游标：current / key / next / rewind / valid
    ---------------------------------------
    用法：
        kv = KeyValue({"hits": 1})
        kv.increase("hits").set("name", "abc")
        kv.to_json()   # '{"hits":2,"name":"abc"}'
    """

    def __init__(self, items: Optional[Mapping[str, Any]] = None):
        self._items: Dict[str, Any] = {}
        self._keys: List[str] = []
        self._cursor = KeyValueCursor(self)

        if items is not None:
            for key, value in items.items():
                self.set(key, value)

    # ================================================================
    # 基础读写
    # ================================================================
    def has(self, key: Any) -> bool:
        """key 是否存在（value 为 None 也算存在）"""
        try:
            return key in self._items
        except TypeError:
            # 不可哈希的 key 不可能存在
            return False

    def get(self, key: Any, default: Any = None) -> Any:
        if self.has(key):
            return self._items[key]
        return default

    def set(self, key: str, value: Any) -> "KeyValue":
        if not isinstance(key, str):
            logs.debug(f"[KeyValue] rejected key={key!r}")
            raise InvalidKeyType(f"key must be a string, got {type(key).__name__}")

        is_new = key not in self._items
        self._items[key] = value
        if is_new:
            self._rebuild_keys()

        return self

    def remove(self, key: Any) -> "KeyValue":
        """不存在的 key 直接忽略"""
        if self.has(key):
            del self._items[key]
            self._rebuild_keys()

        return self

    def count(self) -> int:
        return len(self._items)

    # ================================================================
    # 数值操作
    # ================================================================
    def increase(self, key: str, amount: Any = 1) -> "KeyValue":
        self._change_numeric_value(key, amount)
        return self

    def decrease(self, key: str, amount: Any = 1) -> "KeyValue":
        """amount 为正数，内部做减法"""
        self._change_numeric_value(key, amount, negative=True)
        return self

    def _change_numeric_value(self, key: str, amount: Any, negative: bool = False) -> None:
        if not is_numeric(amount):
            logs.debug(f"[KeyValue] rejected amount={amount!r} for key={key!r}")
            raise InvalidAmount(f"amount must be numeric, got {amount!r}")

        # key 不存在 → None → 非数值
        current = self._items.get(key)

        if not is_numeric(current):
            logs.debug(f"[KeyValue] non-numeric value for key={key!r}: {current!r}")
            raise NonNumericValue(f"value of key {key!r} must be numeric, got {current!r}")

        if not is_compatible(current, amount):
            logs.debug(f"[KeyValue] incompatible amount={amount!r} for value={current!r}")
            raise InvalidAmount(
                f"amount {amount!r} cannot be combined with {type(current).__name__} value of key {key!r}"
            )

        if negative:
            self._items[key] = current - amount
        else:
            self._items[key] = current + amount

    # ================================================================
    # 顺序操作
    # ================================================================
    def shuffle(self, rng: Optional[random.Random] = None) -> "KeyValue":
        """
        随机打乱顺序（非加密安全）。
        value 始终跟随原来的 key；传入 rng 可复现。
        """
        keys = list(self._items)
        (rng or random).shuffle(keys)
        self._reorder(keys)

        logs.debug(f"[KeyValue] shuffled {len(keys)} keys")
        return self

    def sort(self, order: str | SortOrder = SortOrder.ASC) -> "KeyValue":
        """
        按 key 排序（字符串字典序）。
        order == "desc" 时降序，其它一律升序。
        """
        reverse = order == SortOrder.DESC
        self._reorder(sorted(self._items, reverse=reverse))

        logs.debug(f"[KeyValue] sorted {len(self._keys)} keys reverse={reverse}")
        return self

    def _reorder(self, keys: List[str]) -> None:
        self._items = {key: self._items[key] for key in keys}
        self._rebuild_keys()

    def _rebuild_keys(self) -> None:
        """items 的 key 集合 / 顺序变化后，重建 key_order"""
        self._keys = list(self._items)
        self._cursor._sync()

    def key_order(self) -> List[str]:
        return list(self._keys)

    # ================================================================
    # 导出
    # ================================================================
    def to_array(self) -> Dict[str, Any]:
        """浅拷贝，顺序 = key_order"""
        return {key: self._items[key] for key in self._keys}

    def to_json(self, indent: Optional[int] = None) -> str:
        cfg = get_config().export
        separators = (",", ":") if indent is None else (",", ": ")

        return json.dumps(
            self.to_array(),
            ensure_ascii=cfg.ensure_ascii,
            indent=indent,
            separators=separators,
            default=_json_default,
        )

    def copy(self) -> "KeyValue":
        return KeyValue(self._items)

    # ================================================================
    # 清空 / 遍历
    # ================================================================
    def clear(self) -> "KeyValue":
        size = len(self._items)
        self._items = {}
        self._rebuild_keys()
        self.rewind()

        logs.debug(f"[KeyValue] cleared {size} keys")
        return self

    def each(self, handler: Callable[[str, Any], Any]) -> None:
        """
        按 key_order 调用 handler(key, value)。
        handler 返回 False（严格为 False）时提前结束。
        """
        for key, value in self.to_array().items():
            if handler(key, value) is False:
                break

    # ================================================================
    # 外部游标
    # ================================================================
    def cursor(self) -> KeyValueCursor:
        """独立游标，key 快照取自当前 key_order"""
        return KeyValueCursor(self)

    def current(self) -> Any:
        return self._cursor.current()

    def key(self) -> str:
        return self._cursor.key()

    def next(self) -> None:
        self._cursor.next()

    def rewind(self) -> None:
        self._cursor.rewind()

    def valid(self) -> bool:
        return self._cursor.valid()

    # ================================================================
    # Mapping 协议
    # ================================================================
    def __getitem__(self, key: str) -> Any:
        return self._items[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self.remove(key)

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._keys))

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return f"KeyValue({self.to_array()!r})"


def _json_default(obj: Any) -> Any:
    """
    嵌套的 KeyValue / Mapping 按普通 dict 导出；
    json 不认识的数值（Decimal / Fraction / numpy 整数）转成 int / float
    """
    if isinstance(obj, Integral) and not isinstance(obj, bool):
        return int(obj)
    if is_numeric(obj):
        return float(obj)
    if isinstance(obj, KeyValue):
        return obj.to_array()
    if isinstance(obj, Mapping):
        return dict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
