#!filepath: commonkit/cursor.py
from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Tuple

from commonkit.errors import CursorExhausted

if TYPE_CHECKING:
    from commonkit.key_value import KeyValue


class KeyValueCursor:
    """
    KeyValue 的外部游标（current / key / next / rewind / valid）
    ---------------------------------------
    状态只有两种：
        positioned(i)   0 <= i < len(keys)
        exhausted       i >= len(keys)
    keys 在 rewind() 时快照，遍历长度以快照为准。
    快照里已从 store 删除的 key 会被跳过。
    ---------------------------------------
    """

    def __init__(self, store: "KeyValue"):
        self._store = store
        self._keys: List[str] = []
        self._index = 0
        self.rewind()

    # ---------- 状态机 ----------
    def valid(self) -> bool:
        self._skip_removed()
        return self._index < len(self._keys)

    def current(self) -> Any:
        return self._store[self.key()]

    def key(self) -> str:
        if not self.valid():
            raise CursorExhausted(
                f"cursor exhausted at index {self._index} (size={len(self._keys)})"
            )
        return self._keys[self._index]

    def next(self) -> None:
        self._index += 1

    def rewind(self) -> None:
        self._keys = self._store.key_order()
        self._index = 0

    @property
    def position(self) -> int:
        return self._index

    def _skip_removed(self) -> None:
        while self._index < len(self._keys) and not self._store.has(self._keys[self._index]):
            self._index += 1

    def _sync(self) -> None:
        """store 的 key 集合变化后调用：保留位置，刷新快照"""
        self._keys = self._store.key_order()

    # ---------- Python 迭代协议 ----------
    def __iter__(self) -> "KeyValueCursor":
        return self

    def __next__(self) -> Tuple[str, Any]:
        if not self.valid():
            raise StopIteration
        pair = (self.key(), self.current())
        self.next()
        return pair

    def __repr__(self) -> str:
        return f"KeyValueCursor(position={self._index}, size={len(self._keys)})"
