#!filepath: commonkit/text.py
from __future__ import annotations

import codecs
from typing import Any, Iterator, List, Optional

from commonkit import logs
from commonkit.config import get_config
from commonkit.errors import InvalidArgumentError
from commonkit.utils.numeric import check_offsets, is_numeric

# encoding 未传 → 使用配置里的默认编码
_USE_CONFIG: Any = object()

# detect_order 全部失败时的兜底编码
_FALLBACK_BYTES_ENCODING = "latin-1"
_FALLBACK_TEXT_ENCODING = "utf-8"


class CodepointString:
    """
    按 codepoint（而不是字节）操作的字符串包装
    ---------------------------------------
    - 所有下标 / 长度都是 codepoint 单位
    - bytes_count() 是唯一按字节计数的接口
    - 内容可原地修改：append / prepend / s[i] = v / del s[i]
    ---------------------------------------
    """

    def __init__(self, value: Any = "", encoding: Optional[str] = _USE_CONFIG):
        cfg = get_config().text

        if isinstance(value, CodepointString):
            if encoding is _USE_CONFIG:
                encoding = value.encoding
            value = value.text
        elif is_numeric(value):
            value = str(value)
        elif not isinstance(value, (str, bytes, bytearray)):
            logs.debug(f"[CodepointString] rejected value type={type(value).__name__}")
            raise InvalidArgumentError(
                f"value must be a string, bytes or a number, got {type(value).__name__}"
            )

        if encoding is _USE_CONFIG:
            encoding = cfg.encoding
        elif encoding is None:
            encoding = detect_encoding(value, cfg.detect_order)

        try:
            codecs.lookup(encoding)
        except LookupError:
            raise InvalidArgumentError(f"unknown encoding: {encoding!r}") from None

        if isinstance(value, (bytes, bytearray)):
            value = bytes(value).decode(encoding)

        self._text: str = value
        self.encoding: str = encoding

    @property
    def text(self) -> str:
        return self._text

    # ================================================================
    # 查询
    # ================================================================
    def split(self, separator: str = "") -> List[str]:
        """
        separator 为空 → 拆成单个 codepoint
        否则按字面量切分（不是正则）
        """
        if not separator:
            return list(self._text)
        return self._text.split(str(separator))

    def length(self) -> int:
        return len(self._text)

    def bytes_count(self) -> int:
        return len(self._text.encode(self.encoding))

    def substring(self, start: int, length: Optional[int] = None) -> str:
        """
        [start, start + length)
        length=None → 到结尾；length < 0 → 结尾前留 |length| 个
        """
        check_offsets(start)
        return self._substr(start, length)

    def range(self, start: int, end: int) -> str:
        """[start, end] 闭区间"""
        check_offsets(start, end)
        if end < start:
            return ""
        return self._substr(start, end - start + 1)

    def pos(self, search: Any) -> Optional[int]:
        """第一次出现的位置；找不到返回 None（0 是合法位置）"""
        index = self._text.find(str(search))
        if index < 0:
            return None
        return index

    # ================================================================
    # 修改
    # ================================================================
    def append(self, value: Any) -> "CodepointString":
        self._text += self._to_text(value)
        return self

    def prepend(self, value: Any) -> "CodepointString":
        self._text = self._to_text(value) + self._text
        return self

    # ================================================================
    # 下标访问
    # ================================================================
    def offset_exists(self, offset: int) -> bool:
        check_offsets(offset)
        return offset < self.length()

    def offset_get(self, offset: int) -> Optional[str]:
        check_offsets(offset)
        if offset >= self.length():
            return None
        return self._text[offset]

    def offset_set(self, offset: int, value: Any) -> None:
        """
        value 先转成本对象的编码：
            空       → 删除 offset 处字符
            offset=0 → 前插
            越界     → 追加
            其它     → 插入到 offset 处字符之后（不覆盖）
        """
        check_offsets(offset)
        value = self._reencode(value)

        if value == "":
            self.offset_unset(offset)
        elif offset == 0:
            self.prepend(value)
        elif offset >= self.length():
            self.append(value)
        else:
            self._text = self._text[:offset + 1] + value + self._text[offset + 1:]

    def offset_unset(self, offset: int) -> None:
        check_offsets(offset)
        if offset < self.length():
            self._text = self._text[:offset] + self._text[offset + 1:]

    # ================================================================
    # 内部工具
    # ================================================================
    def _substr(self, start: int, length: Optional[int]) -> str:
        if length is None:
            return self._text[start:]
        if not isinstance(length, int) or isinstance(length, bool):
            raise InvalidArgumentError(f"length must be an integer, got {length!r}")
        if length < 0:
            return self._text[start:length]
        return self._text[start:start + length]

    def _to_text(self, value: Any) -> str:
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode(self.encoding)
        return str(value)

    def _reencode(self, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode(self.encoding, errors="replace")

        text = str(value)
        converted = text.encode(self.encoding, errors="replace").decode(self.encoding)
        if converted != text:
            logs.warning(
                f"[CodepointString] lossy conversion to {self.encoding}: {text!r} → {converted!r}"
            )
        return converted

    # ================================================================
    # Python 协议
    # ================================================================
    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"CodepointString({self._text!r}, encoding={self.encoding!r})"

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator[str]:
        return iter(self.split())

    def __getitem__(self, offset: int) -> Optional[str]:
        return self.offset_get(offset)

    def __setitem__(self, offset: int, value: Any) -> None:
        self.offset_set(offset, value)

    def __delitem__(self, offset: int) -> None:
        self.offset_unset(offset)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CodepointString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    # 内容可变，不可哈希
    __hash__ = None


def detect_encoding(value: Any, detect_order: List[str]) -> str:
    """
    bytes → detect_order 中第一个能解码的编码，否则 latin-1
    str   → detect_order 中第一个能编码的编码，否则 utf-8
    """
    if isinstance(value, (bytes, bytearray)):
        for encoding in detect_order:
            try:
                bytes(value).decode(encoding)
                return encoding
            except UnicodeDecodeError:
                continue
        return _FALLBACK_BYTES_ENCODING

    for encoding in detect_order:
        try:
            str(value).encode(encoding)
            return encoding
        except UnicodeEncodeError:
            continue
    return _FALLBACK_TEXT_ENCODING
