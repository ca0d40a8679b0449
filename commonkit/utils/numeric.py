#!filepath: commonkit/utils/numeric.py
from decimal import Decimal
from numbers import Integral, Real
from typing import Any

from commonkit import logs
from commonkit.errors import InvalidOffset


def is_numeric(value: Any) -> bool:
    """
    是否为可做加减的实数：
        int / float / Decimal / Fraction / numpy 标量
    bool 虽然是 int 的子类，但不算数值。
    Decimal 没有注册到 numbers.Real，需要单独判断。
    """
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def is_compatible(current: Any, amount: Any) -> bool:
    """
    两个数值能否直接相加减。
    Decimal 只能和 int / Decimal 运算（与 float / Fraction 混用会 TypeError）。
    """
    for a, b in ((current, amount), (amount, current)):
        if isinstance(a, Decimal) and not isinstance(b, (Integral, Decimal)):
            return False
    return True


def is_offset(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def check_offsets(*offsets: Any) -> None:
    """
    校验字符串下标：必须是 0 或正整数。
    任意一个不合法 → InvalidOffset
    """
    for offset in offsets:
        if not is_offset(offset):
            logs.debug(f"[Offset] rejected offset={offset!r}")
            raise InvalidOffset(
                f"string offset must be a zero or positive integer, got {offset!r}"
            )
