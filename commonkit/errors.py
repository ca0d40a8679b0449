# commonkit/errors.py


class CommonKitError(Exception):
    """commonkit 所有异常的基类"""


class InvalidArgumentError(CommonKitError, ValueError):
    """
    调用方传入的参数不合法（类型/取值）。
    立即抛出，不做任何修改。
    """


class InvalidKeyType(InvalidArgumentError):
    """KeyValue 的 key 必须是 str"""


class InvalidAmount(InvalidArgumentError):
    """increase / decrease 的 amount 必须是数值"""


class InvalidOffset(InvalidArgumentError):
    """字符串 offset 必须是 >= 0 的整数"""


class NonNumericValue(CommonKitError, RuntimeError):
    """
    increase / decrease 的目标值不是数值。
    key 不存在也算在这里（取不到值 = 非数值）。
    """


class CursorExhausted(CommonKitError, IndexError):
    """游标已越过最后一个元素，current() / key() 不可用"""
