"""
Funcs: общие generic-функции compare и must
"""

from typing import Any, Protocol, TypeVar

from src.core.errors import FatalError
from src.core.logger import logger

T = TypeVar("T")


class SupportsOrdering(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


O = TypeVar("O", bound=SupportsOrdering)


def compare(left: O, right: O) -> int:
    """
    Трёхзначное сравнение.

    Returns:
        -1 если left < right
         0 если left == right
        +1 иначе

    Examples:
        >>> compare(1, 2)
        -1
        >>> compare("b", "a")
        1
    """
    if left < right:
        return -1
    if left == right:
        return 0
    return 1


def must(value: T, error: object | None = None) -> T:
    """
    Возврат value, если error отсутствует; иначе фатальная ошибка.

    Используется там, где отказ вычисления является ошибкой программиста:

        config = must(*load_config())

    Raises:
        error: Если error является исключением (пробрасывается как есть)
        FatalError: Если error любой другой объект, отличный от None
    """
    if error is None:
        return value

    logger.debug("must: %r", error)
    if isinstance(error, BaseException):
        raise error
    raise FatalError(str(error), error)
