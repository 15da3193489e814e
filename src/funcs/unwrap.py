"""
Unwrap: извлечение внутреннего значения из обёрток

Значение считается обёрткой, если реализует один из протоколов:
- Getter:    get() -> T
- Unwrapper: unwrap() -> T

Порядок проверки: экземпляр target, Getter, Unwrapper, прямая проверка типа.

ВАЖНО: unwrap_all не обнаруживает циклы. Обёртка, возвращающая саму себя,
приводит к бесконечному циклу; ответственность на вызывающем коде.
"""

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from src.core.errors import TypeMismatchError
from src.core.logger import logger

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


# =============================================================================
# PROTOCOLS
# =============================================================================


@runtime_checkable
class Getter(Protocol[T_co]):
    """Обёртка, отдающая внутреннее значение через get()."""

    def get(self) -> T_co: ...


@runtime_checkable
class Unwrapper(Protocol[T_co]):
    """Обёртка, отдающая внутреннее значение через unwrap()."""

    def unwrap(self) -> T_co: ...


# =============================================================================
# UNWRAP
# =============================================================================


def unwrap(value: Any, target: type[T] = object) -> tuple[T, bool]:
    """
    Снятие одного слоя обёртки.

    Значение, уже являющееся экземпляром target (кроме target=object),
    не снимается, даже если его тип реализует get()/unwrap().

    Args:
        value: Проверяемое значение
        target: Целевой тип (default: object)

    Returns:
        (value, False) если value уже является экземпляром target,
        (inner, True) иначе, если value реализует Getter или Unwrapper

    Raises:
        TypeMismatchError: Если value не обёртка и не экземпляр target

    Examples:
        >>> class Box:
        ...     def __init__(self, v): self.v = v
        ...     def unwrap(self): return self.v
        >>> unwrap(Box(1), int)
        (1, True)
        >>> unwrap(1, int)
        (1, False)
    """
    if target is not object and isinstance(value, target):
        return value, False

    # Mapping.get является поиском по ключу, а не обёрткой
    if isinstance(value, Getter) and not isinstance(value, Mapping):
        return value.get(), True

    if isinstance(value, Unwrapper):
        return value.unwrap(), True

    if not isinstance(value, target):
        logger.debug("unwrap: type mismatch %r -> %r", type(value), target)
        raise TypeMismatchError(value, target)

    return value, False


def unwrap_all(value: Any, target: type[T] = object) -> T:
    """
    Снятие слоёв обёртки до первого экземпляра target.

    При target=object снимаются все слои до значения без get()/unwrap().

    Raises:
        TypeMismatchError: Если самое внутреннее значение не экземпляр target
    """
    while True:
        value, wrapped = unwrap(value, target)
        if not wrapped:
            return value
