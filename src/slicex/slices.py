"""
Slices: утилиты для упорядоченных последовательностей (list)

- make: list заданной длины с проверкой capacity
- convert / interfaces: поэлементная конверсия с сохранением порядка
- merge: конкатенация с точной политикой None/empty
- set_equal: сравнение по взаимному вхождению элементов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. merge() → None; merge(x) → x (та же identity)
2. merge(a, b) при пустом a или b → другой аргумент без копирования
3. merge(3+ аргумента) из одних None → None; из пустых, но не только None → []
4. set_equal: containment-based, НЕ multiset: ["a","b","b"] == ["a","a","b"]
"""

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from src.core.config import DEFAULT_CAPACITY, slice_shape
from src.core.errors import PreconditionViolation
from src.core.logger import logger

E = TypeVar("E")
E2 = TypeVar("E2")


# =============================================================================
# ПОСТРОЕНИЕ
# =============================================================================


def make(
    length: int,
    cap: int = DEFAULT_CAPACITY,
    default_cap: int = DEFAULT_CAPACITY,
    fill: E | None = None,
    fill_factory: Callable[[], E] | None = None,
) -> list[E | None]:
    """
    Новый list длины length.

    Если cap == 0, используется default_cap; если и он равен 0,
    capacity равна length. list не резервирует память заранее,
    поэтому capacity только проверяется.

    ВАЖНО: fill разделяется всеми элементами. Для изменяемых значений
    (list, dict, ...) используйте fill_factory: он вызывается для каждого
    элемента отдельно.

    Args:
        length: Длина результата
        cap: Запрошенная capacity (0: не задана)
        default_cap: Capacity по умолчанию (0: не задана)
        fill: Общее значение элементов (default: None)
        fill_factory: Фабрика значения для каждого элемента

    Returns:
        list из length элементов

    Raises:
        CapacityError: Если разрешённая capacity меньше length
        PreconditionViolation: Если length/cap/default_cap отрицательные
            или заданы одновременно fill и fill_factory

    Examples:
        >>> make(2)
        [None, None]
        >>> make(2, 0, 4, fill=0)
        [0, 0]
        >>> make(2, fill_factory=list)
        [[], []]
        >>> make(3, 2)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        CapacityError: slicex.make: the cap is less than len
    """
    if fill is not None and fill_factory is not None:
        raise PreconditionViolation("slicex.make: fill and fill_factory are mutually exclusive")

    shape = slice_shape(length, cap, default_cap)
    resolved = shape.check()
    logger.debug("slicex.make: len=%d cap=%d", shape.length, resolved)

    if fill_factory is not None:
        return [fill_factory() for _ in range(shape.length)]
    return [fill] * shape.length


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def convert(items: Iterable[E] | None, convert_fn: Callable[[E], E2]) -> list[E2]:
    """
    Поэлементная конверсия list[E] → list[E2].

    Всегда возвращает новый list той же длины (пустой для None/пустого входа).
    """
    if items is None:
        return []
    return [convert_fn(e) for e in items]


def interfaces(items: Iterable[E] | None) -> list[object]:
    """Boxing элементов в list[object] с сохранением порядка и длины."""
    if items is None:
        return []
    return list(items)


# =============================================================================
# MERGE
# =============================================================================


def merge(*seqs: list[E] | None) -> list[E] | None:
    """
    Конкатенация последовательностей в порядке аргументов.

    Политика None/empty:
        0 аргументов             → None
        1 аргумент               → он же без изменений
        2 аргумента, один пуст   → второй без изменений
        2 аргумента, оба непусты → новый list
        3+, все None             → None
        3+, все пусты            → []
        3+, иначе                → новый list

    Examples:
        >>> merge([1, 2], [3, 4])
        [1, 2, 3, 4]
        >>> merge([3, 4], [1, 2], [5, 6])
        [3, 4, 1, 2, 5, 6]
        >>> merge() is None
        True
    """
    count = len(seqs)

    if count == 0:
        return None

    if count == 1:
        return seqs[0]

    if count == 2:
        first, second = seqs
        if not first:
            return second
        if not second:
            return first
        return [*first, *second]

    if all(s is None for s in seqs):
        return None

    merged: list[E] = []
    for s in seqs:
        if s:
            merged.extend(s)
    return merged


# =============================================================================
# SET EQUALITY
# =============================================================================


def set_equal(seq1: Sequence[E] | None, seq2: Sequence[E] | None) -> bool:
    """
    Проверка равенства множеств элементов двух последовательностей.

    Длины должны совпадать, и каждый элемент одной последовательности
    должен входить (по ==) в другую. Кратность не учитывается:
    ["a", "b", "b"] и ["a", "a", "b"] считаются равными.

    None эквивалентен пустой последовательности.

    Examples:
        >>> set_equal(["a", "b", "c"], ["b", "c", "a"])
        True
        >>> set_equal(["a", "b", "c"], ["a", "b", "b"])
        False
    """
    seq1 = seq1 or ()
    seq2 = seq2 or ()

    if len(seq1) != len(seq2):
        return False

    for e1, e2 in zip(seq1, seq2):
        if e2 not in seq1 or e1 not in seq2:
            return False

    return True
