"""
Builders: построение новых dict из последовательностей

- from_slice / from_slice_with_index: элемент → пара (key, value)
- set_map / set_map_func: set-as-mapping с UNIT маркерами
- bool_map / bool_map_func: set-as-mapping с True маркерами
- make: пустой dict с проверенной capacity-подсказкой

Повторяющиеся ключи: более поздний элемент перезаписывает более ранний.
"""

from collections.abc import Callable, Iterable

from src.core.config import DEFAULT_CAPACITY, capacity_hint
from src.core.logger import logger
from src.maps.mapping import UNIT, E, K, T, Unit, V


def from_slice_with_index(
    items: Iterable[E],
    convert_fn: Callable[[int, E], tuple[K, V]],
) -> dict[K, V]:
    """
    Построение dict из последовательности с учётом индекса элемента.

    Args:
        items: Исходная последовательность
        convert_fn: (index, element) → (key, value)

    Returns:
        Новый dict (пустой для пустого входа)

    Examples:
        >>> from_slice_with_index(["a", "b"], lambda i, e: (e, i))
        {'a': 0, 'b': 1}
    """
    result: dict[K, V] = {}
    for i, item in enumerate(items):
        k, v = convert_fn(i, item)
        result[k] = v
    return result


def from_slice(items: Iterable[E], convert_fn: Callable[[E], tuple[K, V]]) -> dict[K, V]:
    """Построение dict из последовательности: element → (key, value)."""
    return from_slice_with_index(items, lambda _, e: convert_fn(e))


def set_map(items: Iterable[K]) -> dict[K, Unit]:
    """Set-as-mapping из последовательности: {e: UNIT}."""
    return from_slice(items, lambda e: (e, UNIT))


def bool_map(items: Iterable[K]) -> dict[K, bool]:
    """Set-as-mapping из последовательности: {e: True}."""
    return from_slice(items, lambda e: (e, True))


def set_map_func(items: Iterable[T], get_key: Callable[[T], K]) -> dict[K, Unit]:
    return from_slice(items, lambda e: (get_key(e), UNIT))


def bool_map_func(items: Iterable[T], get_key: Callable[[T], K]) -> dict[K, bool]:
    return from_slice(items, lambda e: (get_key(e), True))


def resolve_capacity(requested_cap: int = DEFAULT_CAPACITY, default_cap: int = DEFAULT_CAPACITY) -> int | None:
    """
    Эффективная capacity-подсказка для нового dict.

    requested_cap если != 0, иначе default_cap если != 0, иначе None.

    Raises:
        PreconditionViolation: Если одна из capacity отрицательная
    """
    return capacity_hint(requested_cap, default_cap).effective


def make(requested_cap: int = DEFAULT_CAPACITY, default_cap: int = DEFAULT_CAPACITY) -> dict:
    """
    Пустой dict.

    dict не резервирует память заранее, поэтому подсказка только
    проверяется и разрешается.

    Raises:
        PreconditionViolation: Если одна из capacity отрицательная
    """
    cap = resolve_capacity(requested_cap, default_cap)
    logger.debug("maps.make: capacity hint=%s", cap)
    return {}
