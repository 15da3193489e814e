"""
Mapping: мутация, конверсия и извлечение для dict

Функции работают с mapping, принадлежащим вызывающему коду:
- Мутация на месте (try_add, add_slice, pop, delete, ...)
- Конверсия в новый mapping (clone, convert, convert_values)
- Извлечение ключей/значений (keys, values, keys_to_set, ...)

ИНВАРИАНТЫ:
1. None на входе clone/convert/convert_values → None на выходе (не пустой dict)
2. Not-found сообщается через bool, никогда через исключение
3. Порядок keys()/values() не гарантирован, полагаться на него нельзя
4. Ссылки на входной mapping не сохраняются после вызова
"""

from collections.abc import Callable, Iterable, Mapping, MutableMapping
from typing import Final, TypeVar

K = TypeVar("K")
K2 = TypeVar("K2")
V = TypeVar("V")
V2 = TypeVar("V2")
E = TypeVar("E")
T = TypeVar("T")


# =============================================================================
# UNIT MARKER
# =============================================================================


class Unit:
    """
    Unit marker для set-as-mapping.

    Singleton: Unit() всегда возвращает один и тот же объект UNIT.
    """

    __slots__ = ()
    _instance: "Unit | None" = None

    def __new__(cls) -> "Unit":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNIT"


UNIT: Final[Unit] = Unit()


# =============================================================================
# МУТАЦИЯ
# =============================================================================


def try_add(mapping: MutableMapping[K, V], key: K, value: V) -> bool:
    """
    Добавление пары key-value, только если ключа ещё нет.

    Returns:
        True если вставка произошла, False если ключ уже существовал
        (в этом случае mapping не изменяется)

    Examples:
        >>> m = {"a": 1}
        >>> try_add(m, "b", 2)
        True
        >>> try_add(m, "b", 3)
        False
        >>> m["b"]
        2
    """
    if key in mapping:
        return False
    mapping[key] = value
    return True


def add_slice(
    mapping: MutableMapping[K, V],
    items: Iterable[E],
    convert_fn: Callable[[E], tuple[K, V]],
) -> None:
    """
    Добавление элементов последовательности в mapping.

    Каждый элемент превращается в пару (key, value) через convert_fn;
    существующие ключи перезаписываются.
    """
    for item in items:
        k, v = convert_fn(item)
        mapping[k] = v


def add_slice_as_value(
    mapping: MutableMapping[K, E],
    items: Iterable[E],
    get_key: Callable[[E], K],
) -> None:
    """То же, что add_slice, но значением служит сам элемент."""
    for item in items:
        mapping[get_key(item)] = item


def pop(mapping: MutableMapping[K, V], key: K) -> tuple[V | None, bool]:
    """
    Удаление элемента по ключу с возвратом удалённого значения.

    Returns:
        (value, True) если ключ был, иначе (None, False)

    Examples:
        >>> m = {"a": 1}
        >>> pop(m, "a")
        (1, True)
        >>> pop(m, "a")
        (None, False)
    """
    if key in mapping:
        return mapping.pop(key), True
    return None, False


def delete(mapping: MutableMapping[K, V], key: K) -> bool:
    """Удаление элемента по ключу. Returns: True если ключ был удалён."""
    if key in mapping:
        del mapping[key]
        return True
    return False


def delete_slice(mapping: MutableMapping[K, V], keys: Iterable[K]) -> None:
    # Отсутствующие ключи игнорируются
    for key in keys:
        mapping.pop(key, None)


def delete_slice_func(
    mapping: MutableMapping[K, V],
    items: Iterable[E],
    get_key: Callable[[E], K],
) -> None:
    """Удаление набора ключей, полученных из items через get_key."""
    for item in items:
        mapping.pop(get_key(item), None)


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def clone(mapping: Mapping[K, V] | None) -> dict[K, V] | None:
    """
    Поверхностная копия mapping.

    None → None (nil-ness сохраняется), иначе независимо изменяемый dict.
    """
    if mapping is None:
        return None
    return dict(mapping)


def convert(
    mapping: Mapping[K, V] | None,
    convert_fn: Callable[[K, V], tuple[K2, V2]],
) -> dict[K2, V2] | None:
    """
    Конверсия mapping[K, V] → dict[K2, V2] поэлементно.

    При коллизии ключей после конверсии побеждает последняя запись
    в порядке итерации; вызывающий код не должен на это полагаться.

    Returns:
        Новый dict размера <= len(mapping), или None для None
    """
    if mapping is None:
        return None

    newmap: dict[K2, V2] = {}
    for k1, v1 in mapping.items():
        k2, v2 = convert_fn(k1, v1)
        newmap[k2] = v2
    return newmap


def convert_values(
    mapping: Mapping[K, V] | None,
    convert_fn: Callable[[V], V2],
) -> dict[K, V2] | None:
    """Конверсия значений при том же наборе ключей. None → None."""
    if mapping is None:
        return None
    return {k: convert_fn(v) for k, v in mapping.items()}


# =============================================================================
# ИЗВЛЕЧЕНИЕ
# =============================================================================


def keys_to_set(mapping: Mapping[K, V] | None) -> dict[K, Unit]:
    """Set-as-mapping, содержащий ровно ключи mapping."""
    if mapping is None:
        return {}
    return dict.fromkeys(mapping, UNIT)


def keys(mapping: Mapping[K, V] | None) -> list[K]:
    """Все ключи mapping (порядок не гарантирован)."""
    if mapping is None:
        return []
    return list(mapping.keys())


def values(mapping: Mapping[K, V] | None) -> list[V]:
    """Все значения mapping (порядок не гарантирован)."""
    if mapping is None:
        return []
    return list(mapping.values())


def keys_func(mapping: Mapping[K, V] | None, convert_fn: Callable[[K], T]) -> list[T]:
    """Все ключи mapping, пропущенные через convert_fn."""
    if mapping is None:
        return []
    return [convert_fn(k) for k in mapping]


def values_func(mapping: Mapping[K, V] | None, convert_fn: Callable[[V], T]) -> list[T]:
    """Все значения mapping, пропущенные через convert_fn."""
    if mapping is None:
        return []
    return [convert_fn(v) for v in mapping.values()]
