"""
Тесты для Mapping utilities

Проверяемые инварианты:
1. try_add не перезаписывает существующий ключ
2. pop/delete сообщают not-found через bool
3. None на входе clone/convert/convert_values → None
4. Коллизии после convert: размер результата <= размера входа
5. set_map/bool_map/keys_to_set содержат ровно нужные ключи
"""

from dataclasses import dataclass

import pytest

from src.core.errors import PreconditionViolation
from src.maps import (
    UNIT,
    Unit,
    add_slice,
    add_slice_as_value,
    bool_map,
    bool_map_func,
    clone,
    convert,
    convert_values,
    delete,
    delete_slice,
    delete_slice_func,
    from_slice,
    from_slice_with_index,
    keys,
    keys_func,
    keys_to_set,
    make,
    pop,
    resolve_capacity,
    set_map,
    set_map_func,
    try_add,
    values,
    values_func,
)


@dataclass(frozen=True)
class Item:
    k: str
    v: int


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def abc_map():
    """Mapping с тремя ключами."""
    return {"a": 1, "b": 2, "c": 3}


@pytest.fixture
def items():
    return [Item("a", 1), Item("b", 2), Item("c", 3)]


# =============================================================================
# ТЕСТЫ: Мутация
# =============================================================================


class TestTryAdd:
    """Тесты try_add: вставка только при отсутствии ключа."""

    def test_absent_key_inserted(self) -> None:
        """Отсутствующий ключ вставляется"""
        m = {}
        assert try_add(m, "a", 1) is True
        assert m == {"a": 1}

    def test_existing_key_untouched(self) -> None:
        """Существующий ключ не перезаписывается"""
        m = {"a": 1}
        assert try_add(m, "a", 2) is False
        assert m == {"a": 1}

    def test_second_call_returns_false(self) -> None:
        """Повторный вызов возвращает False и сохраняет первое значение"""
        m = {}
        assert try_add(m, "k", "v1")
        assert not try_add(m, "k", "v2")
        assert m["k"] == "v1"

    def test_none_value_counts_as_present(self) -> None:
        """Ключ со значением None считается присутствующим"""
        m = {"a": None}
        assert try_add(m, "a", 1) is False
        assert m["a"] is None


class TestAddSlice:
    """Тесты add_slice / add_slice_as_value."""

    def test_add_slice_converts_elements(self) -> None:
        """Элементы превращаются в пары через convert_fn"""
        m = {"a": 1}
        add_slice(m, b"b", lambda b: (chr(b), b))
        assert m == {"a": 1, "b": 98}

    def test_add_slice_overwrites(self) -> None:
        """Существующие ключи перезаписываются"""
        m = {"a": 1}
        add_slice(m, ["a"], lambda e: (e, 100))
        assert m == {"a": 100}

    def test_add_slice_empty_is_noop(self, abc_map) -> None:
        """Пустая последовательность не меняет mapping"""
        add_slice(abc_map, [], lambda e: (e, e))
        assert abc_map == {"a": 1, "b": 2, "c": 3}

    def test_add_slice_as_value(self, items) -> None:
        """Элемент становится значением под производным ключом"""
        m = {}
        add_slice_as_value(m, items, lambda it: it.k)
        assert m == {"a": Item("a", 1), "b": Item("b", 2), "c": Item("c", 3)}

    def test_add_slice_as_value_later_wins(self) -> None:
        """Более поздний элемент перезаписывает более ранний"""
        m = {}
        add_slice_as_value(m, [Item("a", 1), Item("a", 2)], lambda it: it.k)
        assert m == {"a": Item("a", 2)}


class TestPopDelete:
    """Тесты pop, delete, delete_slice, delete_slice_func."""

    def test_pop_present(self, abc_map) -> None:
        """Присутствующий ключ удаляется и возвращается значение"""
        assert pop(abc_map, "a") == (1, True)
        assert "a" not in abc_map

    def test_pop_absent(self, abc_map) -> None:
        """Отсутствующий ключ: (None, False), mapping не меняется"""
        assert pop(abc_map, "z") == (None, False)
        assert abc_map == {"a": 1, "b": 2, "c": 3}

    def test_pop_stored_none(self) -> None:
        """Сохранённый None отличается от отсутствия ключа"""
        m = {"a": None}
        assert pop(m, "a") == (None, True)
        assert m == {}

    def test_delete_present(self, abc_map) -> None:
        """Присутствующий ключ удаляется"""
        assert delete(abc_map, "b") is True
        assert abc_map == {"a": 1, "c": 3}

    def test_delete_absent(self, abc_map) -> None:
        """Отсутствующий ключ: False"""
        assert delete(abc_map, "z") is False
        assert len(abc_map) == 3

    def test_delete_slice(self, abc_map) -> None:
        """Отсутствующие ключи игнорируются"""
        delete_slice(abc_map, ["a", "b", "missing"])
        assert abc_map == {"c": 3}

    def test_delete_slice_func(self, abc_map) -> None:
        """Ключи получаются через get_key"""
        delete_slice_func(abc_map, b"ab", chr)
        assert abc_map == {"c": 3}


# =============================================================================
# ТЕСТЫ: Конверсия
# =============================================================================


class TestClone:
    """Тесты clone: nil-ness и независимость копии."""

    def test_none_stays_none(self) -> None:
        """None остаётся None"""
        assert clone(None) is None

    def test_empty_stays_empty(self) -> None:
        """Пустой dict даёт пустой dict, не None"""
        result = clone({})
        assert result == {}
        assert result is not None

    def test_copy_is_independent(self, abc_map) -> None:
        """Копия изменяется независимо от оригинала"""
        result = clone(abc_map)
        assert result == abc_map
        assert result is not abc_map

        result["d"] = 4
        assert "d" not in abc_map

    def test_copy_is_shallow(self) -> None:
        """Копия поверхностная"""
        inner = [1]
        result = clone({"a": inner})
        assert result["a"] is inner


class TestConvert:
    """Тесты convert / convert_values."""

    def test_convert_none(self) -> None:
        """None остаётся None"""
        assert convert(None, lambda k, v: (k, v)) is None

    def test_convert_types(self) -> None:
        """Ключи и значения меняют тип"""
        result = convert({"a": 1, "b": 2}, lambda k, v: (k.upper(), float(v)))
        assert result == {"A": 1.0, "B": 2.0}
        assert all(isinstance(v, float) for v in result.values())

    def test_convert_empty_not_none(self) -> None:
        """Пустой dict даёт пустой dict"""
        assert convert({}, lambda k, v: (k, v)) == {}

    def test_convert_collision_shrinks(self, abc_map) -> None:
        """Коллизия ключей уменьшает размер результата"""
        result = convert(abc_map, lambda k, v: ("same", v))
        assert len(result) == 1
        assert result["same"] in (1, 2, 3)

    def test_convert_does_not_mutate_input(self, abc_map) -> None:
        """Входной mapping не изменяется"""
        convert(abc_map, lambda k, v: (v, k))
        assert abc_map == {"a": 1, "b": 2, "c": 3}

    def test_convert_values_none(self) -> None:
        """None остаётся None"""
        assert convert_values(None, str) is None

    def test_convert_values(self, abc_map) -> None:
        """Значения конвертируются при тех же ключах"""
        assert convert_values(abc_map, lambda v: v * 10) == {"a": 10, "b": 20, "c": 30}


# =============================================================================
# ТЕСТЫ: Извлечение
# =============================================================================


class TestKeysValues:
    """Тесты keys / values / *_func (порядок не гарантирован)."""

    def test_keys(self) -> None:
        """Все ключи (порядок не гарантирован)"""
        assert sorted(keys({1: 11, 2: 22})) == [1, 2]
        assert sorted(keys({"a": "aa", "b": "bb"})) == ["a", "b"]

    def test_values(self) -> None:
        """Все значения (порядок не гарантирован)"""
        assert sorted(values({1: 11, 2: 22})) == [11, 22]
        assert sorted(values({"a": "aa", "b": "bb"})) == ["aa", "bb"]

    def test_none_yields_empty(self) -> None:
        """None даёт пустой list"""
        assert keys(None) == []
        assert values(None) == []
        assert keys_func(None, str) == []
        assert values_func(None, str) == []

    def test_keys_func(self, items) -> None:
        """Ключи проходят через convert_fn"""
        m = {it: True for it in items}
        assert sorted(keys_func(m, lambda it: it.k)) == ["a", "b", "c"]

    def test_values_func(self) -> None:
        """Значения проходят через convert_fn"""
        m = {"a": Item("x", 1), "b": Item("y", 2), "c": Item("z", 3)}
        assert sorted(values_func(m, lambda it: it.v)) == [1, 2, 3]

    def test_keys_to_set(self, abc_map) -> None:
        """Ровно ключи mapping с UNIT маркерами"""
        result = keys_to_set(abc_map)
        assert result == {"a": UNIT, "b": UNIT, "c": UNIT}

    def test_keys_to_set_none(self) -> None:
        """None даёт пустой set-as-mapping"""
        assert keys_to_set(None) == {}


# =============================================================================
# ТЕСТЫ: Builders
# =============================================================================


class TestFromSlice:
    """Тесты from_slice / from_slice_with_index."""

    def test_from_slice(self, items) -> None:
        """Элементы превращаются в пары (key, value)"""
        assert from_slice(items, lambda it: (it.k, it.v)) == {"a": 1, "b": 2, "c": 3}

    def test_from_slice_later_duplicate_wins(self) -> None:
        """Повторяющийся ключ: побеждает более поздний"""
        result = from_slice([("a", 1), ("a", 2)], lambda p: p)
        assert result == {"a": 2}

    def test_from_slice_with_index(self) -> None:
        """convert_fn получает индекс элемента"""
        result = from_slice_with_index(["x", "y"], lambda i, e: (e, i))
        assert result == {"x": 0, "y": 1}

    def test_from_slice_empty(self) -> None:
        """Пустая последовательность даёт пустой dict"""
        assert from_slice([], lambda e: (e, e)) == {}


class TestSetMap:
    """Тесты set_map / bool_map и их *_func вариантов."""

    def test_set_map(self) -> None:
        """Ключи с UNIT маркерами"""
        assert set_map(["a", "b", "c"]) == {"a": UNIT, "b": UNIT, "c": UNIT}

    def test_bool_map(self) -> None:
        """Ключи с True маркерами"""
        assert bool_map(["a", "b", "c"]) == {"a": True, "b": True, "c": True}

    def test_set_map_func(self, items) -> None:
        """Ключи через get_key с UNIT маркерами"""
        assert set_map_func(items, lambda it: it.k) == {"a": UNIT, "b": UNIT, "c": UNIT}

    def test_bool_map_func(self, items) -> None:
        """Ключи через get_key с True маркерами"""
        assert bool_map_func(items, lambda it: it.k) == {"a": True, "b": True, "c": True}

    def test_duplicates_collapse(self) -> None:
        """Повторы схлопываются"""
        assert set_map(["a", "a", "b"]) == {"a": UNIT, "b": UNIT}

    def test_unit_is_singleton(self) -> None:
        """Unit() всегда возвращает UNIT"""
        assert Unit() is UNIT
        assert repr(UNIT) == "UNIT"


class TestMake:
    """Тесты make / resolve_capacity."""

    def test_make_returns_empty_dict(self) -> None:
        """make возвращает пустой dict при любой подсказке"""
        assert make() == {}
        assert make(10) == {}
        assert make(0, 8) == {}

    def test_make_returns_fresh_dict(self) -> None:
        """Каждый вызов возвращает новый dict"""
        assert make() is not make()

    def test_resolve_capacity_requested_wins(self) -> None:
        """requested_cap имеет приоритет"""
        assert resolve_capacity(4, 8) == 4

    def test_resolve_capacity_default_fallback(self) -> None:
        """При requested_cap == 0 используется default_cap"""
        assert resolve_capacity(0, 8) == 8

    def test_resolve_capacity_no_hint(self) -> None:
        """Без подсказки: None"""
        assert resolve_capacity() is None

    def test_negative_capacity_raises(self) -> None:
        """Отрицательная capacity вызывает PreconditionViolation"""
        with pytest.raises(PreconditionViolation, match="invalid capacity hint"):
            make(-1)

        with pytest.raises(PreconditionViolation):
            make(0, -5)
