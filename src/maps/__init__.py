"""
Mapping utilities для collectkit

Функции над dict: мутация на месте, конверсия, извлечение ключей/значений
и построение новых mapping (в том числе set-as-mapping) из последовательностей.
"""

# Mapping: мутация, конверсия, извлечение
from src.maps.mapping import (
    # Unit marker
    UNIT,
    Unit,
    # Мутация
    add_slice,
    add_slice_as_value,
    delete,
    delete_slice,
    delete_slice_func,
    pop,
    try_add,
    # Конверсия
    clone,
    convert,
    convert_values,
    # Извлечение
    keys,
    keys_func,
    keys_to_set,
    values,
    values_func,
)

# Builders
from src.maps.builders import (
    bool_map,
    bool_map_func,
    from_slice,
    from_slice_with_index,
    make,
    resolve_capacity,
    set_map,
    set_map_func,
)

__all__ = [
    # Mapping: Unit marker
    "UNIT",
    "Unit",
    # Mapping: Мутация
    "add_slice",
    "add_slice_as_value",
    "delete",
    "delete_slice",
    "delete_slice_func",
    "pop",
    "try_add",
    # Mapping: Конверсия
    "clone",
    "convert",
    "convert_values",
    # Mapping: Извлечение
    "keys",
    "keys_func",
    "keys_to_set",
    "values",
    "values_func",
    # Builders
    "bool_map",
    "bool_map_func",
    "from_slice",
    "from_slice_with_index",
    "make",
    "resolve_capacity",
    "set_map",
    "set_map_func",
]
