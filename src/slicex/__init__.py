"""
Sequence utilities для collectkit

Функции над list: построение с проверкой capacity, поэлементная конверсия,
merge с точной политикой None/empty и containment-based set_equal.
"""

from src.slicex.slices import (
    convert,
    interfaces,
    make,
    merge,
    set_equal,
)

__all__ = [
    "convert",
    "interfaces",
    "make",
    "merge",
    "set_equal",
]
