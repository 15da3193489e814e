"""
Общие generic-функции для collectkit.

Unwrap обёрток (Getter / Unwrapper), трёхзначное compare и must.
"""

from src.funcs.funcs import compare, must
from src.funcs.unwrap import Getter, Unwrapper, unwrap, unwrap_all

__all__ = [
    # Unwrap
    "Getter",
    "Unwrapper",
    "unwrap",
    "unwrap_all",
    # Helpers
    "compare",
    "must",
]
