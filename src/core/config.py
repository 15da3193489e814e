"""
Capacity Config: модели capacity-аргументов для конструкторов контейнеров

Immutable Pydantic модели, описывающие аргументы maps.make и slicex.make.
Модели валидируют неотрицательность значений и вычисляют эффективную
capacity по единому правилу:

    requested != 0  → requested
    default   != 0  → default
    иначе           → без подсказки (для последовательностей: = length)

Python dict/list не поддерживают предварительное резервирование памяти,
поэтому capacity является только проверяемой подсказкой.
"""

from typing import Final

from pydantic import BaseModel, Field, ValidationError

from src.core.errors import CapacityError, PreconditionViolation
from src.core.logger import logger

# Capacity по умолчанию: 0 означает "без подсказки"
DEFAULT_CAPACITY: Final[int] = 0


# =============================================================================
# MODELS
# =============================================================================


class CapacityHint(BaseModel):
    """Подсказка capacity для пустого mapping."""

    requested: int = Field(DEFAULT_CAPACITY, ge=0, description="Запрошенная capacity")
    default: int = Field(DEFAULT_CAPACITY, ge=0, description="Capacity по умолчанию")

    model_config = {"frozen": True}

    @property
    def effective(self) -> int | None:
        """Эффективная capacity или None, если подсказки нет."""
        if self.requested:
            return self.requested
        if self.default:
            return self.default
        return None


class SliceShape(BaseModel):
    """
    Форма новой последовательности: length + capacity.

    Если cap == 0, вместо него используется default_cap;
    если и он равен 0, capacity совпадает с length.
    """

    length: int = Field(..., ge=0, description="Длина последовательности")
    cap: int = Field(DEFAULT_CAPACITY, ge=0, description="Запрошенная capacity")
    default_cap: int = Field(DEFAULT_CAPACITY, ge=0, description="Capacity по умолчанию")

    model_config = {"frozen": True}

    @property
    def resolved_cap(self) -> int:
        if self.cap:
            return self.cap
        if self.default_cap:
            return self.default_cap
        return self.length

    def check(self) -> int:
        """
        Проверка capacity >= length.

        Returns:
            Разрешённая capacity

        Raises:
            CapacityError: Если capacity меньше length
        """
        cap = self.resolved_cap
        if cap < self.length:
            logger.debug("slicex.make: cap=%d < len=%d", cap, self.length)
            raise CapacityError("slicex.make: the cap is less than len")
        return cap


# =============================================================================
# FACTORIES
# =============================================================================


def capacity_hint(requested: int = DEFAULT_CAPACITY, default: int = DEFAULT_CAPACITY) -> CapacityHint:
    """
    Построение CapacityHint с переводом ошибок валидации в PreconditionViolation.

    Raises:
        PreconditionViolation: Если capacity отрицательная или не целая
    """
    try:
        return CapacityHint(requested=requested, default=default)
    except ValidationError as e:
        raise PreconditionViolation(f"invalid capacity hint: {e}") from e


def slice_shape(
    length: int,
    cap: int = DEFAULT_CAPACITY,
    default_cap: int = DEFAULT_CAPACITY,
) -> SliceShape:
    """
    Построение SliceShape с переводом ошибок валидации в PreconditionViolation.

    Raises:
        PreconditionViolation: Если length/cap отрицательные или не целые
    """
    try:
        return SliceShape(length=length, cap=cap, default_cap=default_cap)
    except ValidationError as e:
        raise PreconditionViolation(f"invalid slice shape: {e}") from e
