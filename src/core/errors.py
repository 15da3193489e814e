"""
Errors: иерархия фатальных ошибок

Утилиты различают ровно два вида отказов:
- Precondition violation → немедленное исключение (FatalError и наследники)
- Not-found (pop, delete, try_add) → явный bool в результате, НЕ исключение

Фатальные ошибки сигнализируют об ошибке программиста на стороне вызова.
Утилиты никогда не перехватывают и не понижают их внутри себя.
"""


class FatalError(Exception):
    """
    Базовая неустранимая ошибка.

    Используется также в must() для переноса non-exception ошибки.
    """

    def __init__(self, message: str, error: object | None = None):
        super().__init__(message)
        self.error = error


class PreconditionViolation(FatalError, ValueError):
    """Нарушение предусловия: аргументы вне допустимой области."""


class CapacityError(PreconditionViolation):
    """
    Capacity меньше length при построении последовательности.

    Пример: slicex.make(3, cap=2) → CapacityError
    """


class TypeMismatchError(FatalError, TypeError):
    """Значение не является экземпляром целевого типа (unwrap)."""

    def __init__(self, value: object, target: type):
        super().__init__(
            f"unwrap: {type(value).__name__} is not {getattr(target, '__name__', target)}"
        )
        self.value = value
        self.target = target
