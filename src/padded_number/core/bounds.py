"""
Bounds — Конфигурация допустимой текстовой длины

Immutable Pydantic модель пары (min_length, max_length), обе границы
включительно. Каждый PaddedNumber несёт свои bounds.

Правила:
- min_length < max_length: переменная длина
- min_length == max_length: фиксированная длина
- min_length == 0: пустая строка "" допустима
- min_length > max_length: объявить можно, создать значение нельзя
  (любой парсинг завершится TooShort/TooLong)
"""

from typing import Any, Final

from pydantic import BaseModel, Field

from padded_number.core.digits import DigitSplit, max_number_for_length


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Границы по умолчанию (любая непустая длина, помещающаяся в байт)
DEFAULT_MIN_LENGTH: Final[int] = 1
DEFAULT_MAX_LENGTH: Final[int] = 255

# Границы должны помещаться в один байт
MAX_BOUND_LENGTH: Final[int] = 255

# Максимальный magnitude, принимаемый парсером (u64)
MAX_MAGNITUDE: Final[int] = 2**64 - 1

# Наибольшая max_length, при которой любой результат арифметики
# помещается в MAX_MAGNITUDE (10**19 - 1 < 2**64)
MAX_ARITHMETIC_LENGTH: Final[int] = 19


# =============================================================================
# BOUNDS MODEL
# =============================================================================


class Bounds(BaseModel):
    """
    Пара границ длины padded number.

    Immutable модель (frozen=True), хешируемая и сравнимая по значению.
    Допускает позиционное создание: Bounds(1, 7).
    """

    min_length: int = Field(
        DEFAULT_MIN_LENGTH,
        ge=0,
        le=MAX_BOUND_LENGTH,
        description="Минимальная длина текста (включительно)",
    )
    max_length: int = Field(
        DEFAULT_MAX_LENGTH,
        ge=0,
        le=MAX_BOUND_LENGTH,
        description="Максимальная длина текста (включительно)",
    )

    model_config = {"frozen": True}

    def __init__(
        self,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
        **data: Any,
    ) -> None:
        super().__init__(min_length=min_length, max_length=max_length, **data)

    def __repr__(self) -> str:
        return f"Bounds({self.min_length}, {self.max_length})"

    @property
    def is_constructible(self) -> bool:
        """False для min_length > max_length: значения создать невозможно."""
        return self.min_length <= self.max_length

    @property
    def allows_empty(self) -> bool:
        return self.min_length == 0

    @property
    def value_count(self) -> int:
        """
        Количество различных значений, представимых в этих границах.

        Для каждой длины L существует 10**L значений (для L == 0 только "").
        Используется wrapping арифметикой как период цикла.

        Examples:
            >>> Bounds(0, 0).value_count
            1
            >>> Bounds(1, 2).value_count
            110
        """
        return sum(10**length for length in range(self.min_length, self.max_length + 1))

    def contains(self, length: int) -> bool:
        """Проверка, что текстовая длина допустима."""
        return self.min_length <= length <= self.max_length

    def is_within(self, other: "Bounds") -> bool:
        """
        Проверка, что эти границы не шире other.

        True если min_length >= other.min_length и max_length <= other.max_length.
        """
        return self.min_length >= other.min_length and self.max_length <= other.max_length

    def min_value(self) -> DigitSplit:
        """Наименьшее значение: min_length нулей."""
        return DigitSplit(self.min_length, 0)

    def max_value(self) -> DigitSplit:
        """Наибольшее значение: max_length девяток."""
        return DigitSplit(0, max_number_for_length(self.max_length))
