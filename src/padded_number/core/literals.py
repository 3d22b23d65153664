"""
Литералы — Создание padded number из строковых констант

Аналог объявления констант модуля: литерал проверяется парсером,
значение собирается доверенным конструктором.

    SERIAL_START = bound_padded_number(1, 10, "001")
"""

from padded_number.core.bounds import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH, Bounds
from padded_number.core.parse import parse
from padded_number.core.value import PaddedNumber


def bound_padded_number(min_length: int, max_length: int, literal: str) -> PaddedNumber:
    """
    Padded number с явными bounds.

    Raises:
        TooShort, TooLong, InvalidNumber: Если литерал невалиден

    Examples:
        >>> str(bound_padded_number(2, 3, "01"))
        '01'
    """
    bounds = Bounds(min_length, max_length)
    leading_zeros, number = parse(bounds.min_length, bounds.max_length, literal)
    return PaddedNumber._new_unchecked(leading_zeros, number, bounds)


def padded_number(literal: str) -> PaddedNumber:
    """Padded number с bounds по умолчанию (1, 255)."""
    return bound_padded_number(DEFAULT_MIN_LENGTH, DEFAULT_MAX_LENGTH, literal)
