"""
Ошибки парсинга padded number

Все ошибки возникают только при парсинге. Арифметика тотальна,
секционирование сигнализирует выход за диапазон через None.

Иерархия:
- ParsePaddedNumberError (ValueError)
    - TooShort
    - TooLong
    - InvalidNumber
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class IntErrorKind(str, Enum):
    """Причина ошибки разбора целочисленной части"""

    INVALID_DIGIT = "invalid_digit"
    POS_OVERFLOW = "pos_overflow"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParsePaddedNumberError(ValueError):
    """
    Базовая ошибка создания padded number из строки.

    Наследуется от ValueError, поэтому pydantic оборачивает её
    в ValidationError при валидации полей моделей.
    """


class TooShort(ParsePaddedNumberError):
    """Строка короче min_length."""

    def __init__(self, required_min: int, actual_len: int):
        self.required_min = required_min
        self.actual_len = actual_len
        super().__init__(
            f"too few digits provided, expected at least '{required_min}', "
            f"received '{actual_len}'"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TooShort):
            return NotImplemented
        return (self.required_min, self.actual_len) == (other.required_min, other.actual_len)

    __hash__ = ParsePaddedNumberError.__hash__


class TooLong(ParsePaddedNumberError):
    """Строка длиннее max_length."""

    def __init__(self, required_max: int, actual_len: int):
        self.required_max = required_max
        self.actual_len = actual_len
        super().__init__(
            f"too many digits provided, expected at most '{required_max}', "
            f"received '{actual_len}'"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TooLong):
            return NotImplemented
        return (self.required_max, self.actual_len) == (other.required_max, other.actual_len)

    __hash__ = ParsePaddedNumberError.__hash__


class InvalidNumber(ParsePaddedNumberError):
    """
    Строка не является беззнаковым десятичным числом.

    kind:
    - INVALID_DIGIT: встречен символ вне ASCII '0'-'9'
    - POS_OVERFLOW: magnitude не помещается в 64 бита
    """

    _MESSAGES = {
        IntErrorKind.INVALID_DIGIT: "integer parse error, encountered non-ascii digit",
        IntErrorKind.POS_OVERFLOW: "integer parse error, number too large to fit in 64 bits",
    }

    def __init__(self, kind: IntErrorKind):
        self.kind = kind
        super().__init__(self._MESSAGES[kind])
