"""
Core — представление, парсер и тип PaddedNumber

Не зависит от форматов сериализации и внешних контрактов.
"""

from padded_number.core.bounds import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    MAX_ARITHMETIC_LENGTH,
    MAX_BOUND_LENGTH,
    MAX_MAGNITUDE,
    Bounds,
)
from padded_number.core.digits import DigitSplit, digit_length, max_number_for_length
from padded_number.core.errors import (
    IntErrorKind,
    InvalidNumber,
    ParsePaddedNumberError,
    TooLong,
    TooShort,
)
from padded_number.core.literals import bound_padded_number, padded_number
from padded_number.core.parse import parse
from padded_number.core.value import PaddedNumber

__all__ = [
    # Bounds
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_MIN_LENGTH",
    "MAX_ARITHMETIC_LENGTH",
    "MAX_BOUND_LENGTH",
    "MAX_MAGNITUDE",
    "Bounds",
    # Digits
    "DigitSplit",
    "digit_length",
    "max_number_for_length",
    # Errors
    "IntErrorKind",
    "InvalidNumber",
    "ParsePaddedNumberError",
    "TooLong",
    "TooShort",
    # PaddedNumber
    "PaddedNumber",
    "bound_padded_number",
    "padded_number",
    "parse",
]
