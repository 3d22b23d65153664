"""
padded-number — беззнаковые числа со значимыми ведущими нулями

"0" и "00" — разные значения. Поддерживаются границы длины, порядок,
wrapping/saturating арифметика и извлечение диапазонов цифр.

    >>> from padded_number import Bounds, PaddedNumber
    >>> serial = PaddedNumber.try_new("0099", Bounds(1, 4))
    >>> str(serial + 1)
    '0100'
"""

from padded_number.contracts import (
    PaddedNumberContractValidator,
    PaddedNumberField,
    from_json,
    padded_number_schema,
    to_json,
    validate_padded_number,
)
from padded_number.core import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    MAX_ARITHMETIC_LENGTH,
    MAX_MAGNITUDE,
    Bounds,
    IntErrorKind,
    InvalidNumber,
    PaddedNumber,
    ParsePaddedNumberError,
    TooLong,
    TooShort,
    bound_padded_number,
    padded_number,
)
from padded_number.math import OverflowMode

__all__ = [
    # Core
    "Bounds",
    "PaddedNumber",
    "bound_padded_number",
    "padded_number",
    "OverflowMode",
    # Constants
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_MIN_LENGTH",
    "MAX_ARITHMETIC_LENGTH",
    "MAX_MAGNITUDE",
    # Errors
    "IntErrorKind",
    "InvalidNumber",
    "ParsePaddedNumberError",
    "TooLong",
    "TooShort",
    # Contracts
    "PaddedNumberContractValidator",
    "PaddedNumberField",
    "from_json",
    "padded_number_schema",
    "to_json",
    "validate_padded_number",
]
