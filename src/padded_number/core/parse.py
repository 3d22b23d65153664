"""
Parser — Разбор строки в двухпольное представление

Порядок проверок:
1. Пустая строка при min_length == 0 → пустое значение (0, 0)
2. len < min_length → TooShort
3. len > max_length → TooLong
4. Символы вне ASCII '0'-'9' → InvalidNumber(INVALID_DIGIT)
5. Magnitude > 2**64 - 1 → InvalidNumber(POS_OVERFLOW)

Знаки, пробелы, разделители '_' и не-ASCII цифры не принимаются,
хотя int() в Python их допускает.
"""

import logging

from padded_number.core.bounds import MAX_MAGNITUDE
from padded_number.core.digits import DigitSplit
from padded_number.core.errors import IntErrorKind, InvalidNumber, TooLong, TooShort

logger = logging.getLogger(__name__)

_ASCII_DIGITS = frozenset("0123456789")


def parse(min_length: int, max_length: int, text: str) -> DigitSplit:
    """
    Разбор строки цифр с проверкой границ длины.

    Args:
        min_length: Минимальная длина (включительно)
        max_length: Максимальная длина (включительно)
        text: Строка ASCII цифр

    Returns:
        DigitSplit(leading_zeros, number)

    Raises:
        TooShort: Если строка короче min_length
        TooLong: Если строка длиннее max_length
        InvalidNumber: Если строка содержит не-цифры или magnitude не помещается в u64

    Examples:
        >>> parse(1, 3, "001")
        DigitSplit(leading_zeros=2, number=1)
        >>> parse(1, 3, "000")
        DigitSplit(leading_zeros=3, number=0)
        >>> parse(0, 0, "")
        DigitSplit(leading_zeros=0, number=0)
    """
    text_len = len(text)

    if text_len == 0 and min_length == 0:
        return DigitSplit(0, 0)

    if text_len < min_length:
        logger.debug("Rejected padded number %r: shorter than %d", text, min_length)
        raise TooShort(min_length, text_len)

    if text_len > max_length:
        logger.debug("Rejected padded number %r: longer than %d", text, max_length)
        raise TooLong(max_length, text_len)

    if not _ASCII_DIGITS.issuperset(text):
        logger.debug("Rejected padded number %r: non-digit characters", text)
        raise InvalidNumber(IntErrorKind.INVALID_DIGIT)

    number = int(text)
    if number > MAX_MAGNITUDE:
        logger.debug("Rejected padded number %r: magnitude overflows 64 bits", text)
        raise InvalidNumber(IntErrorKind.POS_OVERFLOW)

    leading_zeros = text_len - len(text.lstrip("0"))

    return DigitSplit(leading_zeros, number)
