"""
Digits — Двухпольное представление padded number

Модуль содержит примитивы, общие для парсера, арифметики и секционирования:
- DigitSplit: пара (leading_zeros, number)
- digit_length: количество десятичных цифр magnitude
- max_number_for_length: наибольший magnitude для заданной длины

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digit_length(0) == 0 (нулевой magnitude не занимает цифр)
2. length == leading_zeros + digit_length(number)
3. Текст = '0' * leading_zeros + цифры number (пусто при number == 0)
"""

from typing import NamedTuple


# =============================================================================
# ДЛИНА MAGNITUDE
# =============================================================================


def digit_length(number: int) -> int:
    """
    Количество десятичных цифр magnitude.

    Args:
        number: Неотрицательный magnitude

    Returns:
        0 для number == 0, иначе floor(log10(number)) + 1

    Examples:
        >>> digit_length(0)
        0
        >>> digit_length(9)
        1
        >>> digit_length(467)
        3
    """
    if number == 0:
        return 0

    return len(str(number))


def max_number_for_length(length: int) -> int:
    """
    Наибольший magnitude, представимый при заданной текстовой длине.

    Examples:
        >>> max_number_for_length(0)
        0
        >>> max_number_for_length(3)
        999
    """
    return 10**length - 1


# =============================================================================
# DIGIT SPLIT
# =============================================================================


class DigitSplit(NamedTuple):
    """
    Разбиение текста на префикс нулей и magnitude.

    Используется арифметикой и секционированием как промежуточное
    значение без привязки к bounds.
    """

    leading_zeros: int
    number: int

    @property
    def length(self) -> int:
        """Полная текстовая длина (включая leading zeros)."""
        return self.leading_zeros + digit_length(self.number)

    @property
    def is_empty(self) -> bool:
        return self.leading_zeros == 0 and self.number == 0

    def to_text(self) -> str:
        """Каноническая текстовая форма."""
        digits = str(self.number) if self.number != 0 else ""
        return "0" * self.leading_zeros + digits
