"""
Arithmetic Engine — Wrapping и saturating сложение/вычитание

Правый операнд — обычное беззнаковое целое (0 <= rhs <= 2**64 - 1).

Переход через степень десяти считается относительно ТЕКУЩЕЙ текстовой
длины, а не натуральной ширины magnitude:
    "000" + 1  → "001"   (один leading zero переходит в magnitude)
    "9"   + 1  → "00"    (длина растёт, magnitude обнуляется)
    "00"  - 1  → "9"     (длина уменьшается)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операции тотальны для bounds с max_length <= MAX_ARITHMETIC_LENGTH:
   переполнение на max_length насыщается или заворачивается. Более широкие
   bounds (в т.ч. по умолчанию (1, 255)) отклоняются с ValueError до
   вычислений, так как результат может не поместиться в 64 бита
2. Результат всегда удовлетворяет bounds и length == lz + digit_length(number)
3. Распространение переполнения — явный цикл, не рекурсия
4. Wrapping сводит остаток по модулю Bounds.value_count, поэтому число
   итераций ограничено O(max_length - min_length) для любого rhs
"""

import logging
from enum import Enum

from padded_number.core.bounds import MAX_ARITHMETIC_LENGTH, MAX_MAGNITUDE, Bounds
from padded_number.core.digits import DigitSplit, digit_length, max_number_for_length

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class OverflowMode(str, Enum):
    """Поведение на границе bounds"""

    WRAP = "wrap"
    SATURATE = "saturate"


# =============================================================================
# ВАЛИДАЦИЯ ОПЕРАНДА
# =============================================================================


def validate_operand(rhs: int) -> None:
    """
    Проверка правого операнда арифметики.

    Raises:
        TypeError: Если rhs не int (bool не допускается)
        ValueError: Если rhs отрицательный или больше 2**64 - 1
    """
    if isinstance(rhs, bool) or not isinstance(rhs, int):
        raise TypeError(f"rhs must be an unsigned int, got {type(rhs).__name__}")

    if rhs < 0:
        raise ValueError(f"rhs must be non-negative, got {rhs}")

    if rhs > MAX_MAGNITUDE:
        raise ValueError(f"rhs must fit in 64 bits, got {rhs}")


def validate_arithmetic_bounds(bounds: Bounds) -> None:
    """
    Проверка, что любой результат арифметики в bounds помещается в 64 бита.

    Raises:
        ValueError: Если bounds.max_length > MAX_ARITHMETIC_LENGTH

    Examples:
        >>> validate_arithmetic_bounds(Bounds(1, 19))
        >>> validate_arithmetic_bounds(Bounds(1, 20))
        Traceback (most recent call last):
        ...
        ValueError: arithmetic requires max_length <= 19, got Bounds(1, 20)
    """
    if bounds.max_length > MAX_ARITHMETIC_LENGTH:
        raise ValueError(
            f"arithmetic requires max_length <= {MAX_ARITHMETIC_LENGTH}, got {bounds!r}"
        )


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add(split: DigitSplit, rhs: int, bounds: Bounds, mode: OverflowMode) -> DigitSplit:
    """
    Сложение с переносом цифр между leading zeros и magnitude.

    Алгоритм (на каждом шаге):
    1. candidate = number + rhs, cap = 10**length - 1
    2. candidate <= cap: длина сохраняется, leading_zeros уменьшается
       на прирост digit_length
    3. candidate > cap и length < max_length: переход к (length + 1) нулям,
       rhs уменьшается на (cap - number) + 1
    4. candidate > cap и length == max_length:
       - SATURATE → max_length девяток
       - WRAP → продолжение от min_length нулей с остатком candidate - cap - 1

    Args:
        split: Исходное значение
        rhs: Прибавляемое беззнаковое целое
        bounds: Границы длины исходного значения
        mode: WRAP или SATURATE

    Returns:
        Новое значение в тех же bounds

    Raises:
        TypeError, ValueError: См. validate_operand, validate_arithmetic_bounds

    Examples:
        >>> add(DigitSplit(0, 9), 1, Bounds(0, 10), OverflowMode.WRAP)
        DigitSplit(leading_zeros=2, number=0)
        >>> add(DigitSplit(0, 990), 1000, Bounds(2, 3), OverflowMode.SATURATE)
        DigitSplit(leading_zeros=0, number=999)
    """
    validate_operand(rhs)
    validate_arithmetic_bounds(bounds)

    current = split
    remaining = rhs

    while remaining != 0:
        length = current.length
        cap = max_number_for_length(length)
        candidate = current.number + remaining

        # нет переполнения, длина сохраняется
        if candidate <= cap:
            promoted = digit_length(candidate) - digit_length(current.number)
            return DigitSplit(current.leading_zeros - promoted, candidate)

        if length >= bounds.max_length:
            if mode is OverflowMode.SATURATE:
                logger.debug("Saturated add at max length %d", bounds.max_length)
                return DigitSplit(0, cap)

            # '0' на min_length тоже шаг, поэтому -1
            logger.debug("Wrapped add at max length %d", bounds.max_length)
            remaining = (candidate - cap - 1) % bounds.value_count
            current = bounds.min_value()
            continue

        # добавляем один leading zero и продолжаем
        remaining -= cap - current.number + 1
        current = DigitSplit(length + 1, 0)

    return current


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def sub(split: DigitSplit, rhs: int, bounds: Bounds, mode: OverflowMode) -> DigitSplit:
    """
    Вычитание с переносом цифр между magnitude и leading zeros.

    Алгоритм (на каждом шаге):
    1. number >= rhs: длина сохраняется, leading_zeros увеличивается
       на потерю digit_length
    2. number < rhs и length > min_length: переход к (length - 1) девяткам,
       rhs уменьшается на number + 1
    3. number < rhs и length == min_length:
       - SATURATE → min_length нулей
       - WRAP → продолжение от max_length девяток с остатком rhs - number - 1

    Пустое значение при min_length == 0 обрабатывается так же: wrapping
    вычитание из "" переходит к max_length девяткам.

    Args:
        split: Исходное значение
        rhs: Вычитаемое беззнаковое целое
        bounds: Границы длины исходного значения
        mode: WRAP или SATURATE

    Returns:
        Новое значение в тех же bounds

    Raises:
        TypeError, ValueError: См. validate_operand, validate_arithmetic_bounds

    Examples:
        >>> sub(DigitSplit(2, 0), 1, Bounds(0, 10), OverflowMode.WRAP)
        DigitSplit(leading_zeros=0, number=9)
        >>> sub(DigitSplit(0, 99), 1000, Bounds(1, 2), OverflowMode.SATURATE)
        DigitSplit(leading_zeros=1, number=0)
    """
    validate_operand(rhs)
    validate_arithmetic_bounds(bounds)

    current = split
    remaining = rhs

    while remaining != 0:
        # нет переполнения, длина сохраняется
        if current.number >= remaining:
            new_number = current.number - remaining
            demoted = digit_length(current.number) - digit_length(new_number)
            return DigitSplit(current.leading_zeros + demoted, new_number)

        length = current.length
        deficit = remaining - current.number - 1

        if length <= bounds.min_length:
            if mode is OverflowMode.SATURATE:
                logger.debug("Saturated sub at min length %d", bounds.min_length)
                return bounds.min_value()

            logger.debug("Wrapped sub at min length %d", bounds.min_length)
            remaining = deficit % bounds.value_count
            current = bounds.max_value()
            continue

        # убираем одну цифру и продолжаем от максимума меньшей длины
        remaining = deficit
        current = DigitSplit(0, max_number_for_length(length - 1))

    return current
