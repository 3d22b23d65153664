"""
Sectioning Engine — Извлечение диапазона цифр [start, end)

Индексы — позиции цифр в тексте, с 0 слева, end не включается.
Диапазон переводится в координаты magnitude вычитанием leading_zeros;
отрицательный результат означает, что граница внутри префикса нулей.

Случаи:
- start и end в префиксе нулей → (end - start) нулей, magnitude 0
- start в префиксе, end в magnitude → оставшиеся нули + цифры [0, t_end)
- start и end в magnitude → цифры [t_start, t_end); нули в начале
  поддиапазона переносятся в leading_zeros
- start в magnitude, end в префиксе → start > end, ошибка вызывающего
"""

from padded_number.core.digits import DigitSplit, digit_length


# =============================================================================
# ПОДДИАПАЗОН MAGNITUDE
# =============================================================================


def _drop_most_significant_digit(number: int, number_length: int) -> int:
    decimal = 10 ** (number_length - 1)
    return number - (number // decimal) * decimal


def number_subsection(number: int, start: int, end: int) -> int:
    """
    Числовое значение цифр [start, end) magnitude.

    Сначала отбрасываются start старших цифр (вычитание старшего разряда),
    затем младшие digit_length(number) - end цифр (целочисленное деление).

    Args:
        number: Magnitude
        start: Начальная позиция цифры (включительно)
        end: Конечная позиция цифры (не включительно)

    Returns:
        Значение поддиапазона (0 для пустого диапазона или number == 0)

    Raises:
        ValueError: Если не выполняется 0 <= start <= end <= digit_length(number)

    Examples:
        >>> number_subsection(123456, 2, 4)
        34
        >>> number_subsection(123456, 0, 0)
        0
    """
    number_length = digit_length(number)

    if number_length == 0:
        return 0

    if not 0 <= start <= end <= number_length:
        raise ValueError(
            f"subsection [{start}, {end}) out of range for {number_length} digits"
        )

    current = number
    current_length = number_length

    for _ in range(start):
        current = _drop_most_significant_digit(current, current_length)
        current_length -= 1

    return current // 10 ** (number_length - end)


# =============================================================================
# СЕКЦИЯ
# =============================================================================


def section_split(split: DigitSplit, start: int, end: int) -> DigitSplit:
    """
    Секция [start, end) значения с пересчётом leading_zeros/number.

    Вызывающий гарантирует start <= end <= split.length.

    Args:
        split: Исходное значение
        start: Начальная позиция (включительно)
        end: Конечная позиция (не включительно)

    Returns:
        DigitSplit секции длиной end - start

    Raises:
        ValueError: Если start > end

    Examples:
        >>> section_split(DigitSplit(3, 1234), 2, 5)
        DigitSplit(leading_zeros=1, number=12)
        >>> section_split(DigitSplit(3, 1234), 0, 3)
        DigitSplit(leading_zeros=3, number=0)
    """
    leading_zeros = split.leading_zeros
    translated_start = start - leading_zeros
    translated_end = end - leading_zeros

    if translated_start >= 0 and translated_end >= 0:
        number = number_subsection(split.number, translated_start, translated_end)
        # например цифры [1, 3) от 105 дают "05"
        return DigitSplit(end - start - digit_length(number), number)

    if translated_start < 0 and translated_end >= 0:
        number = number_subsection(split.number, 0, translated_end)
        return DigitSplit(leading_zeros - start, number)

    if translated_start < 0 and translated_end < 0:
        return DigitSplit(end - start, 0)

    raise ValueError(f"encountered start > end: [{start}, {end})")
