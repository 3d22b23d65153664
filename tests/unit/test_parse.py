"""
Тесты для парсера padded number и модели Bounds

Проверяет:
1. Разбиение строки на leading_zeros и number
2. Проверки длины (TooShort/TooLong) и их порядок
3. Отклонение не-цифр и переполнения u64 (InvalidNumber)
4. Пустое значение при min_length == 0
5. Неконструируемые bounds (min_length > max_length)
6. Валидацию и производные свойства Bounds
"""

import pytest
from pydantic import ValidationError

from padded_number.core import (
    MAX_MAGNITUDE,
    Bounds,
    DigitSplit,
    IntErrorKind,
    InvalidNumber,
    ParsePaddedNumberError,
    TooLong,
    TooShort,
    digit_length,
    parse,
)


# =============================================================================
# DIGIT LENGTH
# =============================================================================


class TestDigitLength:
    """Тесты для digit_length"""

    @pytest.mark.parametrize(
        "number, expected",
        [(0, 0), (1, 1), (9, 1), (10, 2), (467, 3), (MAX_MAGNITUDE, 20)],
    )
    def test_digit_length(self, number: int, expected: int) -> None:
        assert digit_length(number) == expected


# =============================================================================
# УСПЕШНЫЙ ПАРСИНГ
# =============================================================================


class TestParseSuccess:
    """Тесты успешного разбора строки"""

    def test_leading_zeros_counted(self) -> None:
        """'001' → два leading zero и magnitude 1"""
        assert parse(1, 3, "001") == DigitSplit(2, 1)

    def test_zeros_only(self) -> None:
        """Все нули уходят в leading_zeros"""
        assert parse(1, 3, "000") == DigitSplit(3, 0)

    def test_no_leading_zeros(self) -> None:
        assert parse(1, 3, "467") == DigitSplit(0, 467)

    def test_inner_zeros_belong_to_number(self) -> None:
        assert parse(1, 10, "0010200") == DigitSplit(2, 10200)

    def test_empty_with_zero_minimum(self) -> None:
        """'' допустим при min_length == 0"""
        assert parse(0, 0, "") == DigitSplit(0, 0)
        assert parse(0, 5, "") == DigitSplit(0, 0)

    def test_max_magnitude_accepted(self) -> None:
        text = str(MAX_MAGNITUDE)
        assert parse(1, 20, text) == DigitSplit(0, MAX_MAGNITUDE)

    def test_leading_zeros_do_not_count_towards_overflow(self) -> None:
        text = "000" + str(MAX_MAGNITUDE)
        assert parse(1, 30, text) == DigitSplit(3, MAX_MAGNITUDE)

    @pytest.mark.parametrize("text", ["", "0", "000", "467", "00467", "0120"])
    def test_length_preserved(self, text: str) -> None:
        """leading_zeros + digit_length(number) == len(text)"""
        assert parse(0, 10, text).length == len(text)

    @pytest.mark.parametrize("text", ["", "0", "00", "09", "90", "0012", "123456"])
    def test_round_trip_text(self, text: str) -> None:
        assert parse(0, 10, text).to_text() == text


# =============================================================================
# ОШИБКИ ДЛИНЫ
# =============================================================================


class TestParseLengthErrors:
    """Тесты для TooShort / TooLong"""

    def test_too_long(self) -> None:
        with pytest.raises(TooLong) as exc_info:
            parse(1, 2, "123")

        assert exc_info.value == TooLong(2, 3)
        assert exc_info.value.required_max == 2
        assert exc_info.value.actual_len == 3

    def test_too_short_empty(self) -> None:
        with pytest.raises(TooShort) as exc_info:
            parse(1, 2, "")

        assert exc_info.value == TooShort(1, 0)

    def test_too_short_non_empty(self) -> None:
        with pytest.raises(TooShort) as exc_info:
            parse(3, 5, "12")

        assert exc_info.value.required_min == 3
        assert exc_info.value.actual_len == 2

    def test_length_checked_before_digits(self) -> None:
        """Длина проверяется раньше символов"""
        with pytest.raises(TooLong):
            parse(1, 2, "abc")

    def test_messages(self) -> None:
        assert str(TooShort(1, 0)) == (
            "too few digits provided, expected at least '1', received '0'"
        )
        assert str(TooLong(2, 3)) == (
            "too many digits provided, expected at most '2', received '3'"
        )

    def test_errors_are_value_errors(self) -> None:
        assert issubclass(TooShort, ParsePaddedNumberError)
        assert issubclass(TooLong, ParsePaddedNumberError)
        assert issubclass(ParsePaddedNumberError, ValueError)


# =============================================================================
# ОШИБКИ ЧИСЛА
# =============================================================================


class TestParseInvalidNumber:
    """Тесты для InvalidNumber"""

    @pytest.mark.parametrize(
        "text",
        ["123abc", "+12", "-12", " 12", "12 ", "1_000", "12.5", "٣٤", "1\n"],
    )
    def test_non_ascii_digits_rejected(self, text: str) -> None:
        with pytest.raises(InvalidNumber) as exc_info:
            parse(0, 10, text)

        assert exc_info.value.kind is IntErrorKind.INVALID_DIGIT

    def test_overflow_rejected(self) -> None:
        with pytest.raises(InvalidNumber) as exc_info:
            parse(1, 30, str(MAX_MAGNITUDE + 1))

        assert exc_info.value.kind is IntErrorKind.POS_OVERFLOW
        assert "64 bits" in str(exc_info.value)


# =============================================================================
# НЕКОНСТРУИРУЕМЫЕ BOUNDS
# =============================================================================


class TestUnconstructibleBounds:
    """min_length > max_length: объявить можно, создать значение нельзя"""

    def test_declarable(self) -> None:
        bounds = Bounds(3, 1)
        assert not bounds.is_constructible

    @pytest.mark.parametrize("text", ["", "1", "12"])
    def test_short_inputs_fail_too_short(self, text: str) -> None:
        with pytest.raises(TooShort):
            parse(3, 1, text)

    @pytest.mark.parametrize("text", ["123", "1234"])
    def test_long_inputs_fail_too_long(self, text: str) -> None:
        with pytest.raises(TooLong):
            parse(3, 1, text)


# =============================================================================
# BOUNDS
# =============================================================================


class TestBounds:
    """Тесты для модели Bounds"""

    def test_defaults(self) -> None:
        bounds = Bounds()
        assert bounds.min_length == 1
        assert bounds.max_length == 255

    def test_positional_and_keyword_equal(self) -> None:
        assert Bounds(1, 7) == Bounds(min_length=1, max_length=7)

    def test_frozen(self) -> None:
        bounds = Bounds(1, 7)
        with pytest.raises(ValidationError):
            bounds.min_length = 2

    def test_hashable(self) -> None:
        assert len({Bounds(1, 7), Bounds(1, 7), Bounds(2, 7)}) == 2

    @pytest.mark.parametrize("min_length, max_length", [(-1, 3), (1, 256), (256, 256)])
    def test_out_of_byte_range_rejected(self, min_length: int, max_length: int) -> None:
        with pytest.raises(ValidationError):
            Bounds(min_length, max_length)

    def test_contains(self) -> None:
        bounds = Bounds(2, 3)
        assert not bounds.contains(1)
        assert bounds.contains(2)
        assert bounds.contains(3)
        assert not bounds.contains(4)

    def test_allows_empty(self) -> None:
        assert Bounds(0, 3).allows_empty
        assert not Bounds(1, 3).allows_empty

    @pytest.mark.parametrize(
        "bounds, expected",
        [(Bounds(0, 0), 1), (Bounds(1, 1), 10), (Bounds(1, 2), 110), (Bounds(0, 2), 111), (Bounds(3, 1), 0)],
    )
    def test_value_count(self, bounds: Bounds, expected: int) -> None:
        assert bounds.value_count == expected

    def test_is_within(self) -> None:
        assert Bounds(2, 3).is_within(Bounds(1, 5))
        assert Bounds(1, 5).is_within(Bounds(1, 5))
        assert not Bounds(0, 3).is_within(Bounds(1, 5))
        assert not Bounds(2, 6).is_within(Bounds(1, 5))

    def test_min_and_max_values(self) -> None:
        bounds = Bounds(2, 4)
        assert bounds.min_value() == DigitSplit(2, 0)
        assert bounds.max_value() == DigitSplit(0, 9999)

    def test_repr(self) -> None:
        assert repr(Bounds(1, 7)) == "Bounds(1, 7)"
