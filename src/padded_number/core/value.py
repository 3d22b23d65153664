"""
PaddedNumber — Беззнаковое число со значимыми ведущими нулями

"0" и "00" — разные значения. Immutable Pydantic модель из двух полей
(leading_zeros, number) и bounds, которые несёт каждый экземпляр.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. leading_zeros + digit_length(number) == len(value)
2. bounds.min_length <= len(value) <= bounds.max_length
3. str(value) == '0' * leading_zeros + цифры number (пусто при number == 0)
4. Равенство и hash определяются только (leading_zeros, number)

Порядок: сначала длина (короче всегда меньше, "9" < "00"),
при равной длине — number.

Экземпляры создаются только парсером (try_new), арифметикой,
секционированием или доверенным конструктором _new_unchecked
(для вызывающих, уже проверивших инварианты).
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, model_validator

from padded_number.core.bounds import MAX_BOUND_LENGTH, MAX_MAGNITUDE, Bounds
from padded_number.core.digits import DigitSplit, digit_length, max_number_for_length
from padded_number.core.parse import parse
from padded_number.math import arithmetic
from padded_number.math.arithmetic import OverflowMode
from padded_number.math.section import section_split


class PaddedNumber(BaseModel):
    """
    Padded number: ведущие нули — часть значения.

    Immutable модель (frozen=True). Все операции возвращают новый экземпляр.
    Публичный конструктор проверяет инварианты; предпочтительный способ
    создания — PaddedNumber.try_new(text, bounds).
    """

    leading_zeros: int = Field(
        ..., ge=0, le=MAX_BOUND_LENGTH, description="Количество ведущих нулей"
    )
    number: int = Field(
        ..., ge=0, le=MAX_MAGNITUDE, description="Magnitude без ведущих нулей"
    )
    bounds: Bounds = Field(default_factory=Bounds, description="Границы длины")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_length_within_bounds(self) -> "PaddedNumber":
        """Проверка, что длина значения допустима в bounds."""
        if not self.bounds.contains(len(self)):
            raise ValueError(
                f"length {len(self)} outside bounds "
                f"[{self.bounds.min_length}, {self.bounds.max_length}]"
            )
        return self

    # =========================================================================
    # СОЗДАНИЕ
    # =========================================================================

    @classmethod
    def try_new(cls, text: str, bounds: Optional[Bounds] = None) -> "PaddedNumber":
        """
        Создание padded number из строки цифр.

        Args:
            text: Строка ASCII цифр
            bounds: Границы длины (default: Bounds(1, 255))

        Returns:
            Новый PaddedNumber

        Raises:
            TooShort, TooLong, InvalidNumber: см. padded_number.core.parse

        Examples:
            >>> str(PaddedNumber.try_new("0012", Bounds(1, 4)))
            '0012'
        """
        if bounds is None:
            bounds = Bounds()
        split = parse(bounds.min_length, bounds.max_length, text)
        return cls._from_split(split, bounds)

    @classmethod
    def _new_unchecked(cls, leading_zeros: int, number: int, bounds: Bounds) -> "PaddedNumber":
        """
        Доверенный конструктор без проверки инвариантов.

        Вызывающий полностью отвечает за соблюдение инвариантов.
        """
        return cls.model_construct(leading_zeros=leading_zeros, number=number, bounds=bounds)

    @classmethod
    def _from_split(cls, split: DigitSplit, bounds: Bounds) -> "PaddedNumber":
        return cls._new_unchecked(split.leading_zeros, split.number, bounds)

    def _split(self) -> DigitSplit:
        return DigitSplit(self.leading_zeros, self.number)

    # =========================================================================
    # ДЛИНА
    # =========================================================================

    def __len__(self) -> int:
        return self.leading_zeros + digit_length(self.number)

    def __bool__(self) -> bool:
        return not self.is_empty()

    @property
    def length(self) -> int:
        """Полная текстовая длина, включая leading zeros."""
        return len(self)

    def is_empty(self) -> bool:
        """True только для значения ""."""
        return self.leading_zeros == 0 and self.number == 0

    def max_number_for_current_length(self) -> "PaddedNumber":
        """Наибольшее значение той же длины (все девятки)."""
        return self._new_unchecked(0, max_number_for_length(len(self)), self.bounds)

    # =========================================================================
    # ОТОБРАЖЕНИЕ
    # =========================================================================

    def __str__(self) -> str:
        return self._split().to_text()

    def __repr__(self) -> str:
        return (
            f"PaddedNumber('{self}', "
            f"bounds=({self.bounds.min_length}, {self.bounds.max_length}))"
        )

    def __int__(self) -> int:
        return self.number

    # =========================================================================
    # РАВЕНСТВО И ПОРЯДОК
    # =========================================================================

    def _ordering_key(self) -> tuple[int, int]:
        return (len(self), self.number)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PaddedNumber):
            return NotImplemented
        return (self.leading_zeros, self.number) == (other.leading_zeros, other.number)

    def __hash__(self) -> int:
        return hash((self.leading_zeros, self.number))

    def __lt__(self, other: "PaddedNumber") -> bool:
        if not isinstance(other, PaddedNumber):
            return NotImplemented
        return self._ordering_key() < other._ordering_key()

    def __le__(self, other: "PaddedNumber") -> bool:
        if not isinstance(other, PaddedNumber):
            return NotImplemented
        return self._ordering_key() <= other._ordering_key()

    def __gt__(self, other: "PaddedNumber") -> bool:
        if not isinstance(other, PaddedNumber):
            return NotImplemented
        return self._ordering_key() > other._ordering_key()

    def __ge__(self, other: "PaddedNumber") -> bool:
        if not isinstance(other, PaddedNumber):
            return NotImplemented
        return self._ordering_key() >= other._ordering_key()

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _add(self, rhs: int, mode: OverflowMode) -> "PaddedNumber":
        split = arithmetic.add(self._split(), rhs, self.bounds, mode)
        return self._from_split(split, self.bounds)

    def _sub(self, rhs: int, mode: OverflowMode) -> "PaddedNumber":
        split = arithmetic.sub(self._split(), rhs, self.bounds, mode)
        return self._from_split(split, self.bounds)

    def wrapping_add(self, rhs: int) -> "PaddedNumber":
        """
        Сложение с заворачиванием к min_length нулям после max_length девяток.

        Examples:
            >>> str(PaddedNumber.try_new("999", Bounds(2, 3)).wrapping_add(2))
            '01'
        """
        return self._add(rhs, OverflowMode.WRAP)

    def saturating_add(self, rhs: int) -> "PaddedNumber":
        """
        Сложение с насыщением на max_length девятках.

        Examples:
            >>> str(PaddedNumber.try_new("990", Bounds(2, 3)).saturating_add(1000))
            '999'
        """
        return self._add(rhs, OverflowMode.SATURATE)

    def wrapping_sub(self, rhs: int) -> "PaddedNumber":
        """Вычитание с заворачиванием к max_length девяткам после min_length нулей."""
        return self._sub(rhs, OverflowMode.WRAP)

    def saturating_sub(self, rhs: int) -> "PaddedNumber":
        """
        Вычитание с насыщением на min_length нулях.

        Examples:
            >>> str(PaddedNumber.try_new("99", Bounds(1, 2)).saturating_sub(1000))
            '0'
        """
        return self._sub(rhs, OverflowMode.SATURATE)

    def __add__(self, rhs: int) -> "PaddedNumber":
        if isinstance(rhs, bool) or not isinstance(rhs, int):
            return NotImplemented
        return self.wrapping_add(rhs)

    def __sub__(self, rhs: int) -> "PaddedNumber":
        if isinstance(rhs, bool) or not isinstance(rhs, int):
            return NotImplemented
        return self.wrapping_sub(rhs)

    # =========================================================================
    # СЕКЦИОНИРОВАНИЕ
    # =========================================================================

    def _check_section_range(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= self.bounds.max_length:
            raise ValueError(
                f"section [{start}, {end}) requires 0 <= start <= end <= "
                f"max_length {self.bounds.max_length}"
            )

    def checked_section(self, start: int, end: int) -> Optional["PaddedNumber"]:
        """
        Секция [start, end) без недостающих цифр.

        Args:
            start: Начальная позиция (включительно)
            end: Конечная позиция (не включительно)

        Returns:
            PaddedNumber с bounds (end - start, end - start),
            None если end > len(self)

        Raises:
            ValueError: Если не выполняется 0 <= start <= end <= max_length

        Examples:
            >>> str(PaddedNumber.try_new("00123").checked_section(2, 5))
            '123'
            >>> PaddedNumber.try_new("0", Bounds(1, 3)).checked_section(1, 3) is None
            True
        """
        self._check_section_range(start, end)

        if end > len(self):
            return None

        split = section_split(self._split(), start, end)
        return self._from_split(split, Bounds(end - start, end - start))

    section = checked_section

    def relaxed_section(self, start: int, end: int, new_min: int) -> Optional["PaddedNumber"]:
        """
        Секция [start, end), недостающие цифры допускаются.

        end ограничивается фактической длиной значения. Результат имеет
        bounds (new_min, end - start).

        Args:
            start: Начальная позиция (включительно)
            end: Конечная позиция (не включительно)
            new_min: Минимальная длина результата

        Returns:
            PaddedNumber или None, если доступно меньше new_min цифр

        Raises:
            ValueError: Если нарушены 0 <= start <= end <= max_length
                или new_min <= end - start

        Examples:
            >>> str(PaddedNumber.try_new("00123").relaxed_section(3, 10, 1))
            '23'
            >>> PaddedNumber.try_new("00", Bounds(1, 10)).relaxed_section(5, 7, 1) is None
            True
        """
        self._check_section_range(start, end)

        if not 0 <= new_min <= end - start:
            raise ValueError(f"new_min {new_min} must be within [0, {end - start}]")

        new_bounds = Bounds(new_min, end - start)
        clamped_end = min(end, len(self))
        remaining_length = max(0, clamped_end - start)

        if remaining_length < new_min:
            return None

        if remaining_length == 0:
            return self._new_unchecked(0, 0, new_bounds)

        split = section_split(self._split(), start, clamped_end)
        return self._from_split(split, new_bounds)

    def expected_section(self, start: int, end: int) -> "PaddedNumber":
        """
        Секция [start, end) в пределах гарантированной min_length.

        Всегда существует, так как end <= bounds.min_length <= len(self).

        Raises:
            ValueError: Если не выполняется 0 <= start <= end <= min_length

        Examples:
            >>> str(PaddedNumber.try_new("00123", Bounds(3, 5)).expected_section(0, 3))
            '001'
        """
        if not 0 <= start <= end <= self.bounds.min_length:
            raise ValueError(
                f"expected section [{start}, {end}) requires 0 <= start <= end <= "
                f"min_length {self.bounds.min_length}"
            )

        split = section_split(self._split(), start, end)
        return self._from_split(split, Bounds(end - start, end - start))

    def resize(
        self, min_length: Union[int, Bounds], max_length: Optional[int] = None
    ) -> "PaddedNumber":
        """
        Сужение bounds без изменения значения.

        Допустимо только new_min >= old_min и new_max <= old_max.

        Args:
            min_length: Новая минимальная длина или готовые Bounds
            max_length: Новая максимальная длина (не передаётся вместе с Bounds)

        Raises:
            ValueError: Если новые bounds шире старых или длина значения
                в них не помещается
            TypeError: Если аргументы не образуют bounds

        Examples:
            >>> PaddedNumber.try_new("123", Bounds(1, 5)).resize(2, 3).bounds
            Bounds(2, 3)
            >>> PaddedNumber.try_new("123", Bounds(1, 5)).resize(Bounds(3, 4)).bounds
            Bounds(3, 4)
        """
        if isinstance(min_length, Bounds):
            if max_length is not None:
                raise TypeError("max_length must not be given together with Bounds")
            new_bounds = min_length
        elif max_length is None:
            raise TypeError("resize requires Bounds or both min_length and max_length")
        else:
            new_bounds = Bounds(min_length, max_length)

        if not new_bounds.is_within(self.bounds):
            raise ValueError(f"cannot resize {self.bounds!r} to wider {new_bounds!r}")

        if not new_bounds.contains(len(self)):
            raise ValueError(f"length {len(self)} does not fit {new_bounds!r}")

        return self._new_unchecked(self.leading_zeros, self.number, new_bounds)
