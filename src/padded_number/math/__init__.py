"""
Алгоритмы padded number

Арифметика и секционирование работают над DigitSplit и Bounds,
не зависят друг от друга и от класса PaddedNumber.
"""

# Arithmetic Engine
from padded_number.math.arithmetic import (
    OverflowMode,
    add,
    sub,
    validate_arithmetic_bounds,
    validate_operand,
)

# Sectioning Engine
from padded_number.math.section import (
    number_subsection,
    section_split,
)

__all__ = [
    # Arithmetic types
    "OverflowMode",
    # Arithmetic
    "add",
    "sub",
    "validate_arithmetic_bounds",
    "validate_operand",
    # Sectioning
    "number_subsection",
    "section_split",
]
