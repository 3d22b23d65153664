"""
JSON Schema контракт строковой формы padded number

Строковая (wire) форма: ASCII цифры, длина в [min_length, max_length],
без знака, разделителей и пробелов.

Схема строится из Bounds (Draft 2020-12) и проверяется библиотекой
jsonschema. Контракт проверяет только форму строки; переполнение
magnitude (u64) обнаруживает парсер.
"""

from functools import lru_cache
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from padded_number.core.bounds import Bounds


# =============================================================================
# SCHEMA
# =============================================================================

DIGITS_PATTERN = "^[0-9]*$"


def padded_number_schema(bounds: Bounds) -> Dict[str, Any]:
    """
    JSON Schema строковой формы padded number.

    Args:
        bounds: Границы длины

    Returns:
        Схема как dict

    Examples:
        >>> padded_number_schema(Bounds(1, 4))["maxLength"]
        4
    """
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "type": "string",
        "pattern": DIGITS_PATTERN,
        "minLength": bounds.min_length,
        "maxLength": bounds.max_length,
    }


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class PaddedNumberContractValidator:
    """
    Валидатор строковой формы padded number против JSON Schema.

    Схема проверяется при создании (meta-validation).
    """

    def __init__(self, bounds: Bounds):
        """
        Инициализация валидатора.

        Args:
            bounds: Границы длины

        Raises:
            ValueError: Если построенная схема невалидна
        """
        self.bounds = bounds
        self.schema = padded_number_schema(bounds)

        try:
            Draft202012Validator.check_schema(self.schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema for {bounds!r}: {e}")

        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


@lru_cache(maxsize=None)
def _validator_for(bounds: Bounds) -> PaddedNumberContractValidator:
    return PaddedNumberContractValidator(bounds)


def validate_padded_number(data: Any, bounds: Bounds) -> None:
    """
    Валидация строковой формы padded number.

    Args:
        data: Значение для проверки (ожидается str)
        bounds: Границы длины

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _validator_for(bounds).validate(data)
