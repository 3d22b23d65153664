"""
Pydantic поля и JSON сериализация padded number

PaddedNumberField(min_length, max_length) возвращает Annotated тип для
полей Pydantic моделей:

    class Parcel(BaseModel):
        zip_code: PaddedNumberField(5, 5)

- Валидация: строка разбирается парсером в bounds поля;
  экземпляр PaddedNumber принимается, если его длина помещается в bounds
- Сериализация: каноническая строка ("0123")
- JSON Schema: см. padded_number.contracts.validators
"""

from functools import lru_cache
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, TypeAdapter, WithJsonSchema

from padded_number.contracts.validators import padded_number_schema
from padded_number.core.bounds import Bounds
from padded_number.core.value import PaddedNumber


def _make_validator(bounds: Bounds):
    def validate(value: Any) -> PaddedNumber:
        if isinstance(value, PaddedNumber):
            if not bounds.contains(len(value)):
                raise ValueError(f"length {len(value)} does not fit {bounds!r}")
            return PaddedNumber._new_unchecked(value.leading_zeros, value.number, bounds)

        if isinstance(value, str):
            return PaddedNumber.try_new(value, bounds)

        raise ValueError(
            f"padded number must be provided as a string, got {type(value).__name__}"
        )

    return validate


def _serialize(value: PaddedNumber) -> str:
    return str(value)


def PaddedNumberField(min_length: int, max_length: int) -> Any:
    """
    Annotated тип PaddedNumber с bounds для Pydantic моделей.

    Фабрика типа, а не значения: результат используется как аннотация
    поля (zip_code: PaddedNumberField(5, 5)), отсюда имя в PascalCase.

    Args:
        min_length: Минимальная длина (включительно)
        max_length: Максимальная длина (включительно)

    Returns:
        Annotated[PaddedNumber, ...]
    """
    bounds = Bounds(min_length, max_length)
    json_schema = {key: value for key, value in padded_number_schema(bounds).items() if key != "$schema"}

    return Annotated[
        PaddedNumber,
        PlainValidator(_make_validator(bounds)),
        PlainSerializer(_serialize, return_type=str),
        WithJsonSchema(json_schema),
    ]


# =============================================================================
# JSON
# =============================================================================


@lru_cache(maxsize=None)
def _adapter_for(bounds: Bounds) -> TypeAdapter:
    return TypeAdapter(PaddedNumberField(bounds.min_length, bounds.max_length))


def to_json(value: PaddedNumber) -> str:
    """
    JSON строка padded number.

    Examples:
        >>> to_json(PaddedNumber.try_new("0123", Bounds(1, 4)))
        '"0123"'
    """
    return _adapter_for(value.bounds).dump_json(value).decode()


def from_json(data: str, bounds: Bounds) -> PaddedNumber:
    """
    Разбор JSON строки в padded number.

    Raises:
        pydantic.ValidationError: Если JSON не строка или строка невалидна в bounds
    """
    return _adapter_for(bounds).validate_json(data)
