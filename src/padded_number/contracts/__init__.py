"""
Contracts — строковая форма padded number на границе сериализации

JSON Schema контракт (jsonschema) и Pydantic поля.
"""

from padded_number.contracts.fields import PaddedNumberField, from_json, to_json
from padded_number.contracts.validators import (
    DIGITS_PATTERN,
    PaddedNumberContractValidator,
    padded_number_schema,
    validate_padded_number,
)

__all__ = [
    # Classes
    "PaddedNumberContractValidator",
    # Functions
    "PaddedNumberField",
    "from_json",
    "to_json",
    "padded_number_schema",
    "validate_padded_number",
    # Constants
    "DIGITS_PATTERN",
]
