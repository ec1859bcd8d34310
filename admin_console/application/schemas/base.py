"""Shared pydantic base for records exchanged with the REST backend.

Incoming bodies are untyped; every declared ``str`` field is coerced to text
(``None`` and non-scalars become ``""``) and every ``int`` field to a number
(unparseable values become ``0``). Unknown keys are dropped. Validation of
a wire record therefore never fails on shape alone.
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


def as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _finite_int(number: float) -> int:
    # inf and nan have no integer value
    if not math.isfinite(number):
        return 0
    return int(number)


def as_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return _finite_int(value)
    if isinstance(value, str):
        try:
            return _finite_int(float(value.strip()))
        except (ValueError, OverflowError):
            return 0
    return 0


class WireRecord(BaseModel):
    """Base wire schema: camelCase aliases in, snake_case attributes out."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _repair_shape(cls, value: Any, info: ValidationInfo) -> Any:
        annotation = cls.model_fields[info.field_name].annotation
        if annotation is str:
            return as_text(value)
        if annotation is int:
            return as_int(value)
        return value
