"""Field validation rules for entity drafts.

Rules are evaluated on submit only. For each field the first failing rule
wins, so a missing e-mail reports ``required`` rather than ``emailInvalid``.
Format rules ignore empty values and leave emptiness to ``Required``.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

EMAIL_PATTERN = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE)
PHONE_PATTERN = re.compile(r"^(\+7|8)[\s-]?\(?\d{3}\)?[\s-]?\d{3}[\s-]?\d{2}[\s-]?\d{2}$")


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass(frozen=True)
class FieldRule:
    """Base rule bound to one draft field."""

    field: str
    create_only: bool = False

    message_key = "validation.invalid"

    def is_valid(self, value: Any) -> bool:
        return True

    def params(self) -> dict[str, Any]:
        return {"field": self.field}

    def applies(self, creating: bool) -> bool:
        return creating or not self.create_only


@dataclass(frozen=True)
class Required(FieldRule):
    message_key = "validation.required"

    def is_valid(self, value: Any) -> bool:
        return bool(_text(value).strip())


@dataclass(frozen=True)
class EmailFormat(FieldRule):
    message_key = "validation.emailInvalid"

    def is_valid(self, value: Any) -> bool:
        text = _text(value)
        return not text or EMAIL_PATTERN.match(text) is not None


@dataclass(frozen=True)
class PhoneFormat(FieldRule):
    message_key = "validation.phoneInvalid"

    def is_valid(self, value: Any) -> bool:
        text = _text(value)
        return not text or PHONE_PATTERN.match(text) is not None


@dataclass(frozen=True)
class NumericRange(FieldRule):
    minimum: float | None = None
    maximum: float | None = None

    message_key = "validation.outOfRange"

    def is_valid(self, value: Any) -> bool:
        if value is None or value == "":
            return True
        try:
            number = float(value)
        except (TypeError, ValueError):
            return False
        if not math.isfinite(number):
            return False
        if self.minimum is not None and number < self.minimum:
            return False
        if self.maximum is not None and number > self.maximum:
            return False
        return True

    def params(self) -> dict[str, Any]:
        return {"field": self.field, "min": self.minimum, "max": self.maximum}


@dataclass(frozen=True)
class MinLength(FieldRule):
    length: int = 1

    message_key = "validation.tooShort"

    def is_valid(self, value: Any) -> bool:
        text = _text(value)
        return not text or len(text) >= self.length

    def params(self) -> dict[str, Any]:
        return {"field": self.field, "length": self.length}


