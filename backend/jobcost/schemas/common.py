"""
Shared coercion helpers for form-submitted payloads

Log entries come from spreadsheet-backed forms, so numbers arrive as strings,
blanks, or junk, and checkboxes arrive as "Yes"/"No". Request schemas run
their fields through these helpers before validation.
"""
import math
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


MINUTES = "Minutes"
HOURS = "Hours"

_TRUTHY = {"true", "yes", "y", "on", "1", "x", "checked"}


def coerce_number(value: Any) -> float:
    """Return value as a float, or 0.0 when absent or non-numeric."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip().replace(",", "").lstrip("$")
        try:
            number = float(text)
        except ValueError:
            return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def coerce_flag(value: Any) -> bool:
    """Interpret checkbox-style values ("Yes", "on", 1, True) as booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, dict):
        return coerce_flag(value.get("enabled"))
    return str(value).strip().lower() in _TRUTHY


def to_hours(amount: float, unit: str) -> float:
    """Convert a duration to hours; anything not in minutes is already hours."""
    if (unit or "").strip().lower() == MINUTES.lower():
        return amount / 60
    return amount


class FormPayload(BaseModel):
    """Base for request payloads accepting camelCase keys from the form front end."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
