from __future__ import annotations

import math
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_length_between(value: Optional[str], field_name: str, min_len: int, max_len: int) -> str:
    value = require_non_empty(value, field_name)
    if not min_len <= len(value) <= max_len:
        if min_len == max_len:
            raise ValidationError(f"{field_name} must be exactly {min_len} characters")
        raise ValidationError(f"{field_name} must be {min_len}-{max_len} characters")
    return value


def require_non_negative_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number) or number < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    return number


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
