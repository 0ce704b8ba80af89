from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} must not be blank")
    return str(value).strip()


def optional_int(value: Any) -> Optional[int]:
    """Coerce form/JSON input into an int, or None when blank or not numeric.

    >>> optional_int("120"), optional_int(120.0), optional_int(""), optional_int("1.5")
    (120, 120, None, None)
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    # whole numbers only
    if not number.is_integer():
        return None
    return int(number)


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
