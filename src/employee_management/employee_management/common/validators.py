from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from ..core.constants import MAX_MONEY_AMOUNT, MONEY_DECIMAL_PLACES
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

E = TypeVar("E", bound=Enum)


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_date(value: Any, field_name: str) -> date:
    if not value:
        raise ValidationError(f"{field_name} is required")
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD string")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD string")


def optional_date(value: Any, field_name: str) -> Optional[date]:
    if value in (None, ""):
        return None
    return require_date(value, field_name)


def _to_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    if isinstance(value, str):
        value = value.strip()
    elif isinstance(value, float):
        # repr keeps the digits the client sent, not the binary expansion
        value = repr(value)
    elif not isinstance(value, int):
        raise ValidationError(f"{field_name} must be a number")
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a number")
    if not amount.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    return amount


def require_amount(value: Any, field_name: str, *, default: Optional[float] = None) -> float:
    """Money amount: a non-negative number with at most cents precision.

    Numeric strings from forms are accepted. Amounts must fit the DECIMAL(12, 2)
    columns unchanged, so extra decimal places or larger values are rejected.
    """
    if value is None and default is not None:
        return default
    amount = _to_decimal(value, field_name)
    if amount < 0:
        raise ValidationError(f"{field_name} must not be negative")
    if amount >= MAX_MONEY_AMOUNT:
        raise ValidationError(f"{field_name} must be less than {MAX_MONEY_AMOUNT}")
    if amount != amount.quantize(Decimal(1).scaleb(-MONEY_DECIMAL_PLACES)):
        raise ValidationError(f"{field_name} must have at most {MONEY_DECIMAL_PLACES} decimal places")
    return float(amount)


def require_int_range(value: Any, field_name: str, min_value: int, max_value: int) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ValidationError(f"{field_name} must be an integer")
    if not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer")
    if value < min_value or value > max_value:
        raise ValidationError(f"{field_name} must be between {min_value} and {max_value}")
    return value


def require_choice(value: Any, enum_cls: Type[E], field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")
