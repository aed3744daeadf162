from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, AnyUrl, BaseModel, TypeAdapter, ValidationError, model_validator

# Every optional flag and the value it takes when the caller leaves it out
FLAG_DEFAULTS = {
    "is_featured": False,
    "is_new": False,
    "is_active": True,
}

CENTS = Decimal("0.01")
# NUMERIC(10, 2) holds at most 99,999,999.99
MAX_PRICE = Decimal("100000000")

_url_adapter = TypeAdapter(AnyUrl)


def validate_url(value: str) -> str:
    # Check the shape but keep the caller's string as-is
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError(f"{value!r} is not a valid URL")
    return value


UrlStr = Annotated[str, AfterValidator(validate_url)]


def to_money(value: Any) -> Optional[Decimal]:
    """Quantize a monetary amount the way a NUMERIC(10, 2) column stores it."""
    if value is None:
        return None
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def to_number(value: Any) -> Optional[float]:
    if value is None:
        return None
    return float(value)


class FlagDefaultsModel(BaseModel):
    """Input model that fills absent or null flags from FLAG_DEFAULTS."""

    @model_validator(mode="before")
    @classmethod
    def apply_flag_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for flag, default in FLAG_DEFAULTS.items():
            if flag in cls.model_fields and data.get(flag) is None:
                data[flag] = default
        return data
