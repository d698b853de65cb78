"""
Pydantic models and enums shared by the converter, the CLI and the API.

A request is frozen once built: the digit strings it carries are exactly
what gets spelled, so nothing downstream may rewrite them.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, field_validator


# ─── Magnitude Categories ───────────────────────────────────────────


class MagnitudeCategory(IntEnum):
    """Digit-length bracket of a number.

    The value is the count of implied trailing zeros of the bracket's
    boundary, i.e. the boundary is ``10 ** category``.
    """

    UNITY = 0
    TEN = 1
    HUNDRED = 2
    THOUSAND = 3
    MILLION = 6
    THOUSAND_MILLIONS = 9  # 10^9
    BILLION = 12  # 10^12 (long scale)


# ─── Scale Mode ─────────────────────────────────────────────────────


class ScaleMode(str, Enum):
    """Naming convention for 10^9 and 10^12."""

    SHORT = "short"  # 10^9 = billion, 10^12 = trillion
    LONG = "long"  # 10^9 = thousand million, 10^12 = billion

    @classmethod
    def from_flag(cls, use_short_scale: bool) -> ScaleMode:
        return cls.SHORT if use_short_scale else cls.LONG


# ─── Request / Result ───────────────────────────────────────────────


class ConversionRequest(BaseModel):
    """A number reduced to exact decimal digit strings.

    ``fractional_digits`` is None for integer requests. Leading and trailing
    zeros in it are kept as given.
    """

    model_config = {"frozen": True}

    whole_digits: str
    fractional_digits: Optional[str] = None
    scale_mode: ScaleMode = ScaleMode.LONG

    @field_validator("whole_digits")
    @classmethod
    def _whole_is_digits(cls, value: str) -> str:
        if not value or not value.isdigit():
            raise ValueError(f"whole_digits must be a non-empty digit string, got {value!r}")
        return value

    @field_validator("fractional_digits")
    @classmethod
    def _fraction_is_digits(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value and not value.isdigit():
            raise ValueError(f"fractional_digits must contain only digits, got {value!r}")
        return value

    @property
    def is_decimal(self) -> bool:
        return self.fractional_digits is not None


class ConversionResult(BaseModel):
    """Outcome of spelling one request."""

    text: str
    is_supported: bool
    scale_mode: ScaleMode
    category: Optional[MagnitudeCategory] = None  # None when unsupported
