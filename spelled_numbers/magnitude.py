"""
Magnitude classification: digit counts, categories and split points.

Every function here is pure arithmetic on a non-negative integer. The
converter relies on two facts:
  - categorize() depends only on the number of digits.
  - bridge() always leaves at least one digit on each side of the split
    for numbers that are not a single digit.
"""

from __future__ import annotations

from .exceptions import NumberTooLargeError
from .models import MagnitudeCategory

# Most digits any category covers; longer inputs are unsupported.
DIGIT_LIMIT = 15
LARGEST_SUPPORTED = 10**DIGIT_LIMIT - 1

# (largest digit count, category), ascending
_DIGIT_BRACKETS: tuple[tuple[int, MagnitudeCategory], ...] = (
    (1, MagnitudeCategory.UNITY),
    (2, MagnitudeCategory.TEN),
    (3, MagnitudeCategory.HUNDRED),
    (6, MagnitudeCategory.THOUSAND),
    (9, MagnitudeCategory.MILLION),
    (12, MagnitudeCategory.THOUSAND_MILLIONS),
    (DIGIT_LIMIT, MagnitudeCategory.BILLION),
)


def number_of_digits(number: int) -> int:
    """Decimal digits of ``abs(number)``. Zero has one digit."""
    return len(str(abs(number)))


def categorize(number: int) -> MagnitudeCategory:
    """Classify a number by its digit count.

    Raises:
        NumberTooLargeError: If the number has more than DIGIT_LIMIT digits.
    """
    digits = number_of_digits(number)
    for max_digits, category in _DIGIT_BRACKETS:
        if digits <= max_digits:
            return category
    raise NumberTooLargeError(
        f"{digits}-digit numbers exceed the {DIGIT_LIMIT}-digit limit",
        details={"digits": digits, "limit": DIGIT_LIMIT},
    )


def bridge(number: int) -> int:
    """Index in ``str(number)`` where the coefficient ends.

    e.g. 12345 is a Thousand: bridge is 2, so "12" scales to 12000 and
    "345" is the remainder.
    """
    return number_of_digits(number) - categorize(number).value


def boundary(category: MagnitudeCategory) -> int:
    """Smallest number in the category, also its scale unit."""
    return 10 ** category.value


def exceeds_limit(digit_count: int) -> bool:
    return digit_count > DIGIT_LIMIT
