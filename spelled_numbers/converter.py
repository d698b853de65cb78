"""
Number → words conversion.

Flow:
    number ─► build_request() ─► limit check ─► resolve() ─► join_tokens()
                (exact digits)    (≤15 digits)   (tokens)      (text)

resolve() is the recursive core. For a number it either finds a single
word in the locale table, or splits the number at its scale boundary and
resolves the pieces:

    1234   → 1000 | 234              → "mil", "duzentos", "trinta", "quatro"
    21000  → 21 × 1000               → "vinte", "um", "mil"
    150    → 100 (prefix form) | 50  → "cento", "cinquenta"

Each call returns a fresh token list; callers concatenate. The scale mode
and word table travel in an immutable _Context. Nothing is kept in module
state, so convert() is safe to call from many threads at once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Sequence, Union

from .exceptions import (
    InvalidNumberError,
    MissingWordError,
    NegativeNumberError,
    NumberTooLargeError,
)
from .locales import PORTUGUESE, WordTable
from .magnitude import DIGIT_LIMIT, LARGEST_SUPPORTED, boundary, bridge, categorize, exceeds_limit
from .models import ConversionRequest, ConversionResult, MagnitudeCategory, ScaleMode

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal, str]

# Floats carry 15 reliable significant digits; "g" also drops trailing zeros.
_FLOAT_FORMAT = ".15g"


@dataclass(frozen=True)
class _Context:
    """Per-call settings threaded through the recursion."""

    words: WordTable
    scale_mode: ScaleMode


# ─── Number Decomposer ──────────────────────────────────────────────


def resolve(number: int, context: _Context, hundred_prefix: bool = False) -> list[str]:
    """Resolve a non-negative integer of at most 15 digits into word tokens."""
    category = categorize(number)

    word = context.words.lookup(
        category,
        number,
        scale_mode=context.scale_mode,
        hundred_prefix=hundred_prefix,
    )
    if word is not None:
        return [word]

    if category >= MagnitudeCategory.THOUSAND and number % boundary(category) == 0:
        scale = context.words.scale_words(category, context.scale_mode)
        return resolve(number // boundary(category), context) + [scale.plural]

    digits = str(number)
    split_at = bridge(number)
    first_digits = int(digits[:split_at] + "0" * category.value)
    other_digits = int(digits[split_at:] or "0")

    if first_digits == number:
        # Nothing left to split off: the table should have matched directly.
        logger.error("Locale %r has no word for %d", context.words.code, number)
        raise MissingWordError(
            f"Locale {context.words.code!r} has no word for {number}",
            details={"locale": context.words.code, "value": number, "category": category.name},
        )

    tokens = resolve(
        first_digits,
        context,
        hundred_prefix=category is MagnitudeCategory.HUNDRED and number != 100,
    )
    if other_digits:
        tokens += resolve(other_digits, context)
    return tokens


# ─── Token Joiner ───────────────────────────────────────────────────


def join_tokens(tokens: Sequence[str], words: WordTable) -> str:
    """Join tokens with the locale connective.

    Tokens in ``words.joinless`` (scale words such as "mil") follow the
    previous token with a plain space.
    """
    if not tokens:
        raise ValueError("Cannot join an empty token sequence")

    text = tokens[0]
    for token in tokens[1:]:
        if token in words.joinless:
            text += f" {token}"
        else:
            text += f" {words.connective} {token}"
    return text


def _spell_integer(number: int, context: _Context) -> str:
    return join_tokens(resolve(number, context), context.words)


# ─── Decimal Handler ────────────────────────────────────────────────


def resolve_decimal(whole_digits: str, fractional_digits: str, context: _Context) -> str:
    """Spell a decimal given as exact whole and fractional digit strings.

    Leading zeros of the fraction are spoken one by one, so "05" reads
    "zero cinco" and is never confused with "5".
    """
    text = _spell_integer(int(whole_digits), context)

    if not fractional_digits or int(fractional_digits) == 0:
        return text

    significant = fractional_digits.lstrip("0")
    leading_zeros = len(fractional_digits) - len(significant)

    parts = [text, context.words.decimal_separator]
    parts.extend([context.words.zero] * leading_zeros)
    parts.append(_spell_integer(int(significant), context))
    return " ".join(parts)


# ─── Input Normalization ────────────────────────────────────────────


def _to_decimal(number: Number) -> Decimal:
    """Turn any accepted input into an exact Decimal.

    Floats are read to 15 significant digits, so 0.1 + 0.2 is 0.3 and
    never its binary expansion 0.30000000000000004.
    """
    if isinstance(number, bool):
        raise InvalidNumberError(
            f"Booleans are not numbers: {number!r}", details={"value": number}
        )
    if isinstance(number, Decimal):
        value = number
    elif isinstance(number, float):
        value = Decimal(format(number, _FLOAT_FORMAT))
    elif isinstance(number, int):
        value = Decimal(number)
    elif isinstance(number, str):
        text = number.strip().replace("_", "")
        try:
            value = Decimal(text)
        except InvalidOperation:
            raise InvalidNumberError(
                f"Not a decimal number: {number!r}", details={"value": number}
            ) from None
    else:
        raise InvalidNumberError(
            f"Unsupported input type {type(number).__name__}",
            details={"type": type(number).__name__},
        )

    if not value.is_finite():
        raise InvalidNumberError(f"Not a finite number: {number!r}", details={"value": str(number)})
    if value < 0:
        raise NegativeNumberError(
            f"Negative numbers are not supported: {number!r}", details={"value": str(number)}
        )
    return value.copy_abs()  # drops the sign of -0 without rounding


def _digit_counts(value: Decimal) -> tuple[int, int]:
    """(whole, fractional) digit counts of ``value`` written positionally."""
    exponent = value.as_tuple().exponent
    whole = value.adjusted() + 1 if value else 1
    return max(whole, 1), max(-exponent, 0)


def _too_large(number: Number, whole: Optional[int], fractional: int) -> NumberTooLargeError:
    return NumberTooLargeError(
        f"Input exceeds the {DIGIT_LIMIT}-digit limit",
        details={"type": type(number).__name__, "whole_digits": whole, "fractional_digits": fractional},
    )


def build_request(number: Number, use_short_scale: bool = False) -> ConversionRequest:
    """Reduce ``number`` to exact digit strings.

    ints give an integer request. Decimals, floats and strings give a
    decimal request unless their text has no fractional part at all.

    Raises:
        NumberTooLargeError: If the whole or fractional part has more than
            15 digits. Checked before any digits are written out.
    """
    scale_mode = ScaleMode.from_flag(use_short_scale)

    if isinstance(number, int) and not isinstance(number, bool):
        if number < 0:
            raise NegativeNumberError(
                f"Negative numbers are not supported: {number}", details={"value": number}
            )
        if number > LARGEST_SUPPORTED:
            raise _too_large(number, None, 0)  # too long to write out
        return ConversionRequest(whole_digits=str(number), scale_mode=scale_mode)

    value = _to_decimal(number)
    whole_count, fractional_count = _digit_counts(value)
    if exceeds_limit(whole_count) or exceeds_limit(fractional_count):
        raise _too_large(number, whole_count, fractional_count)

    text = format(value, "f")
    whole, _, fraction = text.partition(".")
    return ConversionRequest(
        whole_digits=whole,
        fractional_digits=fraction if "." in text else None,
        scale_mode=scale_mode,
    )


# ─── Entry Points ───────────────────────────────────────────────────


def spell(request: ConversionRequest, words: Optional[WordTable] = None) -> ConversionResult:
    """Spell a prepared request.

    Returns an unsupported result (text = the locale's unsupported message)
    when the whole or the fractional part has more than 15 digits.
    """
    words = words or PORTUGUESE
    whole = request.whole_digits.lstrip("0") or "0"

    too_long = exceeds_limit(len(whole))
    if request.is_decimal:
        too_long = too_long or exceeds_limit(len(request.fractional_digits))

    if too_long:
        logger.info(
            "Unsupported input: %d whole / %s fractional digits",
            len(whole),
            len(request.fractional_digits) if request.fractional_digits is not None else "no",
        )
        return ConversionResult(
            text=words.unsupported,
            is_supported=False,
            scale_mode=request.scale_mode,
        )

    context = _Context(words=words, scale_mode=request.scale_mode)
    if request.is_decimal:
        text = resolve_decimal(whole, request.fractional_digits, context)
    else:
        text = _spell_integer(int(whole), context)

    return ConversionResult(
        text=text,
        is_supported=True,
        scale_mode=request.scale_mode,
        category=categorize(int(whole)),
    )


def spell_number(
    number: Number,
    use_short_scale: bool = False,
    words: Optional[WordTable] = None,
) -> ConversionResult:
    """build_request() and spell() in one step.

    Inputs past the digit limit give the unsupported result instead of
    raising NumberTooLargeError.
    """
    words = words or PORTUGUESE
    try:
        request = build_request(number, use_short_scale)
    except NumberTooLargeError as e:
        logger.info("Unsupported input: %s", e.details)
        return ConversionResult(
            text=words.unsupported,
            is_supported=False,
            scale_mode=ScaleMode.from_flag(use_short_scale),
        )
    return spell(request, words)


def convert(
    number: Number,
    use_short_scale: bool = False,
    words: Optional[WordTable] = None,
) -> str:
    """Spell out ``number``.

    Args:
        number: int, Decimal, float or a decimal string such as "1234.05".
        use_short_scale: Name 10^9 "bilião" and 10^12 "trilião" instead of
            "mil milhões" and "bilião".
        words: Word table to use; Portuguese when omitted.

    Returns:
        The spelled text, or ``words.unsupported`` when the whole or the
        fractional part has more than 15 digits.

    Raises:
        InvalidNumberError: For NaN, infinity, booleans or malformed strings.
        NegativeNumberError: For values below zero.
    """
    return spell_number(number, use_short_scale, words).text
