"""
Spelled Numbers — write integers and exact decimals out in words.

Architecture: Classify magnitude → Split at scale boundary → Resolve tokens → Join
Scales:       Long (mil milhões, bilião) and short (bilião, trilião), chosen per call.
"""

from .converter import build_request, convert, join_tokens, spell, spell_number
from .exceptions import (
    InvalidNumberError,
    MissingWordError,
    NegativeNumberError,
    NumberTooLargeError,
    SpellingError,
    UnknownLocaleError,
)
from .locales import LOCALES, PORTUGUESE, ScaleWords, WordTable, get_locale
from .models import ConversionRequest, ConversionResult, MagnitudeCategory, ScaleMode

__version__ = "1.0.0"

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "InvalidNumberError",
    "LOCALES",
    "MagnitudeCategory",
    "MissingWordError",
    "NegativeNumberError",
    "NumberTooLargeError",
    "PORTUGUESE",
    "ScaleMode",
    "ScaleWords",
    "SpellingError",
    "UnknownLocaleError",
    "WordTable",
    "build_request",
    "convert",
    "get_locale",
    "join_tokens",
    "spell",
    "spell_number",
]
