"""
Locale word tables.

A WordTable is pure data plus two lookups. The converter never hardcodes a
word: units, tens, hundreds, scale words, the connective, the decimal
separator and the unsupported message all come from here.

Tables are built once at import and are read-only afterwards (mappings are
wrapped in MappingProxyType, sets are frozensets), so one table can serve any
number of concurrent conversions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .exceptions import MissingWordError, UnknownLocaleError
from .models import MagnitudeCategory, ScaleMode


# ─── Data Structures ────────────────────────────────────────────────


@dataclass(frozen=True)
class ScaleWords:
    """Words for one scale boundary."""

    singular: str  # the boundary alone, e.g. "um milhão"
    plural: str  # after a coefficient, e.g. "milhões"


@dataclass(frozen=True)
class WordTable:
    """Everything the converter needs to spell numbers in one language."""

    code: str
    unities: Mapping[int, str]  # 0-9
    tens: Mapping[int, str]  # 10-19 and multiples of ten
    hundreds: Mapping[int, str]  # 200-900
    bare_hundred: str  # 100 with nothing after it
    hundred_prefix: str  # 100 followed by tens/units
    scales: Mapping[tuple[MagnitudeCategory, ScaleMode], ScaleWords]
    connective: str
    decimal_separator: str
    joinless: frozenset[str]  # tokens that attach without the connective
    unsupported: str
    description: str = field(default="", compare=False)

    @property
    def zero(self) -> str:
        return self.unities[0]

    def scale_words(self, category: MagnitudeCategory, scale_mode: ScaleMode) -> ScaleWords:
        try:
            return self.scales[(category, scale_mode)]
        except KeyError:
            raise MissingWordError(
                f"Locale {self.code!r} has no scale words for {category.name} ({scale_mode.value})",
                details={"locale": self.code, "category": category.name, "scale_mode": scale_mode.value},
            ) from None

    def lookup(
        self,
        category: MagnitudeCategory,
        value: int,
        *,
        scale_mode: ScaleMode = ScaleMode.LONG,
        hundred_prefix: bool = False,
    ) -> Optional[str]:
        """Return the single word for ``value``, or None if it has none.

        Scale categories only map their exact boundary (10^3, 10^6, ...).
        """
        if category is MagnitudeCategory.UNITY:
            return self.unities.get(value)
        if category is MagnitudeCategory.TEN:
            return self.tens.get(value)
        if category is MagnitudeCategory.HUNDRED:
            if value == 100:
                return self.hundred_prefix if hundred_prefix else self.bare_hundred
            return self.hundreds.get(value)
        if value == 10 ** category.value:
            return self.scale_words(category, scale_mode).singular
        return None


# ─── Portuguese ─────────────────────────────────────────────────────

_PT_THOUSAND = ScaleWords("mil", "mil")
_PT_MILLION = ScaleWords("um milhão", "milhões")
_PT_THOUSAND_MILLION = ScaleWords("mil milhões", "mil milhões")
_PT_BILLION = ScaleWords("um bilião", "biliões")
_PT_TRILLION = ScaleWords("um trilião", "triliões")

PORTUGUESE = WordTable(
    code="pt",
    description="Portuguese (European/Angolan usage)",
    unities=MappingProxyType({
        0: "zero",
        1: "um",
        2: "dois",
        3: "três",
        4: "quatro",
        5: "cinco",
        6: "seis",
        7: "sete",
        8: "oito",
        9: "nove",
    }),
    tens=MappingProxyType({
        10: "dez",
        11: "onze",
        12: "doze",
        13: "treze",
        14: "catorze",
        15: "quinze",
        16: "dezasseis",
        17: "dezassete",
        18: "dezoito",
        19: "dezanove",
        20: "vinte",
        30: "trinta",
        40: "quarenta",
        50: "cinquenta",
        60: "sessenta",
        70: "setenta",
        80: "oitenta",
        90: "noventa",
    }),
    hundreds=MappingProxyType({
        200: "duzentos",
        300: "trezentos",
        400: "quatrocentos",
        500: "quinhentos",
        600: "seiscentos",
        700: "setecentos",
        800: "oitocentos",
        900: "novecentos",
    }),
    bare_hundred="cem",
    hundred_prefix="cento",
    scales=MappingProxyType({
        (MagnitudeCategory.THOUSAND, ScaleMode.LONG): _PT_THOUSAND,
        (MagnitudeCategory.THOUSAND, ScaleMode.SHORT): _PT_THOUSAND,
        (MagnitudeCategory.MILLION, ScaleMode.LONG): _PT_MILLION,
        (MagnitudeCategory.MILLION, ScaleMode.SHORT): _PT_MILLION,
        (MagnitudeCategory.THOUSAND_MILLIONS, ScaleMode.LONG): _PT_THOUSAND_MILLION,
        (MagnitudeCategory.THOUSAND_MILLIONS, ScaleMode.SHORT): _PT_BILLION,
        (MagnitudeCategory.BILLION, ScaleMode.LONG): _PT_BILLION,
        (MagnitudeCategory.BILLION, ScaleMode.SHORT): _PT_TRILLION,
    }),
    connective="e",
    decimal_separator="vírgula",
    joinless=frozenset({"mil", "milhões", "mil milhões", "biliões", "triliões"}),
    unsupported="Número não suportado",
)


# ─── Registry ───────────────────────────────────────────────────────

LOCALES: Mapping[str, WordTable] = MappingProxyType({
    PORTUGUESE.code: PORTUGUESE,
})

DEFAULT_LOCALE = PORTUGUESE.code


def get_locale(code: str) -> WordTable:
    """Return the registered word table for ``code`` (case-insensitive)."""
    try:
        return LOCALES[code.strip().lower()]
    except KeyError:
        raise UnknownLocaleError(
            f"No word table registered for locale {code!r}",
            details={"requested": code, "available": sorted(LOCALES)},
        ) from None
