"""
Spelled Numbers — FastAPI Server
================================

HTTP wrapper around the number speller.

Endpoints:
    POST /convert            Spell one number
    GET  /convert/{number}   Spell one number (path form)
    POST /convert/batch      Spell many numbers concurrently
    GET  /health             Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from spelled_numbers import __version__
from spelled_numbers.converter import spell_number
from spelled_numbers.exceptions import SpellingError
from spelled_numbers.locales import LOCALES, get_locale
from spelled_numbers.models import ConversionResult, MagnitudeCategory, ScaleMode
from spelled_numbers.settings import load_settings

logger = logging.getLogger(__name__)

settings = load_settings()


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Spelled Numbers API",
    description=(
        "Write integers and exact decimals out in words. "
        "Long or short scale per request, digit limit of 15 per part."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────

NumberIn = Union[int, float, str]

MAX_BATCH_SIZE = 1000


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    number: NumberIn = Field(
        ...,
        description="Integer, decimal, or decimal string. Send strings to keep trailing zeros.",
        json_schema_extra={"example": "1234.05"},
    )
    short_scale: Optional[bool] = Field(
        default=None, description="Short-scale names for 10^9 and 10^12. Server default if omitted."
    )
    locale: Optional[str] = Field(default=None, description="Word table code. Server default if omitted.")


class BatchConvertRequest(BaseModel):
    """Request body for the /convert/batch endpoint."""

    numbers: list[NumberIn] = Field(..., min_length=1, max_length=MAX_BATCH_SIZE)
    short_scale: Optional[bool] = None
    locale: Optional[str] = None


class ConvertResponse(BaseModel):
    number: str
    text: str
    is_supported: bool
    scale_mode: ScaleMode
    category: Optional[MagnitudeCategory] = None

    model_config = {"json_schema_extra": {"example": {
        "number": "1234.05",
        "text": "mil e duzentos e trinta e quatro vírgula zero cinco",
        "is_supported": True,
        "scale_mode": "long",
        "category": 3,
    }}}


class BatchConvertResponse(BaseModel):
    results: list[ConvertResponse]


class HealthResponse(BaseModel):
    status: str
    version: str
    locales: list[str]
    descriptions: dict[str, str]


# ─── Helpers ─────────────────────────────────────────────────────────


def _spell_one(number: NumberIn, short_scale: Optional[bool], locale: Optional[str]) -> ConvertResponse:
    """Spell a number, mapping conversion errors to HTTP 422."""
    use_short_scale = settings.short_scale if short_scale is None else short_scale
    try:
        words = get_locale(locale or settings.locale)
        result: ConversionResult = spell_number(number, use_short_scale, words)
    except SpellingError as e:
        logger.info("Rejected %r: %s", number, e)
        raise HTTPException(status_code=422, detail={"code": e.code, "message": str(e)})

    return ConvertResponse(
        number=str(number),
        text=result.text,
        is_supported=result.is_supported,
        scale_mode=result.scale_mode,
        category=result.category,
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Spell out a number",
    tags=["Conversion"],
    responses={422: {"description": "Negative, malformed, or unknown locale"}},
)
def convert_number(request: ConvertRequest) -> ConvertResponse:
    """Spell one number.

    Inputs past 15 whole or fractional digits are not an error: the
    response has **is_supported** `false` and the locale's unsupported
    message as **text**.
    """
    return _spell_one(request.number, request.short_scale, request.locale)


@app.get(
    "/convert/{number}",
    summary="Spell out a number given in the path",
    tags=["Conversion"],
    responses={422: {"description": "Negative, malformed, or unknown locale"}},
)
def convert_number_path(
    number: str, short_scale: Optional[bool] = None, locale: Optional[str] = None
) -> ConvertResponse:
    """Path form of POST /convert. The number is read as exact decimal text."""
    return _spell_one(number, short_scale, locale)


@app.post(
    "/convert/batch",
    summary="Spell out many numbers",
    tags=["Conversion"],
    responses={422: {"description": "Any number is negative or malformed, or unknown locale"}},
)
async def convert_batch(request: BatchConvertRequest) -> BatchConvertResponse:
    """Spell every number in worker threads. Results keep request order."""
    results = await asyncio.gather(*(
        asyncio.to_thread(_spell_one, number, request.short_scale, request.locale)
        for number in request.numbers
    ))
    return BatchConvertResponse(results=list(results))


@app.get("/health", summary="Health check", tags=["System"])
def health_check() -> HealthResponse:
    """Returns service status and the available locales."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        locales=sorted(LOCALES),
        descriptions={code: words.description for code, words in LOCALES.items()},
    )
