"""
Calculator API routes.

Exposes every registered calculator as ``POST /api/calculators/{slug}``.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from calcdeck import registry
from calcdeck.api.deps import get_catalog
from calcdeck.api.schemas import (
    CalculationErrorModel,
    CalculationResponse,
    CalculatorDetail,
    CalculatorListResponse,
    CalculatorSummary,
    ErrorResponse,
)
from calcdeck.domain.errors import CalculationError
from calcdeck.tables import TableCatalog

router = APIRouter()


# --- Helper Functions ---


def _summary(calculator: registry.Calculator) -> CalculatorSummary:
    return CalculatorSummary(
        slug=calculator.slug, title=calculator.title, category=calculator.category
    )


def _serialize_errors(errors: list[CalculationError]) -> list[dict[str, Any]]:
    return [
        CalculationErrorModel(code=e.code.value, message=e.message, field=e.field).model_dump()
        for e in errors
    ]


def _lookup(slug: str) -> registry.Calculator:
    try:
        return registry.get_calculator(slug)
    except registry.UnknownCalculatorError:
        raise HTTPException(status_code=404, detail="Calculator not found") from None


# --- Routes ---


@router.get("", response_model=CalculatorListResponse)
def list_calculators() -> CalculatorListResponse:
    """List all calculators."""
    calculators = [_summary(c) for c in registry.list_calculators()]
    return CalculatorListResponse(calculators=calculators, count=len(calculators))


@router.get(
    "/{slug}",
    response_model=CalculatorDetail,
    responses={404: {"description": "Calculator not found"}},
)
def get_calculator(slug: str) -> CalculatorDetail:
    """Get a calculator's metadata and input schema."""
    calculator = _lookup(slug)
    return CalculatorDetail(
        **_summary(calculator).model_dump(),
        input_schema=registry.input_schema(slug),
    )


@router.post(
    "/{slug}",
    response_model=CalculationResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"description": "Calculator not found"},
    },
)
def run_calculator(
    slug: str,
    payload: dict[str, Any] = Body(...),
    catalog: TableCatalog = Depends(get_catalog),
) -> CalculationResponse:
    """
    Run a calculator.

    Payloads that do not match the input shape are rejected with 422.
    Inputs that are well-formed but out of range return 400 with the
    calculation errors.
    """
    _lookup(slug)

    try:
        output = registry.run_calculator(slug, payload, tables=catalog)
    except ValidationError as e:
        raise RequestValidationError(
            e.errors(include_url=False, include_context=False), body=payload
        ) from e

    if not output.success:
        raise HTTPException(
            status_code=400,
            detail={"errors": _serialize_errors(output.errors)},
        )

    assert output.result is not None
    return CalculationResponse(slug=slug, result=asdict(output.result))
