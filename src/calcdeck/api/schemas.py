from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CalculatorSummary(BaseModel):
    slug: str
    title: str
    category: str


class CalculatorListResponse(BaseModel):
    calculators: list[CalculatorSummary]
    count: int


class CalculatorDetail(CalculatorSummary):
    input_schema: dict[str, Any] = Field(..., description="JSON schema of the request body")


class CalculationErrorModel(BaseModel):
    code: str
    message: str
    field: str | None = None


class ErrorResponse(BaseModel):
    """Body of a 400 response; returned under ``detail``."""

    errors: list[CalculationErrorModel]


class CalculationResponse(BaseModel):
    slug: str
    result: dict[str, Any]
