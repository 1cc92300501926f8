"""
Pydantic schemas for the depreciation calculator.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from bookkeeping.schemas.money import Money


class DepreciationRequest(BaseModel):
    asset_value: Decimal = Field(gt=0)
    life_years: int = Field(gt=0)
    salvage: Decimal = Field(default=Decimal("0"), ge=0)


class DepreciationRow(BaseModel):
    """One year of a straight-line schedule, amounts rounded to cents."""
    year: int
    expense: Money
    accum: Money
    book_value: Money


class DepreciationResponse(BaseModel):
    schedule: list[DepreciationRow]
