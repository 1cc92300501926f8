"""
Depreciation API endpoint.

No database access; the schedule is computed on each request.
"""

from fastapi import APIRouter, HTTPException

from bookkeeping.services.depreciation import straight_line_schedule
from bookkeeping.schemas.depreciation import (
    DepreciationRequest,
    DepreciationResponse,
)

router = APIRouter(tags=["Depreciation"])


@router.post("/depreciation", response_model=DepreciationResponse)
def depreciation_schedule(request: DepreciationRequest):
    """Straight-line schedule for the given asset."""
    try:
        schedule = straight_line_schedule(
            request.asset_value,
            request.life_years,
            request.salvage,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return DepreciationResponse(schedule=schedule)
