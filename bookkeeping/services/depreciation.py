"""
Straight-line depreciation schedule.

Pure calculation, no database access. Every monetary value is
quantized to cents with ROUND_HALF_UP. The annual charge and the
accumulated amount are carried unrounded between years, so
rounding never compounds.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

from bookkeeping.errors import InvalidInputError

CENT = Decimal("0.01")


def _money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _to_decimal(value, field: str) -> Decimal:
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise InvalidInputError(f"{field} must be a number") from e


def straight_line_schedule(asset_value, life_years, salvage=0) -> list[dict]:
    """
    Return one row per year: year, expense, accum, book_value.

    annual     = (asset_value - salvage) / life_years
    accum      = annual * year
    book_value = max(0, asset_value - accum)
    """
    if asset_value is None or life_years is None:
        raise InvalidInputError("asset_value and life_years required")
    if isinstance(life_years, bool) or not isinstance(life_years, int):
        raise InvalidInputError("life_years must be a whole number of years")

    value = _to_decimal(asset_value, "asset_value")
    salvage_value = _to_decimal(salvage or 0, "salvage")

    if value <= 0:
        raise InvalidInputError("asset_value must be positive")
    if life_years <= 0:
        raise InvalidInputError("life_years must be positive")
    if salvage_value < 0:
        raise InvalidInputError("salvage cannot be negative")
    if salvage_value > value:
        raise InvalidInputError("salvage cannot exceed asset_value")

    annual = (value - salvage_value) / life_years
    schedule = []
    for year in range(1, life_years + 1):
        accum = annual * year
        schedule.append({
            "year": year,
            "expense": _money(annual),
            "accum": _money(accum),
            "book_value": _money(max(Decimal("0"), value - accum)),
        })
    return schedule
