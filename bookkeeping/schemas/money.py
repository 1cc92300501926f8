"""
Shared annotated types for amounts in API responses.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# Decimal in Python, a plain number in JSON (clients do arithmetic on it)
Money = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]
