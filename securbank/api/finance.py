"""
Interest and currency endpoints
"""

import math

from fastapi import APIRouter, Depends, Query

from .dependencies import SecurBankSystem, get_system
from .schemas import InterestRequest, InterestResponse, CurrencyResponse, ErrorResponse


router = APIRouter()


@router.post(
    "/interest",
    response_model=InterestResponse,
    responses={400: {"model": ErrorResponse}}
)
async def calculate_interest(
    request: InterestRequest,
    system: SecurBankSystem = Depends(get_system)
):
    """Calculate simple interest. Negative inputs are rejected with 400."""
    interest = system.account_service.calculate_interest(
        request.principal, request.rate, request.years
    )
    
    return InterestResponse(
        principal=request.principal,
        rate=request.rate,
        years=request.years,
        interest=interest if math.isfinite(interest) else None,
        formatted_interest=system.account_service.format_currency(interest)
    )


@router.get("/currency", response_model=CurrencyResponse)
async def format_currency(
    amount: float = Query(..., allow_inf_nan=False),
    system: SecurBankSystem = Depends(get_system)
):
    """Format an amount as dollars, e.g. -$1234.56"""
    return CurrencyResponse(
        amount=amount,
        formatted=system.account_service.format_currency(amount)
    )
