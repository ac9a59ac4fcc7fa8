"""
Account number endpoints
"""

from fastapi import APIRouter, Depends

from .dependencies import SecurBankSystem, get_system
from .schemas import (
    AccountNumberRequest, AccountValidationResponse,
    AccountFormatResponse, AccountMaskResponse
)


router = APIRouter()


@router.post("/validate", response_model=AccountValidationResponse)
async def validate_account_number(
    request: AccountNumberRequest,
    system: SecurBankSystem = Depends(get_system)
):
    """Check that an account number has between 8 and 16 digits"""
    return AccountValidationResponse(
        account_number=request.account_number,
        valid=system.account_service.validate_account_number(request.account_number)
    )


@router.post("/format", response_model=AccountFormatResponse)
async def format_account_number(
    request: AccountNumberRequest,
    system: SecurBankSystem = Depends(get_system)
):
    """Format an account number as XXXX-XXXX-XXXX-XXXX"""
    return AccountFormatResponse(
        account_number=request.account_number,
        formatted=system.account_service.format_account_number(request.account_number)
    )


@router.post("/mask", response_model=AccountMaskResponse)
async def mask_account_number(
    request: AccountNumberRequest,
    system: SecurBankSystem = Depends(get_system)
):
    """Mask all but the last four digits of an account number"""
    # The unmasked number is deliberately not echoed back
    return AccountMaskResponse(
        masked=system.account_service.mask_account_number(request.account_number)
    )
