"""
Customer contact endpoints
"""

from fastapi import APIRouter, Depends

from .dependencies import SecurBankSystem, get_system
from .schemas import EmailRequest, EmailValidationResponse


router = APIRouter()


@router.post("/email/validate", response_model=EmailValidationResponse)
async def validate_email(
    request: EmailRequest,
    system: SecurBankSystem = Depends(get_system)
):
    """Check that an email address has a plausible shape"""
    return EmailValidationResponse(
        email=request.email,
        valid=system.account_service.is_valid_email(request.email)
    )
