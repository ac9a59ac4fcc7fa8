"""
Pydantic schemas for API requests and responses
"""

from typing import Optional
from pydantic import BaseModel, Field


class AccountNumberRequest(BaseModel):
    account_number: Optional[str] = Field(None, description="Account number, dashes and spaces allowed")


class AccountValidationResponse(BaseModel):
    account_number: Optional[str] = None
    valid: bool


class AccountFormatResponse(BaseModel):
    account_number: Optional[str] = None
    formatted: str


class AccountMaskResponse(BaseModel):
    masked: str


class InterestRequest(BaseModel):
    principal: float = Field(..., allow_inf_nan=False)
    rate: float = Field(..., allow_inf_nan=False, description="Annual rate as a decimal, e.g. 0.05 for 5%")
    years: int


class InterestResponse(BaseModel):
    principal: float
    rate: float
    years: int
    interest: Optional[float] = Field(None, description="None when the result overflows")
    formatted_interest: str


class CurrencyResponse(BaseModel):
    amount: float
    formatted: str


class EmailRequest(BaseModel):
    email: Optional[str] = None


class EmailValidationResponse(BaseModel):
    email: Optional[str] = None
    valid: bool


class ErrorResponse(BaseModel):
    error: str
    code: Optional[str] = None
