"""
Account Number Service Module

Validation and display formatting of bank account numbers and simple
interest calculation. Every operation is a pure function of its inputs;
a single SecurBankService instance can be shared freely between threads.
"""

from typing import Optional
import math

from .exceptions import InvalidArgumentError
from . import util


MIN_ACCOUNT_LENGTH = 8
MAX_ACCOUNT_LENGTH = 16
MIN_FORMAT_LENGTH = 4


class SecurBankService:
    """
    Account number and interest operations used when preparing customer
    documents.

    The masking, email and currency helpers live in `securbank.util` and are
    re-exposed here so callers can depend on a single object.
    """

    def __init__(
        self,
        min_account_length: int = MIN_ACCOUNT_LENGTH,
        max_account_length: int = MAX_ACCOUNT_LENGTH
    ):
        if min_account_length > max_account_length:
            raise InvalidArgumentError("Minimum account length cannot exceed maximum account length")
        self.min_account_length = min_account_length
        self.max_account_length = max_account_length

    def validate_account_number(self, account_number: Optional[str]) -> bool:
        """
        Validate a bank account number.

        Punctuation is ignored; only the number of digits matters.

        Args:
            account_number: Account number as entered, may contain dashes

        Returns:
            True if the digit count is within the allowed range
        """
        if util.is_blank(account_number):
            return False

        digits = util.normalize_digits(account_number)
        return self.min_account_length <= len(digits) <= self.max_account_length

    def format_account_number(self, account_number: Optional[str]) -> str:
        """
        Format an account number as XXXX-XXXX-XXXX-XXXX.

        Existing punctuation is discarded first, so formatting an already
        formatted number returns it unchanged. Fewer than four digits are
        returned as-is.
        """
        if util.is_blank(account_number):
            return ""

        digits = util.normalize_digits(account_number)
        if len(digits) < MIN_FORMAT_LENGTH:
            return digits

        return util.group_characters(digits)

    def mask_account_number(self, account_number: Optional[str]) -> str:
        return util.mask_account_number(account_number)

    def calculate_interest(self, principal: float, rate: float, years: int) -> float:
        """
        Calculate simple interest: I = P * r * t

        Args:
            principal: Principal amount
            rate: Annual rate as a decimal (0.05 for 5%)
            years: Number of years

        Returns:
            Interest earned over the whole term

        Raises:
            InvalidArgumentError: If any argument is negative
        """
        if principal < 0 or rate < 0 or years < 0:
            raise InvalidArgumentError("Principal, rate, and years must be non-negative")

        try:
            return float(principal * rate * years)
        except OverflowError:
            # Integer inputs beyond float range
            if principal == 0 or rate == 0 or years == 0:
                return 0.0
            return math.inf

    def is_valid_email(self, email: Optional[str]) -> bool:
        return util.is_valid_email(email)

    def format_currency(self, amount: float) -> str:
        return util.format_currency(amount)
