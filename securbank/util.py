"""
Display and validation helpers

Masking of account numbers, a lightweight email shape check and currency
formatting. Amounts are rounded through Decimal using the shortest decimal
form of the float, so 100.009 displays as 100.01 rather than following the
binary value down.
"""

from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Optional
import math
import re

_NON_DIGITS = re.compile(r'[^0-9]')

GROUP_SIZE = 4
GROUP_SEPARATOR = "-"
MASK_CHAR = "*"
SHORT_MASK = "****"
VISIBLE_DIGITS = 4

CENTS = Decimal('0.01')
# Wide enough for every finite float written out in full
_AMOUNT_CONTEXT = Context(prec=400)


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty or whitespace-only strings"""
    return value is None or not value.strip()


def normalize_digits(value: str) -> str:
    """Strip every character that is not an ASCII digit"""
    return _NON_DIGITS.sub('', value)


def group_characters(value: str, size: int = GROUP_SIZE,
                     separator: str = GROUP_SEPARATOR) -> str:
    """
    Insert a separator every `size` characters counting from the start.

    The last group is left short when the length is not a multiple of
    `size` (10 characters -> 4-4-2).
    """
    return separator.join(value[i:i + size] for i in range(0, len(value), size))


def mask_account_number(account_number: Optional[str]) -> str:
    """
    Mask an account number for display, keeping the last four digits.

    Args:
        account_number: Raw account number, may contain dashes or spaces

    Returns:
        "" for blank input, "****" when four or fewer digits remain,
        otherwise one "*" per hidden digit followed by the last four
        digits, grouped like "****-****-****-3456"
    """
    if is_blank(account_number):
        return ""

    digits = normalize_digits(account_number)
    if len(digits) <= VISIBLE_DIGITS:
        return SHORT_MASK

    hidden = len(digits) - VISIBLE_DIGITS
    masked = MASK_CHAR * hidden + digits[hidden:]
    return group_characters(masked)


def is_valid_email(email: Optional[str]) -> bool:
    """
    Check that an email has a plausible shape.

    Requires an "@" that is not the first character, a "." after it and at
    least five characters overall. Not a full address grammar.
    """
    if is_blank(email):
        return False

    trimmed = email.strip()
    at_index = trimmed.find("@")
    return (
        at_index > 0
        and "." in trimmed
        and trimmed.rfind(".") > at_index
        and len(trimmed) >= 5
    )


def format_amount(amount: float) -> str:
    """Round to two decimal places (half-up) and render without a symbol"""
    if not math.isfinite(amount):
        return "NaN" if math.isnan(amount) else ("Infinity" if amount > 0 else "-Infinity")

    rounded = Decimal(str(amount)).quantize(
        CENTS, rounding=ROUND_HALF_UP, context=_AMOUNT_CONTEXT
    )
    return f"{rounded:.2f}"


def format_currency(amount: float) -> str:
    """
    Format an amount for display as dollars.

    Negative amounts put the sign before the symbol: -$1234.56
    """
    sign = "-" if amount < 0 else ""
    return sign + "$" + format_amount(abs(amount))
