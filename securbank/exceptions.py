"""
Exception types raised by SecurBank services
"""


class SecurBankError(Exception):
    """Base class for all SecurBank errors"""

    code = "securbank_error"


class InvalidArgumentError(SecurBankError, ValueError):
    """A caller supplied a value outside an operation's precondition"""

    code = "invalid_argument"


class PdfGenerationError(SecurBankError):
    """The forms output service could not produce a PDF"""

    code = "pdf_generation_failed"
