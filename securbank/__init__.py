"""
SecurBank Services

Account number validation, formatting and masking, simple interest and
currency display helpers, plus a thin PDF generation layer that hands
XDP templates and form data to an external forms output service.
"""

__version__ = "1.0.0"
