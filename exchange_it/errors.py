"""
Exception taxonomy for ledger operations.

Amount and currency errors are also ValueErrors so callers that only
know about ValueError still catch them.
"""

from decimal import Decimal
from typing import Any


class ExchangeItError(Exception):
    """Base class for all library errors"""


class InvalidAmount(ExchangeItError, ValueError):
    """Amount is not a strictly positive number"""
    
    def __init__(self, amount: Any, message: str = "Amount must be positive!"):
        self.amount = amount
        super().__init__(message)


class InsufficientFunds(ExchangeItError, ValueError):
    """Withdrawal exceeds the available balance"""
    
    def __init__(self, available: Decimal, requested: Decimal):
        self.available = available
        self.requested = requested
        super().__init__(f"Available: {available} but tried to withdraw {requested}")


class UnsupportedCurrency(ExchangeItError, ValueError):
    """Currency code is not a known ISO 4217 code"""
    
    def __init__(self, code: Any):
        self.code = code
        super().__init__(f"Unsupported currency: {code!r}")


class ConversionUnavailable(ExchangeItError, LookupError):
    """No converter, or no exchange rate, for the requested conversion"""
