"""
Exchange It

A small ledger library: users, name-derived account identifiers, and
accounts with guarded deposit, withdraw and transfer operations using
Decimal arithmetic.
"""

__version__ = "1.0.0"

from .errors import (
    ExchangeItError, InvalidAmount, InsufficientFunds,
    UnsupportedCurrency, ConversionUnavailable
)
from .user import User
from .uid import generate_uid
from .currency import Currency, ExchangeRate, RateTableConverter
from .account import Account

__all__ = [
    "Account", "User", "generate_uid",
    "Currency", "ExchangeRate", "RateTableConverter",
    "ExchangeItError", "InvalidAmount", "InsufficientFunds",
    "UnsupportedCurrency", "ConversionUnavailable",
]
