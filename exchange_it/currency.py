"""
Currency Conversion Module

Currency codes with their minor-unit precision, the conversion contract
accounts call during converted transfers, and a converter backed by a
caller-populated table of exchange rates. NEVER uses float for amounts.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Protocol, Tuple, Union
from enum import Enum

from .errors import UnsupportedCurrency, ConversionUnavailable
from .logging_config import get_logger


logger = get_logger("exchange_it.currency")


class Currency(Enum):
    """ISO 4217 Currency Codes with precision info"""
    USD = ("USD", 2)  # US Dollar
    EUR = ("EUR", 2)  # Euro
    GBP = ("GBP", 2)  # British Pound
    JPY = ("JPY", 0)  # Japanese Yen
    CAD = ("CAD", 2)  # Canadian Dollar
    CHF = ("CHF", 2)  # Swiss Franc
    
    def __init__(self, code: str, precision: int):
        self.code = code
        self.precision = precision
    
    @classmethod
    def from_code(cls, code: Union[str, "Currency"]) -> "Currency":
        """Look up a currency by code, ignoring case ("usd" -> USD)"""
        if isinstance(code, Currency):
            return code
        member = cls.__members__.get(str(code).strip().upper())
        if member is None:
            raise UnsupportedCurrency(code)
        return member
    
    def quantize(self, amount: Decimal) -> Decimal:
        """Round to this currency's minor unit"""
        return amount.quantize(Decimal('0.1') ** self.precision, rounding=ROUND_HALF_UP)


CurrencyLike = Union[str, Currency]


class CurrencyConverterProtocol(Protocol):
    """Anything that can turn an amount in one currency into another"""
    
    def convert(self, amount: Decimal, source_currency: Any, target_currency: Any) -> Decimal:
        ...


@dataclass
class ExchangeRate:
    """Units of to_currency bought by one unit of from_currency"""
    from_currency: Currency
    to_currency: Currency
    rate: Decimal
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    
    def __post_init__(self):
        self.from_currency = Currency.from_code(self.from_currency)
        self.to_currency = Currency.from_code(self.to_currency)
        
        if not isinstance(self.rate, Decimal):
            try:
                self.rate = Decimal(str(self.rate))
            except InvalidOperation:
                raise ValueError(f"Invalid exchange rate: {self.rate!r}")
        
        if not self.rate.is_finite() or self.rate <= Decimal('0'):
            raise ValueError("Exchange rate must be positive")
    
    def inverse(self) -> "ExchangeRate":
        return ExchangeRate(
            from_currency=self.to_currency,
            to_currency=self.from_currency,
            rate=Decimal('1') / self.rate,
            timestamp=self.timestamp
        )


class RateTableConverter:
    """Converts amounts using exchange rates supplied by the caller"""
    
    def __init__(self):
        self._rates: Dict[Tuple[Currency, Currency], ExchangeRate] = {}
    
    def set_rate(self, rate: ExchangeRate) -> None:
        """Set exchange rate for currency pair, and its inverse"""
        self._rates[(rate.from_currency, rate.to_currency)] = rate
        reverse = rate.inverse()
        self._rates[(reverse.from_currency, reverse.to_currency)] = reverse
    
    def get_rate(self, from_currency: CurrencyLike, to_currency: CurrencyLike) -> Optional[ExchangeRate]:
        """Get exchange rate for currency pair"""
        source = Currency.from_code(from_currency)
        target = Currency.from_code(to_currency)
        
        if source == target:
            return ExchangeRate(source, target, Decimal('1'))
        
        return self._rates.get((source, target))
    
    def convert(self, amount: Decimal, source_currency: CurrencyLike,
                target_currency: CurrencyLike) -> Decimal:
        """
        Convert an amount from one currency to another
        
        Args:
            amount: Amount in source_currency
            source_currency: Currency or code the amount is in
            target_currency: Currency or code to convert into
            
        Returns:
            Amount in target_currency, rounded to its precision
            
        Raises:
            UnsupportedCurrency: If either code is unknown
            ConversionUnavailable: If no exchange rate is set for the pair
        """
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))
        
        rate = self.get_rate(source_currency, target_currency)
        if rate is None:
            raise ConversionUnavailable(
                f"No exchange rate available for "
                f"{Currency.from_code(source_currency).code} -> {Currency.from_code(target_currency).code}"
            )
        
        converted = rate.to_currency.quantize(amount * rate.rate)
        logger.debug(
            f"Converted {amount} {rate.from_currency.code} to {converted} {rate.to_currency.code} "
            f"at {rate.rate}"
        )
        return converted
    
    def get_all_rates(self) -> Dict[Tuple[Currency, Currency], ExchangeRate]:
        """Get all current exchange rates"""
        return self._rates.copy()
