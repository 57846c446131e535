"""
Account Module

A single-currency ledger account bound to one user. The balance is a
Decimal that never goes negative and only moves through deposit, withdraw
and the two transfer operations.

Transfers are all-or-nothing: when the receiving side fails after the
sender has been debited, the debit is rolled back before the error
propagates.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .errors import InvalidAmount, InsufficientFunds, ConversionUnavailable
from .currency import CurrencyConverterProtocol
from .logging_config import get_logger, log_action
from .uid import generate_uid
from .user import User


logger = get_logger("exchange_it.account")


def to_amount(value: Any) -> Decimal:
    """
    Normalise an amount to a strictly positive Decimal

    Raises:
        InvalidAmount: If value is not a finite number greater than zero
    """
    if isinstance(value, bool):
        raise InvalidAmount(value)

    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise InvalidAmount(value)

    if not value.is_finite() or value <= Decimal('0'):
        raise InvalidAmount(value)

    return value


class Account:
    """
    Ledger account holding a non-negative balance for one user
    """

    def __init__(self, user: User, converter: Optional[CurrencyConverterProtocol] = None):
        self._uid = generate_uid(user.name, user.surname)
        self._balance = Decimal('0')
        self.converter = converter

    @property
    def uid(self) -> str:
        return self._uid

    @property
    def balance(self) -> Decimal:
        return self._balance

    def __repr__(self) -> str:
        return f"Account(uid={self._uid[:12]}..., balance={self._balance})"

    def _reject(self, action: str, error: Exception) -> None:
        log_action(
            logger, "warning", f"{action} rejected: {error}",
            action=action, resource=f"account:{self._uid}",
            extra={"balance": str(self._balance)}
        )

    def _checked_amount(self, action: str, amount: Any) -> Decimal:
        try:
            return to_amount(amount)
        except InvalidAmount as e:
            self._reject(action, e)
            raise

    def _check_withdrawable(self, action: str, amount: Decimal) -> None:
        if amount > self._balance:
            error = InsufficientFunds(self._balance, amount)
            self._reject(action, error)
            raise error

    def deposit(self, amount: Any) -> Decimal:
        """
        Credit the account

        Args:
            amount: Strictly positive amount

        Returns:
            New balance

        Raises:
            InvalidAmount: If amount is not strictly positive
        """
        amount = self._checked_amount("deposit", amount)
        self._balance += amount

        log_action(
            logger, "info", "Deposit accepted",
            action="deposit", resource=f"account:{self._uid}",
            extra={"amount": str(amount), "balance": str(self._balance)}
        )
        return self._balance

    def withdraw(self, amount: Any) -> Decimal:
        """
        Debit the account

        Args:
            amount: Strictly positive amount, no more than the balance

        Returns:
            New balance

        Raises:
            InvalidAmount: If amount is not strictly positive
            InsufficientFunds: If amount exceeds the balance
        """
        amount = self._checked_amount("withdraw", amount)
        self._check_withdrawable("withdraw", amount)
        self._balance -= amount

        log_action(
            logger, "info", "Withdrawal accepted",
            action="withdraw", resource=f"account:{self._uid}",
            extra={"amount": str(amount), "balance": str(self._balance)}
        )
        return self._balance

    def _credit_or_rollback(self, action: str, receiver: "Account",
                            debited: Decimal, credit: Any) -> None:
        try:
            receiver.deposit(credit)
        except BaseException as e:
            self._balance += debited
            log_action(
                logger, "warning", f"{action} rolled back: {e}",
                action=action, resource=f"account:{self._uid}",
                extra={"restored": str(debited), "balance": str(self._balance)}
            )
            raise

    def transfer(self, receiver: "Account", amount: Any) -> None:
        """
        Move amount from this account to receiver

        Raises:
            InvalidAmount: If amount is not strictly positive
            InsufficientFunds: If this account cannot cover amount

        Any error from the receiver's deposit propagates after this
        account's debit has been restored.
        """
        amount = self._checked_amount("transfer", amount)
        self.withdraw(amount)
        self._credit_or_rollback("transfer", receiver, amount, amount)

        log_action(
            logger, "info", "Transfer completed",
            action="transfer", resource=f"account:{self._uid}",
            extra={"receiver": receiver.uid, "amount": str(amount)}
        )

    def transfer_with_conversion(
        self,
        receiver: "Account",
        amount: Any,
        source_currency: Any,
        target_currency: Any,
        converter: Optional[CurrencyConverterProtocol] = None
    ) -> Decimal:
        """
        Debit amount here and credit its converted value to receiver

        Args:
            receiver: Account to credit
            amount: Amount in source_currency to debit from this account
            source_currency: Currency of amount
            target_currency: Currency the receiver is credited in
            converter: Overrides the account's converter for this call

        Returns:
            Converted amount credited to receiver

        Raises:
            InvalidAmount: If amount, or the converted amount, is not strictly positive;
                a rejected converted amount leaves both accounts untouched
            InsufficientFunds: If this account cannot cover amount
            ConversionUnavailable: If no converter is available

        The converter is consulted before any balance changes, so its
        errors propagate unchanged with both accounts untouched.
        """
        if converter is None:
            converter = self.converter
        if converter is None:
            raise ConversionUnavailable("No currency converter configured")

        amount = self._checked_amount("transfer_with_conversion", amount)
        self._check_withdrawable("transfer_with_conversion", amount)

        converted = to_amount(converter.convert(amount, source_currency, target_currency))

        self.withdraw(amount)
        self._credit_or_rollback("transfer_with_conversion", receiver, amount, converted)

        log_action(
            logger, "info", "Converted transfer completed",
            action="transfer_with_conversion", resource=f"account:{self._uid}",
            extra={
                "receiver": receiver.uid,
                "amount": str(amount),
                "source_currency": str(source_currency),
                "converted": str(converted),
                "target_currency": str(target_currency)
            }
        )
        return converted
