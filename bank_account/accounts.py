"""
Account Module

A single bank account: holds its balance and open/closed state, accepts
deposits and withdrawals while open, and reports refused operations as
OperationResult values rather than exceptions.
"""

from decimal import Decimal, Overflow
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional
import operator

from .amounts import AmountLike, balance_context, format_amount, to_amount
from .config import get_config
from .errors import ErrorKind
from .events import DomainEvent, EventDispatcher, create_account_event, get_global_dispatcher
from .logging_config import get_logger, log_action
from .results import OperationResult


class AccountState(Enum):
    """Account lifecycle states"""
    ACTIVE = "active"  # Normal operation
    CLOSED = "closed"  # Permanently closed


class Account:
    """
    Bank account with deposit, withdrawal and closure.

    Checks always run before mutation, so a refused operation leaves the
    account exactly as it was.
    """

    def __init__(
        self,
        account_number: str,
        initial_balance: AmountLike = Decimal('0'),
        event_dispatcher: Optional[EventDispatcher] = None
    ):
        """
        Create an open account

        Args:
            account_number: Identifier of the account, fixed for its lifetime
            initial_balance: Opening balance. Not checked for negativity.
            event_dispatcher: Receives domain events. Defaults to the global
                dispatcher when domain events are enabled in configuration.
        """
        self._account_number = account_number
        self._balance = to_amount(initial_balance)
        self._state = AccountState.ACTIVE
        self.created_at = datetime.now(timezone.utc)
        self.closed_at: Optional[datetime] = None

        if event_dispatcher is None and get_config().enable_domain_events:
            event_dispatcher = get_global_dispatcher()
        self._event_dispatcher = event_dispatcher
        self.logger = get_logger("bank_account.accounts")

        log_action(
            self.logger, "info",
            f"Account {account_number} opened with balance {format_amount(self._balance)}",
            account_number=account_number, action="create"
        )
        self._publish(DomainEvent.ACCOUNT_CREATED)

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def state(self) -> AccountState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == AccountState.ACTIVE

    def can_transact(self) -> bool:
        """Check if account can process deposits and withdrawals"""
        return self.is_active

    def get_balance(self) -> Decimal:
        """Current balance, in any state"""
        return self._balance

    def deposit(self, amount: AmountLike) -> OperationResult:
        """
        Add funds to the account

        Fails with INVALID_OPERATION when closed, then NEGATIVE_AMOUNT when
        the amount is below zero. There is no upper bound; a balance beyond the
        widest Decimal exponent range raises ValueError.
        """
        amount = to_amount(amount)

        if not self.is_active:
            return self._reject("deposit", ErrorKind.INVALID_OPERATION, amount)
        if amount < 0:
            return self._reject("deposit", ErrorKind.NEGATIVE_AMOUNT, amount)

        self._balance = self._shifted_balance(operator.add, amount)
        return self._accept("deposit", DomainEvent.FUNDS_DEPOSITED, amount)

    def withdraw(self, amount: AmountLike) -> OperationResult:
        """
        Take funds from the account

        Fails with INVALID_OPERATION when closed, then OVERDRAFT when the
        amount exceeds the balance. A negative amount is not refused and
        raises the balance.
        """
        amount = to_amount(amount)

        if not self.is_active:
            return self._reject("withdraw", ErrorKind.INVALID_OPERATION, amount)
        if amount > self._balance:
            return self._reject("withdraw", ErrorKind.OVERDRAFT, amount)

        self._balance = self._shifted_balance(operator.sub, amount)
        return self._accept("withdraw", DomainEvent.FUNDS_WITHDRAWN, amount)

    def close(self) -> OperationResult:
        """Close the account. Closing a closed account does nothing."""
        if not self.is_active:
            log_action(
                self.logger, "debug", f"Account {self._account_number} already closed",
                account_number=self._account_number, action="close"
            )
            return OperationResult.success(self._balance)

        self._state = AccountState.CLOSED
        self.closed_at = datetime.now(timezone.utc)

        log_action(
            self.logger, "info",
            f"Account {self._account_number} closed with balance {format_amount(self._balance)}",
            account_number=self._account_number, action="close"
        )
        self._publish(DomainEvent.ACCOUNT_CLOSED)
        return OperationResult.success(self._balance)

    def _shifted_balance(self, op: Callable[[Decimal, Decimal], Decimal], amount: Decimal) -> Decimal:
        """Apply op to the balance without mutating it"""
        try:
            with balance_context():
                return op(self._balance, amount)
        except Overflow:
            raise ValueError(f"Balance of account {self._account_number} out of range") from None

    def _accept(self, action: str, event_type: DomainEvent, amount: Decimal) -> OperationResult:
        log_action(
            self.logger, "info",
            f"{action.capitalize()} of {format_amount(amount)} on account {self._account_number}, "
            f"balance {format_amount(self._balance)}",
            account_number=self._account_number, action=action,
            extra={"amount": str(amount), "balance": str(self._balance)}
        )
        self._publish(event_type, amount=amount)
        return OperationResult.success(self._balance)

    def _reject(self, action: str, kind: ErrorKind, amount: Decimal) -> OperationResult:
        log_action(
            self.logger, "warning",
            f"{action.capitalize()} of {format_amount(amount)} on account {self._account_number} "
            f"refused: {kind.description}",
            account_number=self._account_number, action=action, error_kind=kind.code,
            extra={"amount": str(amount), "balance": str(self._balance)}
        )
        self._publish(DomainEvent.OPERATION_REJECTED, operation=action, amount=amount, error_kind=kind.code)
        return OperationResult.failure(kind, self._balance)

    def _publish(self, event_type: DomainEvent, **data) -> None:
        if self._event_dispatcher is not None:
            self._event_dispatcher.publish(create_account_event(event_type, self, **data))

    def __repr__(self) -> str:
        return (f"Account(account_number={self._account_number!r}, "
                f"balance={self._balance!r}, state={self._state.value!r})")
