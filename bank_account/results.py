"""
Operation Result Module

Mutating account operations return an OperationResult instead of raising.
Callers branch on ``result.error`` or call ``raise_for_error()``.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .errors import ErrorKind, error_for


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a single account operation.

    ``error`` is None on success. ``balance`` is the account balance after
    the call, which on failure is the unchanged balance.
    """
    balance: Decimal
    error: Optional[ErrorKind] = None

    @classmethod
    def success(cls, balance: Decimal) -> 'OperationResult':
        return cls(balance=balance)

    @classmethod
    def failure(cls, kind: ErrorKind, balance: Decimal) -> 'OperationResult':
        return cls(balance=balance, error=kind)

    @property
    def ok(self) -> bool:
        """Check if the operation succeeded"""
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        """Fixed description of the failure, if any"""
        return self.error.description if self.error else None

    def raise_for_error(self) -> 'OperationResult':
        """
        Raise the exception matching the failure kind.

        Returns:
            self, when the operation succeeded

        Raises:
            AccountError: NegativeAmountError, OverdraftError or
                InvalidOperationError depending on ``error``
        """
        if self.error is not None:
            raise error_for(self.error)
        return self

    def __bool__(self) -> bool:
        return self.ok
