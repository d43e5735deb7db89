"""
Bank Account

A single bank account with deposit, withdrawal and closure, using Decimal
balances and explicit results for refused operations.
"""

from .accounts import Account, AccountState
from .errors import (
    AccountError, ErrorKind, InvalidOperationError, NegativeAmountError, OverdraftError
)
from .results import OperationResult

__version__ = "1.0.0"

__all__ = [
    "Account",
    "AccountState",
    "AccountError",
    "ErrorKind",
    "InvalidOperationError",
    "NegativeAmountError",
    "OperationResult",
    "OverdraftError",
]
