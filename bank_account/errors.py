"""
Account Error Module

Defines the three ways an account operation can be refused and the exception
classes callers may raise for them.
"""

from enum import Enum


class ErrorKind(Enum):
    """Account error kinds with their fixed descriptions"""
    NEGATIVE_AMOUNT = ("negative_amount", "Negative deposit attempt")
    OVERDRAFT = ("overdraft", "Withdrawal amount exceeds current balance")
    INVALID_OPERATION = ("invalid_operation", "Invalid operation on a closed account")

    def __init__(self, code: str, description: str):
        self.code = code
        self.description = description


class AccountError(Exception):
    """Base class for refused account operations"""
    kind: ErrorKind

    def __init__(self):
        super().__init__(self.kind.description)


class NegativeAmountError(AccountError):
    """Deposit requested with a negative amount"""
    kind = ErrorKind.NEGATIVE_AMOUNT


class OverdraftError(AccountError):
    """Withdrawal requested for more than the current balance"""
    kind = ErrorKind.OVERDRAFT


class InvalidOperationError(AccountError):
    """Deposit or withdrawal requested on a closed account"""
    kind = ErrorKind.INVALID_OPERATION


_ERRORS_BY_KIND = {
    ErrorKind.NEGATIVE_AMOUNT: NegativeAmountError,
    ErrorKind.OVERDRAFT: OverdraftError,
    ErrorKind.INVALID_OPERATION: InvalidOperationError,
}


def error_for(kind: ErrorKind) -> AccountError:
    """Build the exception instance matching an error kind"""
    return _ERRORS_BY_KIND[kind]()
