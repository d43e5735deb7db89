"""
Test suite for errors and results modules

Tests error kinds, their fixed descriptions and the OperationResult value.
"""

import pytest
from decimal import Decimal

from bank_account.errors import (
    AccountError, ErrorKind, InvalidOperationError, NegativeAmountError, OverdraftError,
    error_for
)
from bank_account.results import OperationResult


class TestErrorKind:
    """Test ErrorKind descriptions"""

    def test_descriptions(self):
        assert ErrorKind.NEGATIVE_AMOUNT.description == "Negative deposit attempt"
        assert ErrorKind.OVERDRAFT.description == "Withdrawal amount exceeds current balance"
        assert ErrorKind.INVALID_OPERATION.description == "Invalid operation on a closed account"

    def test_codes_are_unique(self):
        codes = [kind.code for kind in ErrorKind]
        assert len(codes) == len(set(codes))


class TestAccountErrors:
    """Test exception classes"""

    @pytest.mark.parametrize("kind,error_class", [
        (ErrorKind.NEGATIVE_AMOUNT, NegativeAmountError),
        (ErrorKind.OVERDRAFT, OverdraftError),
        (ErrorKind.INVALID_OPERATION, InvalidOperationError),
    ])
    def test_error_for_kind(self, kind, error_class):
        """Test each kind maps to its exception with the fixed message"""
        error = error_for(kind)
        assert isinstance(error, error_class)
        assert isinstance(error, AccountError)
        assert error.kind == kind
        assert str(error) == kind.description

    def test_errors_are_distinguishable(self):
        """Test catching one kind does not catch another"""
        with pytest.raises(OverdraftError):
            try:
                raise OverdraftError()
            except NegativeAmountError:
                pytest.fail("OverdraftError caught as NegativeAmountError")


class TestOperationResult:
    """Test OperationResult"""

    def test_success(self):
        result = OperationResult.success(Decimal('10'))
        assert result.ok
        assert bool(result)
        assert result.error is None
        assert result.message is None
        assert result.balance == Decimal('10')

    def test_failure(self):
        result = OperationResult.failure(ErrorKind.OVERDRAFT, Decimal('10'))
        assert not result.ok
        assert not bool(result)
        assert result.error == ErrorKind.OVERDRAFT
        assert result.message == "Withdrawal amount exceeds current balance"

    def test_raise_for_error(self):
        result = OperationResult.failure(ErrorKind.NEGATIVE_AMOUNT, Decimal('0'))
        with pytest.raises(NegativeAmountError, match="Negative deposit attempt"):
            result.raise_for_error()

    def test_result_is_immutable(self):
        result = OperationResult.success(Decimal('1'))
        with pytest.raises(AttributeError):
            result.balance = Decimal('2')
