"""
Test suite for amounts module

Tests coercion of caller amounts to Decimal and string parsing.
"""

import pytest
from decimal import Decimal

from bank_account.amounts import decimal_from_string, format_amount, to_amount


class TestToAmount:
    """Test to_amount coercion"""

    def test_decimal_passes_through(self):
        value = Decimal('12.345')
        assert to_amount(value) is value

    def test_int_and_float(self):
        assert to_amount(1000) == Decimal('1000')
        assert to_amount(0.1) == Decimal('0.1')
        assert to_amount(-100.5) == Decimal('-100.5')

    def test_string(self):
        assert to_amount("500") == Decimal('500')
        assert to_amount("$1,000.50") == Decimal('1000.50')

    @pytest.mark.parametrize("value", [True, False, None, [1], object()])
    def test_unsupported_types(self, value):
        with pytest.raises(ValueError):
            to_amount(value)

    @pytest.mark.parametrize("value", [float('nan'), float('inf'), Decimal('NaN'), Decimal('-Infinity')])
    def test_non_finite(self, value):
        with pytest.raises(ValueError, match="finite"):
            to_amount(value)


class TestDecimalFromString:
    """Test decimal_from_string parsing"""

    def test_plain_numbers(self):
        assert decimal_from_string("100") == Decimal('100')
        assert decimal_from_string("-100.25") == Decimal('-100.25')
        assert decimal_from_string("  42  ") == Decimal('42')

    def test_currency_symbols(self):
        assert decimal_from_string("$250.00") == Decimal('250.00')
        assert decimal_from_string("USD 99.99") == Decimal('99.99')

    def test_separators(self):
        assert decimal_from_string("1,234.56") == Decimal('1234.56')
        assert decimal_from_string("1,000") == Decimal('1000')
        assert decimal_from_string("12,50") == Decimal('12.50')
        assert decimal_from_string("1,000,000") == Decimal('1000000')
        assert decimal_from_string("1.234,56") == Decimal('1234.56')
        assert decimal_from_string("1.234.567,89") == Decimal('1234567.89')

    def test_exponent_notation(self):
        assert decimal_from_string("1e5") == Decimal('100000')
        assert decimal_from_string("2.5E-2") == Decimal('0.025')

    def test_accounting_negative(self):
        assert decimal_from_string("(100)") == Decimal('-100')
        assert decimal_from_string("($1,250.00)") == Decimal('-1250.00')

    def test_trailing_currency_code(self):
        assert decimal_from_string("99.99 EUR") == Decimal('99.99')

    @pytest.mark.parametrize("value", ["", "abc", "$", "1.2.3", "12abc", "(-100)", "(100", "1e", "NaN", "--5"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            decimal_from_string(value)


class TestFormatAmount:
    """Test format_amount"""

    def test_two_places_with_grouping(self):
        assert format_amount(Decimal('1000')) == "1,000.00"
        assert format_amount(Decimal('0.5')) == "0.50"
        assert format_amount(Decimal('-100')) == "-100.00"

    def test_beyond_precision_uses_scientific_form(self):
        assert format_amount(Decimal('9E+999999')) == "9E+999999"
