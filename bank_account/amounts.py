"""
Amount Handling Module

Coerces caller-supplied amounts to Decimal. Floats are converted through
their string form so 0.1 becomes Decimal('0.1'), never its binary expansion.
"""

from decimal import (
    MAX_EMAX, MIN_EMIN, Context, Decimal, DivisionByZero, InvalidOperation, Overflow,
    getcontext, localcontext
)
from typing import Union
import re

# High precision for balance arithmetic
getcontext().prec = 28

AmountLike = Union[Decimal, int, float, str]

CURRENCY_SYMBOLS = re.compile(r'[\s$€£¥]')
CURRENCY_CODE = re.compile(r'^[A-Z]{3}|[A-Z]{3}$')
NUMBER = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')


def decimal_from_string(value: str) -> Decimal:
    """
    Safely convert string to Decimal, handling common formats

    Accepts currency symbols, a leading or trailing ISO currency code,
    thousands separators, a comma decimal separator, exponent notation and
    accounting negatives such as "(100)".

    Args:
        value: String representation of number, e.g. "$1,000.50"

    Returns:
        Decimal value

    Raises:
        ValueError: If string cannot be converted to valid Decimal
    """
    if not value or not isinstance(value, str):
        raise ValueError("Value must be a non-empty string")

    # Remove currency symbols, codes and whitespace
    clean_value = CURRENCY_SYMBOLS.sub('', value)
    clean_value = CURRENCY_CODE.sub('', clean_value)

    negative = clean_value.startswith('(') and clean_value.endswith(')')
    if negative:
        clean_value = clean_value[1:-1]
        if clean_value[:1] in ('+', '-'):
            raise ValueError(f"Cannot convert '{value}' to Decimal")

    if ',' in clean_value and '.' in clean_value:
        # The rightmost separator is the decimal one
        if clean_value.rfind(',') > clean_value.rfind('.'):
            clean_value = clean_value.replace('.', '').replace(',', '.')
        else:
            clean_value = clean_value.replace(',', '')
    elif clean_value.count(',') == 1:
        whole, fraction = clean_value.split(',')
        if len(fraction) <= 2:  # Decimal separator, e.g. "12,50"
            clean_value = f"{whole}.{fraction}"
        else:  # Thousands separator, e.g. "1,000"
            clean_value = clean_value.replace(',', '')
    elif ',' in clean_value:
        clean_value = clean_value.replace(',', '')

    if not NUMBER.fullmatch(clean_value):
        raise ValueError(f"Cannot convert '{value}' to Decimal")

    try:
        amount = Decimal(clean_value)
    except InvalidOperation:
        raise ValueError(f"Cannot convert '{value}' to Decimal")
    return amount.copy_negate() if negative else amount


def to_amount(value: AmountLike) -> Decimal:
    """
    Coerce an amount argument to a finite Decimal

    Raises:
        ValueError: For booleans, unsupported types and non-finite values
    """
    if isinstance(value, bool):
        raise ValueError("Amount must be a number, not a boolean")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        amount = decimal_from_string(value)
    else:
        raise ValueError(f"Unsupported amount type: {type(value).__name__}")

    if not amount.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return amount


def balance_context():
    """Decimal context for balance arithmetic: widest exponent range, overflow trapped"""
    return localcontext(Context(
        prec=getcontext().prec, Emax=MAX_EMAX, Emin=MIN_EMIN,
        traps=[Overflow, InvalidOperation, DivisionByZero]
    ))


def format_amount(value: Decimal) -> str:
    """Format for display"""
    # Beyond working precision the digits are not meaningful
    if value.adjusted() >= getcontext().prec:
        return str(value)
    return f"{value:,.2f}"
