"""
Input validation for tracking lookups

Runs before any upstream call. The email check is deliberately loose:
something@something.something, no whitespace, a single @.
"""

import re
from typing import Optional

from .protocols import InvalidEmailError, InvalidOrderNumberError, MissingCriteriaError

ORDER_NUMBER_MAX_LENGTH = 50

_ORDER_NUMBER_RE = re.compile(r"[A-Za-z0-9_#-]+")
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_order_number(order_number: str) -> bool:
    if not isinstance(order_number, str):
        return False
    if not 1 <= len(order_number) <= ORDER_NUMBER_MAX_LENGTH:
        return False
    return _ORDER_NUMBER_RE.fullmatch(order_number) is not None


def is_valid_email(email: str) -> bool:
    if not isinstance(email, str):
        return False
    return _EMAIL_RE.fullmatch(email) is not None


def validate_order_number(order_number: str) -> str:
    """Return the order number unchanged or raise InvalidOrderNumberError"""
    if not is_valid_order_number(order_number):
        raise InvalidOrderNumberError()
    return order_number


def validate_email(email: str) -> str:
    """Return the email unchanged or raise InvalidEmailError"""
    if not is_valid_email(email):
        raise InvalidEmailError()
    return email


def validate_query(order_number: Optional[str], email: Optional[str]) -> None:
    """
    Validate a lookup's search criteria

    Raises:
        MissingCriteriaError: neither criterion supplied
        InvalidOrderNumberError: order number supplied but malformed
        InvalidEmailError: email supplied but malformed
    """
    if not order_number and not email:
        raise MissingCriteriaError()
    if order_number:
        validate_order_number(order_number)
    if email:
        validate_email(email)
