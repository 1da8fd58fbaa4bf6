"""
Order Tracking - Input Validation Unit Tests

Order numbers: 1-50 characters of [A-Za-z0-9_#-].
Emails: non-blank local part, @, non-blank domain containing a dot.
"""
import pytest

from microservices.order_tracking_service.protocols import (
    InvalidEmailError,
    InvalidOrderNumberError,
    MissingCriteriaError,
)
from microservices.order_tracking_service.validators import (
    is_valid_email,
    is_valid_order_number,
    validate_email,
    validate_order_number,
    validate_query,
)

pytestmark = [pytest.mark.unit]


class TestOrderNumberValidation:
    """validate_order_number accepts exactly the allowed alphabet and lengths"""

    @pytest.mark.parametrize("value", [
        "1",
        "1001",
        "#1001",
        "ORD-2024_0001",
        "abc#DEF-123_x",
        "A" * 50,
    ])
    def test_accepts_valid(self, value):
        assert is_valid_order_number(value)
        assert validate_order_number(value) == value

    @pytest.mark.parametrize("value", [
        "",
        "A" * 51,
        "10 01",
        "1001\n",
        "1001!",
        "order/1001",
        "ørder",
        "１２３",
    ])
    def test_rejects_invalid(self, value):
        assert not is_valid_order_number(value)
        with pytest.raises(InvalidOrderNumberError):
            validate_order_number(value)

    def test_rejects_non_string(self):
        assert not is_valid_order_number(1001)


class TestEmailValidation:
    """validate_email is a loose structural check"""

    @pytest.mark.parametrize("value", [
        "customer@example.com",
        "first.last+tag@mail.example.co.uk",
        "a@b.c",
    ])
    def test_accepts_valid(self, value):
        assert is_valid_email(value)
        assert validate_email(value) == value

    @pytest.mark.parametrize("value", [
        "",
        "customer",
        "customer@example",
        "@example.com",
        "customer@.com",
        "customer@example.",
        "cust omer@example.com",
        "customer@exa mple.com",
        "customer@@example.com",
        "customer@example.com\n",
        " customer@example.com",
    ])
    def test_rejects_invalid(self, value):
        assert not is_valid_email(value)
        with pytest.raises(InvalidEmailError):
            validate_email(value)


class TestValidateQuery:
    """validate_query checks presence first, then each supplied criterion"""

    def test_both_absent_is_missing_criteria(self):
        with pytest.raises(MissingCriteriaError):
            validate_query(None, None)

    def test_empty_strings_count_as_absent(self):
        with pytest.raises(MissingCriteriaError):
            validate_query("", "")

    def test_order_number_only(self):
        validate_query("1001", None)

    def test_email_only(self):
        validate_query(None, "customer@example.com")

    def test_invalid_order_number_reported_before_email(self):
        with pytest.raises(InvalidOrderNumberError):
            validate_query("bad number", "not-an-email")

    def test_invalid_email_with_valid_order_number(self):
        with pytest.raises(InvalidEmailError):
            validate_query("1001", "not-an-email")

    def test_error_carries_stable_code(self):
        with pytest.raises(InvalidEmailError) as exc_info:
            validate_query(None, "nope")
        assert exc_info.value.kind.value == "INVALID_EMAIL"
        assert exc_info.value.status_code == 400
