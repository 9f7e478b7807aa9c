"""Tests for the Email data type."""

from fieldtypes.validators.email import email_validator


class TestEmail:
    def test_minimal_address(self):
        result = email_validator.test("a@b.co")
        assert result.valid is True
        assert result.sanitised == "a@b.co"

    def test_missing_at_sign(self):
        assert email_validator.test("not-an-email").errors == ["SYNTAX_ERROR"]

    def test_length_and_syntax_accumulate(self):
        assert email_validator.test("a@b").errors == ["TOO_SHORT", "SYNTAX_ERROR"]

    def test_too_long(self):
        address = "a" * 250 + "@b.com"
        assert email_validator.test(address).errors == ["TOO_LONG"]

    def test_whitespace_rejected(self):
        assert email_validator.test("first last@example.com").errors == ["SYNTAX_ERROR"]

    def test_trailing_newline_rejected(self):
        assert email_validator.test("user@example.com\n").errors == ["SYNTAX_ERROR"]

    def test_markup_stripped(self):
        result = email_validator.test('<a href="mailto:x">user@example.com</a>')
        assert result.sanitised == "user@example.com"

    def test_non_string(self):
        assert email_validator.test(12345).errors == ["TYPE_MISMATCH"]

    def test_syntax_override(self):
        company_only = r"^[^@\s]+@example\.com$"
        assert email_validator.test("x@other.com", syntax=company_only).errors == ["SYNTAX_ERROR"]
        assert email_validator.test("x@example.com", syntax=company_only).valid is True
