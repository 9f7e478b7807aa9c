"""Tests for the data type registry."""

import pytest

from fieldtypes import DATA_TYPES, UnknownDataTypeError, get_data_type, validate_value
from fieldtypes.validators import email_validator, stamp_validator


class TestRegistry:
    def test_all_types_registered(self):
        assert set(DATA_TYPES) == {
            "Identifier",
            "ShortText",
            "LongText",
            "Email",
            "Url",
            "Password",
            "PhoneNumber",
            "Stamp",
            "Squid",
        }

    def test_names_match_validators(self):
        for name, validator in DATA_TYPES.items():
            assert validator.name == name

    def test_lookup_returns_singleton(self):
        assert get_data_type("Email") is email_validator
        assert get_data_type("Stamp") is stamp_validator

    def test_unknown_type(self):
        with pytest.raises(UnknownDataTypeError) as exc_info:
            get_data_type("NameSpace")
        assert str(exc_info.value) == "Unknown data type 'NameSpace'"
        assert "Email" in exc_info.value.to_dict()["details"]["available"]

    def test_unknown_type_is_key_error(self):
        with pytest.raises(KeyError):
            get_data_type("nope")

    def test_validate_value(self):
        assert validate_value("Url", "https://example.com").valid is True

    def test_validate_value_passes_overrides(self):
        assert validate_value("ShortText", "abc", max_length=2).errors == ["TOO_LONG"]


class TestResultContract:
    """valid implies a sanitised value; invalid implies none."""

    SAMPLES = ["", "abcde", "<b>x</b>", "a@b.co", "https://example.com", "Ab1!Ab1!", "123", 42, None]

    @pytest.mark.parametrize("name", sorted(DATA_TYPES))
    def test_invariant_holds(self, name):
        validator = get_data_type(name)
        for sample in self.SAMPLES:
            result = validator.test(sample)
            assert result.valid == (not result.errors)
            assert (result.sanitised is not None) == result.valid
