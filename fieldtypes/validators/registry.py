"""Data type registry — look up validators by name.

Usage:
    from fieldtypes.validators.registry import get_data_type

    result = get_data_type("Email").test(raw_value)
    if not result.valid:
        # Report result.errors back to the caller
"""

from typing import Any, Optional

from fieldtypes.exceptions import UnknownDataTypeError
from fieldtypes.validators.base import BaseValidator
from fieldtypes.validators.models import ValidationResult

from fieldtypes.validators.identifier import identifier_validator
from fieldtypes.validators.text import short_text_validator, long_text_validator, phone_number_validator
from fieldtypes.validators.email import email_validator
from fieldtypes.validators.url import url_validator
from fieldtypes.validators.password import password_validator
from fieldtypes.validators.stamp import stamp_validator
from fieldtypes.validators.squid import squid_validator


def _default_data_types() -> dict[str, BaseValidator]:
    return {
        validator.name: validator
        for validator in (
            identifier_validator,
            short_text_validator,
            long_text_validator,
            email_validator,
            url_validator,
            password_validator,
            phone_number_validator,
            stamp_validator,
            squid_validator,
        )
    }


DATA_TYPES: dict[str, BaseValidator] = _default_data_types()


def get_data_type(name: str) -> BaseValidator:
    """Return the validator registered under name.

    Raises:
        UnknownDataTypeError: if no such data type exists
    """
    try:
        return DATA_TYPES[name]
    except KeyError:
        raise UnknownDataTypeError(name, list(DATA_TYPES)) from None


def validate_value(name: str, value: Any, options: Optional[Any] = None, **overrides) -> ValidationResult:
    """Validate value with the named data type."""
    return get_data_type(name).test(value, options, **overrides)
