"""Field data types — validation and sanitisation of single raw values.

Usage:
    from fieldtypes.validators import email_validator

    result = email_validator.test(form["email"])
    if result.valid:
        save(result.sanitised)
    else:
        # result.errors lists every violated rule, e.g. ["TOO_SHORT", "SYNTAX_ERROR"]
"""

from fieldtypes.validators.base import BaseValidator, LengthConfig
from fieldtypes.validators.email import EmailConfig, EmailValidator, email_validator
from fieldtypes.validators.html import strip_html
from fieldtypes.validators.identifier import IdentifierConfig, IdentifierValidator, identifier_validator
from fieldtypes.validators.models import (
    CharacterClass,
    ErrorCode,
    PasswordRule,
    Result,
    ValidationResult,
)
from fieldtypes.validators.password import PasswordConfig, PasswordValidator, password_validator
from fieldtypes.validators.registry import DATA_TYPES, get_data_type, validate_value
from fieldtypes.validators.squid import SquidConfig, SquidValidator, squid_validator
from fieldtypes.validators.stamp import Stamp, StampConfig, StampValidator, stamp_validator
from fieldtypes.validators.text import (
    LongTextConfig,
    LongTextValidator,
    PhoneNumberValidator,
    ShortTextValidator,
    TextConfig,
    long_text_validator,
    phone_number_validator,
    short_text_validator,
)
from fieldtypes.validators.url import UrlConfig, UrlValidator, url_validator

__all__ = [
    "BaseValidator",
    "LengthConfig",
    "strip_html",
    "ErrorCode",
    "CharacterClass",
    "PasswordRule",
    "Result",
    "ValidationResult",
    "IdentifierConfig",
    "IdentifierValidator",
    "identifier_validator",
    "TextConfig",
    "LongTextConfig",
    "ShortTextValidator",
    "LongTextValidator",
    "PhoneNumberValidator",
    "short_text_validator",
    "long_text_validator",
    "phone_number_validator",
    "EmailConfig",
    "EmailValidator",
    "email_validator",
    "UrlConfig",
    "UrlValidator",
    "url_validator",
    "PasswordConfig",
    "PasswordValidator",
    "password_validator",
    "Stamp",
    "StampConfig",
    "StampValidator",
    "stamp_validator",
    "SquidConfig",
    "SquidValidator",
    "squid_validator",
    "DATA_TYPES",
    "get_data_type",
    "validate_value",
]
