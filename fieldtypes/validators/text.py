"""Free-text data types — ShortText, LongText, and PhoneNumber.

None of these enforce a syntax; they only strip markup and bound the length.
"""

from pydantic import Field

from fieldtypes.validators.base import BaseValidator, LengthConfig


class TextConfig(LengthConfig):
    min_length: int = Field(default=0, ge=0)
    max_length: int = Field(default=255, ge=0)


class LongTextConfig(LengthConfig):
    min_length: int = Field(default=0, ge=0)
    max_length: int = Field(default=50000, ge=0)


class ShortTextValidator(BaseValidator):
    """Single-line text such as names, titles, and labels. Numbers are accepted as text."""

    config_model = TextConfig
    coerce_numbers = True

    @property
    def name(self) -> str:
        return "ShortText"

    def check(self, value: str, config: TextConfig) -> list:
        return self._check_length(value, config)


class PhoneNumberValidator(ShortTextValidator):
    """Phone numbers. Same rules as ShortText; digit patterns are not enforced yet."""

    @property
    def name(self) -> str:
        return "PhoneNumber"


class LongTextValidator(BaseValidator):
    """Multi-paragraph text. Only real strings are accepted."""

    config_model = LongTextConfig

    @property
    def name(self) -> str:
        return "LongText"

    def check(self, value: str, config: LongTextConfig) -> list:
        return self._check_length(value, config)


short_text_validator = ShortTextValidator()
long_text_validator = LongTextValidator()
phone_number_validator = PhoneNumberValidator()
