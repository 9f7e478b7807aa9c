"""Identifier — short machine-usable names such as field or slot keys."""

import re

from pydantic import Field

from fieldtypes.validators.base import BaseValidator, LengthConfig
from fieldtypes.validators.models import ErrorCode

# Names already claimed by the host application's own object model
RESERVED_WORDS = frozenset({"matter", "edition", "slot", "model", "editor", "user", "cx"})


class IdentifierConfig(LengthConfig):
    min_length: int = Field(default=5, ge=0)
    max_length: int = Field(default=100, ge=0)
    # Lowercase first and last character, three characters at minimum
    syntax: str = r"^[a-z][a-z0-9_]+[a-z]$"
    reserved_words: frozenset[str] = RESERVED_WORDS


class IdentifierValidator(BaseValidator):
    """Validates lowercase snake_case identifiers that are not reserved."""

    config_model = IdentifierConfig
    coerce_numbers = True

    @property
    def name(self) -> str:
        return "Identifier"

    def check(self, value: str, config: IdentifierConfig) -> list:
        errors = self._check_length(value, config)

        if not re.fullmatch(config.syntax, value):
            errors.append(ErrorCode.SYNTAX_ERROR)

        if value in config.reserved_words:
            errors.append(ErrorCode.RESERVED_WORD)

        return errors


identifier_validator = IdentifierValidator()
