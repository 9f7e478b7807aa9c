"""Email — loose address shape check, no deliverability lookup."""

import re

from pydantic import Field

from fieldtypes.validators.base import BaseValidator, LengthConfig
from fieldtypes.validators.models import ErrorCode


class EmailConfig(LengthConfig):
    min_length: int = Field(default=5, ge=0)
    max_length: int = Field(default=255, ge=0)
    syntax: str = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class EmailValidator(BaseValidator):
    config_model = EmailConfig

    @property
    def name(self) -> str:
        return "Email"

    def check(self, value: str, config: EmailConfig) -> list:
        errors = self._check_length(value, config)

        if not re.fullmatch(config.syntax, value):
            errors.append(ErrorCode.SYNTAX_ERROR)

        return errors


email_validator = EmailValidator()
