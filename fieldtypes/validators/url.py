"""Url — absolute http(s) URLs ending in a domain.tld host."""

import re

from pydantic import Field

from fieldtypes.validators.base import BaseValidator, LengthConfig
from fieldtypes.validators.models import ErrorCode

HTTPS_PREFIX = "https://"


class UrlConfig(LengthConfig):
    min_length: int = Field(default=5, ge=0)
    max_length: int = Field(default=255, ge=0)
    https_only: bool = True
    syntax: str = r"^https?://[a-zA-Z0-9.@-]+\.[a-zA-Z]{2,}$"


class UrlValidator(BaseValidator):
    """Validates URLs. Plain http is rejected unless https_only is turned off."""

    config_model = UrlConfig

    @property
    def name(self) -> str:
        return "Url"

    def check(self, value: str, config: UrlConfig) -> list:
        errors = self._check_length(value, config)

        if config.https_only and not value.startswith(HTTPS_PREFIX):
            errors.append(ErrorCode.MUST_USE_HTTPS)

        if not re.fullmatch(config.syntax, value):
            errors.append(ErrorCode.SYNTAX_ERROR)

        return errors


url_validator = UrlValidator()
