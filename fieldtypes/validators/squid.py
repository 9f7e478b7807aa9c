"""Squid — 32-character hexadecimal opaque identifiers."""

import re
import uuid

from pydantic import BaseModel

from fieldtypes.validators.base import BaseValidator
from fieldtypes.validators.models import ErrorCode


class SquidConfig(BaseModel):
    syntax: str = r"^[0-9a-fA-F]{32}$"

    model_config = {"frozen": True, "extra": "forbid"}


class SquidValidator(BaseValidator):
    """Validates and generates opaque ids.

    Ids are random version-4 UUIDs without separators. Uniqueness is
    statistical; there is no collision check.
    """

    config_model = SquidConfig
    strip_markup = False

    @property
    def name(self) -> str:
        return "Squid"

    def check(self, value: str, config: SquidConfig) -> list:
        if not re.fullmatch(config.syntax, value):
            return [ErrorCode.SYNTAX_ERROR]
        return []

    @staticmethod
    def generate() -> str:
        return uuid.uuid4().hex


squid_validator = SquidValidator()
