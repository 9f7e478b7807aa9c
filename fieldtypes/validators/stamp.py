"""Stamp — epoch-millisecond timestamps and elapsed-time helpers."""

import re
import time
from typing import Any, Optional

from pydantic import Field

from fieldtypes.validators.base import BaseValidator, LengthConfig, coerce_number
from fieldtypes.validators.models import ErrorCode, Result


class StampConfig(LengthConfig):
    min_length: int = Field(default=0, ge=0)
    # Epoch milliseconds fit in 13 digits; the cap also keeps int() conversion bounded
    max_length: int = Field(default=20, ge=0)
    # ASCII digits only; \d would also accept other scripts' digits
    syntax: str = r"^[0-9]+$"


class StampValidator(BaseValidator):
    """Validates timestamps given as digit strings or non-negative ints.

    Timestamps are never HTML-stripped; anything but ASCII digits is a SYNTAX_ERROR,
    and more than max_length digits is TOO_LONG.
    """

    config_model = StampConfig
    strip_markup = False

    @property
    def name(self) -> str:
        return "Stamp"

    def prepare(self, value: Any) -> Optional[str]:
        if isinstance(value, int) and not isinstance(value, bool):
            return coerce_number(value)
        if isinstance(value, str):
            return value
        return None

    def check(self, value: str, config: StampConfig) -> list:
        errors = self._check_length(value, config)

        if not re.fullmatch(config.syntax, value):
            errors.append(ErrorCode.SYNTAX_ERROR)

        return errors

    @staticmethod
    def now() -> int:
        """Current wall-clock time in epoch milliseconds."""
        return time.time_ns() // 1_000_000

    def age(self, timestamp: Any) -> Result:
        """Milliseconds elapsed since timestamp.

        Returns:
            Result carrying the duration, or the validation errors if timestamp is malformed
        """
        result = self.test(timestamp)
        if not result.valid:
            return Result.failure(result.errors)
        return Result.success(self.now() - int(result.sanitised))


stamp_validator = StampValidator()


class Stamp:
    """A point in time captured at construction."""

    def __init__(self):
        self._created = stamp_validator.now()

    @property
    def created(self) -> int:
        return self._created

    @property
    def age(self) -> int:
        """Milliseconds since this stamp was created."""
        return stamp_validator.now() - self._created

    def __repr__(self) -> str:
        return f"Stamp(created={self._created})"
