"""Validation models — error codes, results, and password rule structure.

All validation is deterministic except for the timestamp and opaque id helpers,
which read the clock and the OS random source.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, model_validator

from fieldtypes.exceptions import ResultError


class ErrorCode(str, Enum):
    """Fixed error codes shared by every data type.

    Password rule violations are not listed here; they are named per rule
    as REQUIRES_MIN_<N>_<CLASS>.
    """

    TYPE_MISMATCH = "TYPE_MISMATCH"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    SYNTAX_ERROR = "SYNTAX_ERROR"
    RESERVED_WORD = "RESERVED_WORD"
    MUST_USE_HTTPS = "MUST_USE_HTTPS"


class CharacterClass(str, Enum):
    """Character classes counted by password rules."""

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    NUMERIC = "numeric"
    SPECIAL = "special"


def _code(error: Union[ErrorCode, str]) -> str:
    return error.value if isinstance(error, Enum) else error


class ValidationResult(BaseModel):
    """Outcome of a single test() call.

    `sanitised` is only populated when the value is valid.
    """

    valid: bool
    errors: list[str] = Field(default_factory=list)
    sanitised: Optional[str] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_consistency(self) -> "ValidationResult":
        if self.valid == bool(self.errors):
            raise ValueError("valid must be True exactly when errors is empty")
        if self.valid != (self.sanitised is not None):
            raise ValueError("sanitised must be set exactly when valid")
        return self

    @classmethod
    def build(cls, errors: list, value: Optional[str]) -> "ValidationResult":
        """Build a result from accumulated error codes and the cleaned value."""
        codes = [_code(e) for e in errors]
        valid = not codes
        return cls(valid=valid, errors=codes, sanitised=value if valid else None)


class Result(BaseModel):
    """Tagged result-or-error for operations derived from a validation.

    Check `ok` before reading `value`, or call unwrap().
    """

    ok: bool
    value: Any = None
    errors: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @classmethod
    def success(cls, value: Any) -> "Result":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, errors: list) -> "Result":
        return cls(ok=False, errors=[_code(e) for e in errors])

    def unwrap(self) -> Any:
        """Return the value, or raise ResultError carrying the error codes."""
        if not self.ok:
            raise ResultError(self.errors)
        return self.value


class PasswordRule(BaseModel):
    """A minimum-occurrence rule for one character class."""

    char_class: CharacterClass
    pattern: str
    minimum: int = Field(default=2, ge=0)

    model_config = {"frozen": True}

    @property
    def error_code(self) -> str:
        return f"REQUIRES_MIN_{self.minimum}_{self.char_class.value.upper()}"
