"""Base validator — abstract class implementing the shared test() template.

Each data type is a standalone, independently testable unit. Subclasses
supply a config model and a check() method; the base handles type coercion,
HTML stripping, per-call overrides, and result assembly.
"""

from abc import ABC, abstractmethod
import math
from typing import Any, Optional

import structlog
from pydantic import BaseModel, Field

from fieldtypes.exceptions import ConfigTypeError
from fieldtypes.validators.html import strip_html
from fieldtypes.validators.models import ErrorCode, ValidationResult

logger = structlog.get_logger()


class LengthConfig(BaseModel):
    """Length bounds shared by most data types. Subclasses set their own defaults."""

    min_length: int = Field(default=0, ge=0)
    max_length: int = Field(default=255, ge=0)

    model_config = {"frozen": True, "extra": "forbid"}


def coerce_number(value: Any) -> Optional[str]:
    """Render an int or finite float in decimal form, or return None.

    Integral floats drop their fractional part (3.0 -> "3"). Booleans are not numbers here,
    nor are ints too large for decimal conversion (sys.get_int_max_str_digits()).
    """
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float) and math.isfinite(value):
            return str(int(value)) if value.is_integer() else repr(value)
    except ValueError:
        return None
    return None


class BaseValidator(ABC):
    """Abstract base for all data types.

    Contract:
        - test() never raises for malformed values
        - test() returns a ValidationResult; errors accumulate, they do not short-circuit
        - a TYPE_MISMATCH ends the run, since later checks need a string
        - no shared mutable state; instances are safe to share across threads
    """

    config_model: type[BaseModel] = LengthConfig
    coerce_numbers: bool = False
    strip_markup: bool = True

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry name, e.g. "Email"."""
        ...

    @abstractmethod
    def check(self, value: str, config: BaseModel) -> list:
        """Run the type's rules against an already-prepared string.

        Returns:
            Error codes in rule order (empty if valid)
        """
        ...

    def configure(self, options: Optional[BaseModel] = None, **overrides) -> BaseModel:
        """Resolve the effective config for one call.

        Args:
            options: A full config instance replacing the defaults
            **overrides: Individual fields layered on top (validated by pydantic)

        Raises:
            ConfigTypeError: if options is not an instance of this type's config model
        """
        if options is not None and not isinstance(options, self.config_model):
            raise ConfigTypeError(self.name, self.config_model, type(options))

        config = options if options is not None else self.config_model()
        if overrides:
            config = self.config_model.model_validate({**config.model_dump(), **overrides})
        return config

    def test(self, value: Any, options: Optional[BaseModel] = None, **overrides) -> ValidationResult:
        """Validate and sanitise a raw field value."""
        config = self.configure(options, **overrides)

        prepared = self.prepare(value)
        if prepared is None:
            errors = [ErrorCode.TYPE_MISMATCH]
        else:
            errors = self.check(prepared, config)

        result = ValidationResult.build(errors, prepared)
        # Silent until the host configures structlog (see configure_logging)
        if structlog.is_configured():
            logger.debug(
                "field_validated",
                data_type=self.name,
                valid=result.valid,
                errors=result.errors,
            )
        return result

    # ── Helper Methods ──

    def prepare(self, value: Any) -> Optional[str]:
        """Coerce and strip a raw value. None signals a type mismatch."""
        if self.coerce_numbers:
            number = coerce_number(value)
            if number is not None:
                value = number

        if not isinstance(value, str):
            return None

        return strip_html(value) if self.strip_markup else value

    def _check_length(self, value: str, config: LengthConfig) -> list:
        """TOO_SHORT / TOO_LONG against the configured bounds."""
        errors = []
        if len(value) < config.min_length:
            errors.append(ErrorCode.TOO_SHORT)
        if len(value) > config.max_length:
            errors.append(ErrorCode.TOO_LONG)
        return errors
