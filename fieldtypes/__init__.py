"""fieldtypes — field-level validation and sanitisation.

Usage:
    from fieldtypes import get_data_type

    result = get_data_type("Identifier").test("invoice_total")
    if not result.valid:
        # result.errors, e.g. ["SYNTAX_ERROR", "RESERVED_WORD"]

Validators log per-call debug events only once structlog is configured;
call fieldtypes.logging_config.configure_logging() at startup to enable them.
"""

from fieldtypes.exceptions import ConfigTypeError, FieldTypesError, ResultError, UnknownDataTypeError
from fieldtypes.services import EventLogger, EventRecord
from fieldtypes.validators import (
    DATA_TYPES,
    ErrorCode,
    Result,
    Stamp,
    ValidationResult,
    get_data_type,
    strip_html,
    validate_value,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigTypeError",
    "DATA_TYPES",
    "ErrorCode",
    "EventLogger",
    "EventRecord",
    "FieldTypesError",
    "Result",
    "ResultError",
    "Stamp",
    "UnknownDataTypeError",
    "ValidationResult",
    "get_data_type",
    "strip_html",
    "validate_value",
]
