"""Exceptions raised for programmer errors.

Malformed field values never raise; they produce a ValidationResult or a failed
Result. These exceptions cover misuse of the API itself.
"""


class FieldTypesError(Exception):
    """Base exception for all fieldtypes errors."""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self):
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ResultError(FieldTypesError):
    """Raised when unwrapping a failed Result."""

    def __init__(self, errors: list):
        super().__init__(
            f"Result carries errors: {', '.join(errors)}",
            details={"errors": list(errors)},
        )
        self.errors = list(errors)


class UnknownDataTypeError(FieldTypesError, KeyError):
    """Raised when a data type name is not registered."""

    def __init__(self, name: str, available: list):
        super().__init__(
            f"Unknown data type '{name}'",
            details={"name": name, "available": sorted(available)},
        )

    def __str__(self) -> str:
        return self.message


class ConfigTypeError(FieldTypesError, TypeError):
    """Raised when a validator is given another data type's config model."""

    def __init__(self, data_type: str, expected: type, received: type):
        super().__init__(
            f"{data_type} expects {expected.__name__}, got {received.__name__}",
            details={"data_type": data_type, "expected": expected.__name__, "received": received.__name__},
        )

    def __str__(self) -> str:
        return self.message
