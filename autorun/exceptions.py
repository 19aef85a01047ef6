"""Application errors.

Every error carries a machine-readable ``code`` and a ``context`` dict for
logging. Only configuration, catalog loading and the console chooser raise;
the widgets render empty catalogs and absent actions without errors.
"""

from __future__ import annotations

from typing import Any, ClassVar, Mapping


class AppError(Exception):
    """Base class; subclasses fix ``code``.

    >>> str(ConfigurationError("bad variant"))
    'CONFIGURATION_ERROR: bad variant'
    """

    code: ClassVar[str] = "APP_ERROR"
    transient: ClassVar[bool] = False

    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
        }


class ConfigurationError(AppError):
    """Unsupported language, dialog variant or log level."""

    code = "CONFIGURATION_ERROR"


class DataValidationError(AppError):
    """Malformed integration catalog."""

    code = "DATA_VALIDATION_ERROR"


class UserInputError(AppError):
    """Too many invalid answers in the console chooser."""

    code = "USER_INPUT_ERROR"


__all__ = ["AppError", "ConfigurationError", "DataValidationError", "UserInputError"]
