"""
Structured exception classes for identifier validation.

Every failure carries a machine-checkable kind and serializes the same way:
  {"error": {"code": "INVALID_DV", "message": "...", "details": ...}}
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    EMPTY_VALUE = "EMPTY_VALUE"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_VALUE = "INVALID_VALUE"
    INVALID_DV = "INVALID_DV"


class AppError(Exception):
    """Base exception with structured fields."""

    code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str = "Erro interno",
        details: Optional[Any] = None,
    ) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict:
        body: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return {"error": body}


class DocumentError(AppError, ValueError):
    """Identifier rejected. Subclasses ValueError so pydantic reports it as a field error."""

    kind: ErrorKind = ErrorKind.INVALID_VALUE
    default_message: str = "Valor inválido"

    def __init__(self, message: Optional[str] = None, details: Optional[Any] = None) -> None:
        super().__init__(message=message or self.default_message, details=details)

    @property
    def code(self) -> str:  # type: ignore[override]
        return self.kind.value


class EmptyValueError(DocumentError):
    kind = ErrorKind.EMPTY_VALUE
    default_message = "Valor não informado"


class InvalidLengthError(DocumentError):
    kind = ErrorKind.INVALID_LENGTH
    default_message = "Número de caracteres inválido"


class InvalidValueError(DocumentError):
    kind = ErrorKind.INVALID_VALUE
    default_message = "Valor inválido"


class InvalidDVError(DocumentError):
    kind = ErrorKind.INVALID_DV
    default_message = "Dígito verificador inválido"
