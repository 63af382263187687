from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorDetail(BaseModel):
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None


class AppError(Exception):
    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details


class InvalidInputError(AppError):
    """Raised when the six inputs are unusable; no partial projection is returned."""

    def __init__(
        self, missing: List[str], invalid: List[str], reason: Optional[str] = None
    ) -> None:
        self.missing = list(missing)
        self.invalid = list(invalid)
        self.reason = reason
        parts = []
        if self.missing:
            parts.append("missing: " + ", ".join(self.missing))
        if self.invalid:
            parts.append("invalid: " + ", ".join(self.invalid))
        if reason:
            parts.append(reason)
        message = "Incomplete input (" + "; ".join(parts) + ")" if parts else "Incomplete input"
        super().__init__(
            code="invalid_input",
            message=message,
            status_code=422,
            details={"missing": self.missing, "invalid": self.invalid, "reason": reason},
        )


class ErrorEnvelope(BaseModel):
    error: ErrorDetail


def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    envelope = ErrorEnvelope(
        error=ErrorDetail(code=exc.code, message=exc.message, details=exc.details)
    )
    return JSONResponse(status_code=exc.status_code, content=envelope.model_dump())


def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    envelope = ErrorEnvelope(
        error=ErrorDetail(
            code="validation_error",
            message="Validation error",
            details={"errors": jsonable_encoder(exc.errors())},
        )
    )
    return JSONResponse(status_code=422, content=envelope.model_dump())
