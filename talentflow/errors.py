"""Structured error helpers for API responses."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse


def build_error_payload(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    payload = {"error": {"code": code, "message": message}}
    if details is not None:
        payload["error"]["details"] = details
    return payload


class AppError(Exception):
    """Application-scoped error for standardized API responses."""

    status_code = 500
    code = "internal_error"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.message = message
        self.details = details
        self.payload = build_error_payload(self.code, message, details)


class ClientError(AppError):
    """Deterministic validation failure; retrying the same request fails again."""

    status_code = 400
    code = "validation_error"


class NotFoundError(ClientError):
    status_code = 404
    code = "not_found"

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} {entity_id} not found", details={"entity": entity, "id": entity_id})


class ServerError(AppError):
    status_code = 500
    code = "server_error"


class InjectedFailure(ServerError):
    """Randomized artificial fault raised before a mutation is applied."""

    code = "injected_failure"

    def __init__(self, operation: str):
        super().__init__(f"Random failure (simulated) during {operation}", details={"operation": operation})
        self.operation = operation


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.payload)
