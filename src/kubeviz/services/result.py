"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: service methods report user-level failures through
``ServiceResult(ok=False)``; they do not raise.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure categories."""

    EMPTY_INPUT = "EMPTY_INPUT"
    READ_ERROR = "READ_ERROR"
    WRITE_ERROR = "WRITE_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    NO_RESOURCES = "NO_RESOURCES"
    INVALID_FORMAT = "INVALID_FORMAT"
    RENDER_ERROR = "RENDER_ERROR"
    SHARE_ENCODE_ERROR = "SHARE_ENCODE_ERROR"
    SHARE_DECODE_ERROR = "SHARE_DECODE_ERROR"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"visualize"``, ``"share_encode"``, ...).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues (for example, clipboard fallback).
        error: Structured error if ``ok`` is False.
        meta: Optional metadata such as telemetry spans.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode | str,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=str(code), message=message, detail=detail),
        )
