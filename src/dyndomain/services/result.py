"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI and any embedding program consume this type; the domain
algebra itself never raises for well-typed input, so failures here
come from parsing and validating user input.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Error codes
INVALID_NOTATION = "INVALID_NOTATION"
INVALID_BOUND = "INVALID_BOUND"
INVALID_LIMIT = "INVALID_LIMIT"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"render"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as a truncated enumeration.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (config source, limits applied).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None


def failure(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    """Shorthand for a failed ServiceResult."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )
