"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: Service methods return a ServiceResult for expected failures
instead of raising. The CLI decides stdout/stderr and exit codes from ``ok``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Machine-readable error: a stable ``code`` plus human ``message``."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (e.g. ``"clean"``, ``"output_dir"``).
        data: JSON-serializable payload.
        warnings: Non-fatal notes shown on stderr in human mode.
        error: Set when ``ok`` is False.
        meta: Telemetry and other out-of-band data.
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
        cls, op: str, code: str, message: str, **detail: Any
    ) -> ServiceResult:
        """Shorthand for an ``ok=False`` result."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
