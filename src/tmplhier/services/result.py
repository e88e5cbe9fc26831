"""What service operations hand back to the command layer.

INVARIANT: Services report failures as ``ServiceResult(ok=False)``; they do
not raise for bad input.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Machine-readable code plus a human message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    ``data`` is only meaningful when ``ok``; ``error`` only when not.
    ``warnings`` may accompany either.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
