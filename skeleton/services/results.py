"""Result values returned by infrastructure collaborators."""

from __future__ import annotations

from pydantic import BaseModel


class OperationResult(BaseModel):
    """Outcome of a single infrastructure call."""

    ok: bool
    error: str | None = None

    @classmethod
    def success(cls) -> "OperationResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, exc: BaseException) -> "OperationResult":
        return cls(ok=False, error=str(exc) or exc.__class__.__name__)


class ProbeResult(OperationResult):
    """Outcome of a database connection probe."""


class DeliveryResult(OperationResult):
    """Outcome of handing a message to the mail transport."""
