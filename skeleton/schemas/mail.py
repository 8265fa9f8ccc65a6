"""Schemas for the mail diagnostic endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class MailOutcome(BaseModel):
    """Result of a test mail send. Always served with HTTP 200."""

    status: Literal["success", "error"]
    message: str
