"""Schemas for health check endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

ServiceStatus = Literal["healthy", "unhealthy"]


class ServicesHealth(BaseModel):
    """Per-service status reported by /health."""

    database: ServiceStatus
    storage: ServiceStatus
    cache: ServiceStatus


class HealthReport(BaseModel):
    """Overall application health."""

    status: ServiceStatus
    timestamp: str
    services: ServicesHealth
    version: str
    environment: str


class HealthFailure(BaseModel):
    """Body returned with a 503 when an infrastructure check fails."""

    status: Literal["unhealthy"] = "unhealthy"
    timestamp: str
    error: str


class ApiHealthReport(BaseModel):
    status: Literal["healthy"] = "healthy"
    api_version: Literal["v1"] = "v1"
    timestamp: str
