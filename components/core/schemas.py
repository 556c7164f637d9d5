"""Core schemas for the application."""

from pydantic import BaseModel


class HealthCheck(BaseModel):
    """Service name, status and API version reported by the health check."""
    service_name: str
    status: str
    api_version: str
