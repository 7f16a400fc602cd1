"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from oasis_forecast.infrastructure.clients.alerts import AlertClient
from oasis_forecast.infrastructure.clients.persistence import PersistenceClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_persistence_client() -> PersistenceClient:
    """Provide persistence API client instance"""
    return PersistenceClient()


def get_alert_client() -> AlertClient:
    """Provide crisis alert webhook client instance"""
    return AlertClient()
