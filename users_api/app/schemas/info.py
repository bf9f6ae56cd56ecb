"""Pydantic schemas for the informational endpoints."""

from typing import Dict

from pydantic import BaseModel


class ServiceInfo(BaseModel):
    name: str
    version: str
    description: str
    endpoints: Dict[str, str]


class StatusReport(BaseModel):
    """Body of ``/health`` and ``/test``."""

    status: str
    timestamp: str
