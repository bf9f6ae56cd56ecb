"""
Service description and status reports for the informational routes.
"""

from datetime import datetime, timezone
from typing import Dict, Optional

from ..core.config import Settings
from ..schemas.info import ServiceInfo, StatusReport


ENDPOINTS: Dict[str, str] = {
    "GET /": "API information",
    "GET /health": "Health check",
    "GET /test": "Test endpoint",
    "GET /users": "List users (query: page, limit, role, search)",
    "GET /users/:id": "Get user by ID",
    "POST /users": "Create a new user",
    "PUT /users/:id": "Update a user",
    "DELETE /users/:id": "Delete a user",
}


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Return ``now`` (default: current time) as ISO-8601 UTC, e.g.
    ``2026-10-19T08:00:00.000Z``."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class InfoService:
    @staticmethod
    def describe(settings: Settings) -> ServiceInfo:
        return ServiceInfo(
            name=settings.project_name,
            version=settings.api_version,
            description=settings.description,
            endpoints=dict(ENDPOINTS),
        )

    @staticmethod
    def status(label: str) -> StatusReport:
        return StatusReport(status=label, timestamp=utc_timestamp())
