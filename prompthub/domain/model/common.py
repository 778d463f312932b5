"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    """Current time, timezone-aware."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models are immutable, changes produce copies via ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)
