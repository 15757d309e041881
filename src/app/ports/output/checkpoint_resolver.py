from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class ICheckpointResolver(ABC):
    """Port for finding when a vessel's public AIS position was last updated."""

    @abstractmethod
    async def resolve(self, vessel_id: str) -> datetime | None:
        """Return the checkpoint in UTC, or ``None`` when it cannot be determined."""
        raise NotImplementedError
