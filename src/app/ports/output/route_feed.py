from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class IRouteFeed(ABC):
    """Port for the route-history document of a shared tracking map."""

    @abstractmethod
    async def fetch(self, mapshare_id: str | None, since: datetime) -> str:
        """Return the raw feed document with entries newer than ``since``."""
        raise NotImplementedError
