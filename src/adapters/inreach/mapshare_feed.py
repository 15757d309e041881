from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

import httpx

from src.app.ports.output import IRouteFeed
from src.domain.exceptions import ConfigurationError, TransportError

logger = logging.getLogger(__name__)

MAPSHARE_FEED_URL = "https://share.garmin.com/Feed/Share/{mapshare_id}"


def since_param(since: datetime) -> str:
    if since.tzinfo is not None:
        since = since.astimezone(timezone.utc)
    return since.strftime("%Y-%m-%dT%H:%MZ")


@dataclass(slots=True)
class InReachMapShareFeed(IRouteFeed):
    """Fetches the KML feed of a Garmin inReach MapShare page.

    The feed only contains points after ``d1``. Password protected maps are
    read with HTTP basic auth (empty user name).
    """

    password: str | None = None
    timeout_s: float = 30.0
    url_template: str = MAPSHARE_FEED_URL
    transport: httpx.AsyncBaseTransport | None = None

    async def fetch(self, mapshare_id: str | None, since: datetime) -> str:
        if not mapshare_id:
            raise ConfigurationError("MAPSHARE_ID environment variable is missing.")

        url = self.url_template.format(mapshare_id=mapshare_id)
        auth = httpx.BasicAuth("", self.password) if self.password else None

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_s, transport=self.transport
            ) as client:
                resp = await client.get(url, params={"d1": since_param(since)}, auth=auth)
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"MapShare feed answered {exc.response.status_code} for {mapshare_id}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"MapShare feed request failed: {exc}") from exc

        logger.debug("Fetched %d bytes of MapShare KML", len(resp.content))
        return resp.text
