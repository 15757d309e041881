from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

import httpx
from bs4 import BeautifulSoup

from src.app.ports.output import ICheckpointResolver
from src.domain.models.position import SENTINEL_CHECKPOINT

logger = logging.getLogger(__name__)

MT_VESSEL_DETAILS = "https://www.marinetraffic.com/en/ais/details/ships/mmsi:{mmsi}/"

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml",
    "Accept-Language": "en-US,en;q=0.9",
}


def parse_position_time(html: str | bytes) -> datetime:
    """Read the last position time from a vessel details page.

    The page renders its timestamps as ``<time datetime="...">``; the second
    one is the last position received. Naive values are UTC.
    """

    soup = BeautifulSoup(html, "html.parser")
    times = soup.find_all("time")
    if len(times) < 2:
        raise ValueError(f"Expected at least 2 <time> elements, found {len(times)}")

    raw = times[1].get("datetime")
    if not raw:
        raise ValueError("Position <time> element has no datetime attribute")

    parsed = datetime.fromisoformat(str(raw).strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass(slots=True)
class MarineTrafficCheckpointResolver(ICheckpointResolver):
    """Finds the last public AIS position time on MarineTraffic.

    Notes:
      - Only a 404 answer is parsed for a position time; any other status
        yields ``SENTINEL_CHECKPOINT`` so the route feed returns its whole
        history.
      - Network and parse failures are logged and reported as ``None``.
    """

    timeout_s: float = 30.0
    url_template: str = MT_VESSEL_DETAILS
    transport: httpx.AsyncBaseTransport | None = None

    async def resolve(self, vessel_id: str) -> datetime | None:
        url = self.url_template.format(mmsi=vessel_id)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_s,
                headers=HEADERS,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                resp = await client.get(url)

            if resp.status_code != 404:
                return SENTINEL_CHECKPOINT

            return parse_position_time(resp.content)
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error loading MarineTraffic url %s: %s", url, exc)
            return None
