from __future__ import annotations

import asyncio
import logging
import os
import time

from dotenv import load_dotenv

from src.adapters.api.dependencies import build_sync_service
from src.app.settings import Settings
from src.domain.exceptions import ConfigurationError, SyncError

logger = logging.getLogger(__name__)


def main() -> int:
    """Run one sync cycle, or keep cycling when SAIS_LOOP is set.

    Exit status is 0 when the last cycle completed (with or without a report)
    and 1 when it failed.
    """

    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = Settings.from_env().validate()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 1

    service = build_sync_service(settings)

    while True:
        try:
            asyncio.run(service.synchronize())
            status = 0
        except SyncError:
            # Already logged by the service; the next cycle starts fresh.
            status = 1

        if not settings.loop:
            return status
        time.sleep(settings.sync_interval_s)


if __name__ == "__main__":
    raise SystemExit(main())
