from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable

from src.app.ports.output import ICheckpointResolver, INotifier, IRouteFeed
from src.app.settings import Settings
from src.domain.algorithms.placemarks import extract_placemarks
from src.domain.algorithms.report_format import format_report
from src.domain.exceptions import CheckpointUnavailable
from src.domain.models import SyncOutcome

logger = logging.getLogger(__name__)


def _stdout_progress(token: str) -> None:
    sys.stdout.write(token)
    sys.stdout.flush()


@dataclass(slots=True)
class SyncService:
    """Sends a self-report when the device feed is ahead of the public AIS record.

    One run is strictly sequential:

    - resolve the checkpoint (last public AIS position time)
    - fetch the route feed since that checkpoint
    - extract the position placemarks
    - format and email the last one, if any

    Any failure aborts the run and is re-raised unchanged. Progress tokens are
    purely informational.
    """

    settings: Settings
    checkpoint_resolver: ICheckpointResolver
    route_feed: IRouteFeed
    notifier: INotifier
    progress: Callable[[str], None] = field(default=_stdout_progress)

    async def synchronize(self) -> SyncOutcome:
        self.progress("sync")
        try:
            vessel_id = self.settings.require_vessel_id()

            checkpoint = await self.checkpoint_resolver.resolve(vessel_id)
            if checkpoint is None:
                raise CheckpointUnavailable(
                    f"Could not determine the last AIS position time of {vessel_id}"
                )
            self.progress("V")

            kml = await self.route_feed.fetch(
                self.settings.require_mapshare_id(), checkpoint
            )
            self.progress("k")

            positions = extract_placemarks(kml)
            self.progress(str(len(positions)))

            if not positions:
                self.progress("×")
                self.progress("\n")
                logger.info("No new positions since %s", checkpoint.isoformat())
                return SyncOutcome(checkpoint=checkpoint, positions_found=0)

            latest = positions[-1]
            self.progress("@")

            sender = self.settings.require_report_sender()
            self.progress(">")
            report = format_report(
                latest,
                vessel_id=vessel_id,
                sender=sender,
                recipient=self.settings.report_receiver,
            )
            receipt = await self.notifier.send(report)
            self.progress("Λ")
            self.progress("Δ")
            self.progress("\n")
        except Exception as exc:
            logger.error("[Error] %s", exc)
            raise

        logger.info(
            "Reported position %s of %s (%s)", latest.id, vessel_id, receipt.message_id
        )
        return SyncOutcome(
            checkpoint=checkpoint,
            positions_found=len(positions),
            position=latest,
            report=report,
            receipt=receipt,
        )
