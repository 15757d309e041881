from __future__ import annotations

from typing import Callable

from src.adapters.inreach.mapshare_feed import InReachMapShareFeed
from src.adapters.marinetraffic.checkpoint_resolver import (
    MarineTrafficCheckpointResolver,
)
from src.adapters.notifications.ses_email_notifier import SesEmailNotifier
from src.app.services.sync_service import SyncService
from src.app.settings import Settings


def build_sync_service(
    settings: Settings, *, progress: Callable[[str], None] | None = None
) -> SyncService:
    service = SyncService(
        settings=settings,
        checkpoint_resolver=MarineTrafficCheckpointResolver(
            timeout_s=settings.http_timeout_s
        ),
        route_feed=InReachMapShareFeed(
            password=settings.mapshare_password, timeout_s=settings.http_timeout_s
        ),
        notifier=SesEmailNotifier(),
    )
    if progress is not None:
        service.progress = progress
    return service


def _discard_progress(token: str) -> None:
    return None


def get_sync_service() -> SyncService:
    # Progress tokens are a console aid; the API reports the outcome instead.
    return build_sync_service(Settings.from_env(), progress=_discard_progress)
