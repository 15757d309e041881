from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_sync_service
from src.adapters.api.schemas.sync import (
    PositionSchema,
    ReportSchema,
    SyncOutcomeSchema,
)
from src.app.services.sync_service import SyncService

router = APIRouter(tags=["sync"])


@router.post("/sync", response_model=SyncOutcomeSchema)
async def run_sync(
    service: SyncService = Depends(get_sync_service),
) -> SyncOutcomeSchema:
    outcome = await service.synchronize()

    p = outcome.position
    r = outcome.report
    return SyncOutcomeSchema(
        checkpoint=outcome.checkpoint,
        positions_found=outcome.positions_found,
        sent=outcome.sent,
        message_id=outcome.receipt.message_id if outcome.receipt else None,
        position=(
            PositionSchema(
                id=p.id,
                time_utc=p.time_utc,
                latitude=p.latitude,
                longitude=p.longitude,
                velocity=p.velocity,
                course=p.course,
                valid_gps_fix=p.valid_gps_fix,
                visibility=p.visibility,
            )
            if p is not None
            else None
        ),
        report=(
            ReportSchema(
                to=r.to, from_address=r.from_address, subject=r.subject, text=r.text
            )
            if r is not None
            else None
        ),
    )
