from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class PositionSchema(BaseModel):
    id: str
    time_utc: str
    latitude: str
    longitude: str
    velocity: str
    course: str
    valid_gps_fix: str
    visibility: str | None = None


class ReportSchema(BaseModel):
    to: str
    from_address: str
    subject: str
    text: str


class SyncOutcomeSchema(BaseModel):
    checkpoint: datetime
    positions_found: int
    sent: bool
    message_id: str | None = None
    position: PositionSchema | None = None
    report: ReportSchema | None = None
