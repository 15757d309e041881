from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .position import PositionRecord


@dataclass(frozen=True, slots=True)
class ReportMessage:
    to: str
    from_address: str
    subject: str
    text: str


@dataclass(frozen=True, slots=True)
class DeliveryReceipt:
    message_id: str


@dataclass(frozen=True, slots=True)
class SyncOutcome:
    checkpoint: datetime
    positions_found: int
    position: PositionRecord | None = None
    report: ReportMessage | None = None
    receipt: DeliveryReceipt | None = None

    @property
    def sent(self) -> bool:
        return self.receipt is not None
