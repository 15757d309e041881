from .position import SENTINEL_CHECKPOINT, PositionRecord
from .report import DeliveryReceipt, ReportMessage, SyncOutcome

__all__ = [
    "SENTINEL_CHECKPOINT",
    "DeliveryReceipt",
    "PositionRecord",
    "ReportMessage",
    "SyncOutcome",
]
