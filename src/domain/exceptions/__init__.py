from .sync import (
    CheckpointUnavailable,
    ConfigurationError,
    DeliveryError,
    ExtractionError,
    SyncError,
    TransportError,
)

__all__ = [
    "CheckpointUnavailable",
    "ConfigurationError",
    "DeliveryError",
    "ExtractionError",
    "SyncError",
    "TransportError",
]
