class SyncError(Exception):
    """Base exception for a failed synchronization run."""


class ConfigurationError(SyncError):
    """Raised when a required setting is missing."""


class TransportError(SyncError):
    """Raised when a remote service cannot be reached or answers with an error."""


class CheckpointUnavailable(SyncError):
    """Raised when the last public position time could not be determined."""


class DeliveryError(SyncError):
    """Raised when the report email could not be handed to the provider."""


class ExtractionError(SyncError):
    """Raised when a qualifying placemark lacks a usable required property."""

    def __init__(self, property_name: str, message: str | None = None) -> None:
        self.property_name = property_name
        super().__init__(message or f"Placemark does not have property: {property_name}")
