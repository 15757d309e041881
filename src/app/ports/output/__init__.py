from .checkpoint_resolver import ICheckpointResolver
from .notifier import INotifier
from .route_feed import IRouteFeed

__all__ = [
    "ICheckpointResolver",
    "INotifier",
    "IRouteFeed",
]
