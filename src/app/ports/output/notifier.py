from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.report import DeliveryReceipt, ReportMessage


class INotifier(ABC):
    @abstractmethod
    async def send(self, message: ReportMessage) -> DeliveryReceipt:
        raise NotImplementedError
