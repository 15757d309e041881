from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from src.adapters.aws import ses_client
from src.app.ports.output import INotifier
from src.domain.exceptions import DeliveryError
from src.domain.models.report import DeliveryReceipt, ReportMessage

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SesEmailNotifier(INotifier):
    """Sends report emails through Amazon SES (supports LocalStack via env).

    Env vars:
      - AWS_REGION, AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY
      - ENDPOINT_URL (preferred for LocalStack)

    The sender address must be verified in SES.
    """

    client: Any = None

    def _send_blocking(self, message: ReportMessage) -> DeliveryReceipt:
        ses = self.client or ses_client()
        try:
            resp = ses.send_email(
                Source=message.from_address,
                Destination={"ToAddresses": [message.to]},
                Message={
                    "Subject": {"Data": message.subject, "Charset": "UTF-8"},
                    "Body": {"Text": {"Data": message.text, "Charset": "UTF-8"}},
                },
            )
        except (ClientError, BotoCoreError) as exc:
            logger.error("SES rejected report to %s: %s", message.to, exc)
            raise DeliveryError(f"Could not send report email: {exc}") from exc

        return DeliveryReceipt(message_id=str(resp.get("MessageId", "")))

    async def send(self, message: ReportMessage) -> DeliveryReceipt:
        return await asyncio.to_thread(self._send_blocking, message)
