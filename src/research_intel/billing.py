"""Billing collaborator seam.

The registry reports each entrypoint's fixed price here once input
validation succeeds, before the handler runs. Settlement, accounting and
refund policy belong to the payments layer in front of this service.
"""

import logging
from datetime import datetime, timezone
from typing import Protocol

from pydantic import BaseModel, Field

from research_intel.config import Settings

logger = logging.getLogger(__name__)


class Charge(BaseModel):
    """One priced call attempt."""

    key: str
    amount: int = Field(ge=0)
    charged_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class BillingCollaborator(Protocol):
    async def charge(self, key: str, amount: int) -> Charge: ...


class LoggingBilling:
    """Default collaborator: records each charge in the log and nothing else."""

    def __init__(self, settings: Settings | None = None):
        self.pay_to = settings.payments_pay_to if settings else ""
        self.network = settings.payments_network if settings else ""

    async def charge(self, key: str, amount: int) -> Charge:
        charge = Charge(key=key, amount=amount)
        logger.info(
            "Charge key=%s amount=%d pay_to=%s network=%s",
            key,
            amount,
            self.pay_to or "-",
            self.network or "-",
        )
        return charge
