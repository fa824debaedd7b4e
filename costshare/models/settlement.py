"""Settlement record"""
import enum
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class SettlementStatus(str, enum.Enum):
    """Lifecycle of a recorded payment"""
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


class Settlement(BaseModel):
    """A real-world payment from one member to another"""

    id: UUID = Field(default_factory=uuid4)
    group_id: UUID
    paid_by: UUID
    paid_to: UUID
    amount: Decimal = Field(..., gt=0)
    status: SettlementStatus = SettlementStatus.PENDING
    settled_at: datetime
    recorded_by: Optional[UUID] = None
    confirmed_by: Optional[UUID] = None
    confirmed_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    def __repr__(self) -> str:
        return f"<Settlement(id={self.id}, paid_by={self.paid_by}, paid_to={self.paid_to}, amount={self.amount}, status={self.status.value})>"
