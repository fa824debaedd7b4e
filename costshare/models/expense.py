"""Expense and expense share records"""
import enum
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SplitType(str, enum.Enum):
    """Enum for split types"""
    EVEN = "EVEN"
    CUSTOM = "CUSTOM"


class Expense(BaseModel):
    """An expense paid by one member on behalf of the group"""

    id: UUID
    group_id: UUID
    description: str = Field(..., min_length=1, max_length=200)
    total_amount: Decimal = Field(..., gt=0)
    paid_by: UUID
    split_type: SplitType = SplitType.EVEN
    expense_date: datetime
    created_by: Optional[UUID] = None

    model_config = ConfigDict(from_attributes=True)

    def __repr__(self) -> str:
        return f"<Expense(id={self.id}, description={self.description}, total_amount={self.total_amount})>"


class ExpenseShare(BaseModel):
    """One participant's owed portion of an expense"""

    expense_id: UUID
    member_id: UUID
    amount: Decimal = Field(..., ge=0)
    percentage: Optional[Decimal] = Field(default=None, ge=0, le=100)

    model_config = ConfigDict(from_attributes=True)
