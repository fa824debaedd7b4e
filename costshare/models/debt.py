"""Derived debt and settlement-plan values"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Debt(BaseModel):
    """Pairwise debt: debtor owes creditor the amount"""

    group_id: Optional[UUID] = None
    debtor_id: UUID
    creditor_id: UUID
    amount: Decimal = Field(..., gt=0)
    calculated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SimplifiedTransaction(BaseModel):
    """A payment that, together with the rest of its plan, clears all balances"""

    from_member_id: UUID
    to_member_id: UUID
    amount: Decimal


class SimplificationSummary(BaseModel):
    """Before/after transaction counts for a simplification"""

    original_count: int
    simplified_count: int
    transactions_saved: int
    total_amount: Decimal


class SimplificationResult(BaseModel):
    """Payment plan together with its summary"""

    transactions: List[SimplifiedTransaction]
    summary: SimplificationSummary
