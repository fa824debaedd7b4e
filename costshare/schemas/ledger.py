"""Ledger request/response schemas"""

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from costshare.models.debt import Debt, SimplificationSummary, SimplifiedTransaction
from costshare.models.expense import Expense, ExpenseShare, SplitType
from costshare.models.settlement import Settlement


class LedgerSnapshot(BaseModel):
    """A consistent snapshot of one group's history"""

    expenses: List[Expense] = []
    shares: List[ExpenseShare] = []
    settlements: Optional[List[Settlement]] = None


class MemberBalance(BaseModel):
    """Net position of one member"""
    member_id: UUID
    amount: Decimal


class BalanceListResponse(BaseModel):
    """Response schema for list of balances"""
    balances: List[MemberBalance]


class DebtListResponse(BaseModel):
    """Response schema for list of debts"""
    debts: List[Debt]


class SimplifyRequest(BaseModel):
    """Debts to simplify, hand-built or previously materialized"""
    debts: List[Debt] = []


class SimplifiedDebtsResponse(BaseModel):
    """Simplified payment plan"""
    transactions: List[SimplifiedTransaction]
    summary: SimplificationSummary


class SettleUpResponse(SimplifiedDebtsResponse):
    """Materialized debts together with their simplified plan"""
    debts: List[Debt]


class SplitParticipant(BaseModel):
    """Participant of a split"""
    member_id: UUID
    percentage: Optional[Decimal] = Field(default=None, ge=0, le=100)


class SplitRequest(BaseModel):
    """Input schema for share calculation"""
    expense_id: UUID
    split_type: SplitType
    total_amount: Decimal = Field(..., gt=0)
    participants: List[SplitParticipant] = Field(..., min_length=1)


class SplitResponse(BaseModel):
    """Calculated shares"""
    shares: List[ExpenseShare]
