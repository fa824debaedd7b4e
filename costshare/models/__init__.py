"""Ledger domain records"""
from costshare.models.debt import (Debt, SimplificationResult,
                                   SimplificationSummary,
                                   SimplifiedTransaction)
from costshare.models.expense import Expense, ExpenseShare, SplitType
from costshare.models.settlement import Settlement, SettlementStatus

__all__ = [
    "Debt",
    "Expense",
    "ExpenseShare",
    "Settlement",
    "SettlementStatus",
    "SimplificationResult",
    "SimplificationSummary",
    "SimplifiedTransaction",
    "SplitType",
]
