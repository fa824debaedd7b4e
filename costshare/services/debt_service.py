"""Debt materialization: who owes whom"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from costshare.core.logging import get_logger
from costshare.models.debt import Debt
from costshare.models.expense import Expense, ExpenseShare
from costshare.models.settlement import Settlement
from costshare.services.balance_service import BalanceService
from costshare.services.matching import match_balances
from costshare.utils.decimal_utils import MONEY_PLACES, SETTLEMENT_EPSILON

logger = get_logger(__name__)


class DebtService:
    """Service for turning balances into pairwise debts"""

    @staticmethod
    def materialize_debts(
        balances: Dict[UUID, Decimal],
        group_id: Optional[UUID] = None,
        calculated_at: Optional[datetime] = None,
        epsilon: Decimal = SETTLEMENT_EPSILON,
        decimal_places: int = MONEY_PLACES,
    ) -> List[Debt]:
        """
        Convert net balances into debts whose net effect reproduces them.

        Args:
            balances: Net balance per member (positive = owed money)
            group_id: Group stamped on every debt
            calculated_at: Timestamp stamped on every debt (default: now, UTC)
            epsilon: Balances within epsilon of zero count as settled
            decimal_places: Places debt amounts are rounded to

        Returns:
            List of Debt records, most indebted member first
        """
        if not balances:
            return []

        calculated_at = calculated_at or datetime.now(timezone.utc)

        matches = match_balances(balances, epsilon, decimal_places)
        debts = [
            Debt(
                group_id=group_id,
                debtor_id=debtor_id,
                creditor_id=creditor_id,
                amount=amount,
                calculated_at=calculated_at,
            )
            for debtor_id, creditor_id, amount in matches
        ]

        logger.debug("debts_materialized", members=len(balances), debts=len(debts))
        return debts

    @staticmethod
    def calculate_debts(
        expenses: Optional[List[Expense]],
        shares: Optional[List[ExpenseShare]],
        settlements: Optional[List[Settlement]] = None,
        calculated_at: Optional[datetime] = None,
        epsilon: Decimal = SETTLEMENT_EPSILON,
        decimal_places: int = MONEY_PLACES,
    ) -> List[Debt]:
        """
        Calculate all debts for a group from its expense history.

        Args:
            expenses: Expenses of one group
            shares: Expense shares for those expenses
            settlements: Optional settlements; only confirmed ones count
            calculated_at: Timestamp stamped on every debt (default: now, UTC)
            epsilon: Balances within epsilon of zero count as settled
            decimal_places: Places debt amounts are rounded to

        Returns:
            List of Debt records (empty for an empty history or a settled group)
        """
        if not expenses:
            return []

        balances = BalanceService.calculate_balances(expenses, shares, settlements)

        return DebtService.materialize_debts(
            balances,
            group_id=expenses[0].group_id,
            calculated_at=calculated_at,
            epsilon=epsilon,
            decimal_places=decimal_places,
        )
