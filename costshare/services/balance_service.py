"""Balance calculation logic"""

from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List, Optional
from uuid import UUID

from costshare.core.logging import get_logger
from costshare.models.expense import Expense, ExpenseShare
from costshare.models.settlement import Settlement
from costshare.services.settlement_service import SettlementService

logger = get_logger(__name__)


class BalanceService:
    """Service for folding a group's history into net balances"""

    @staticmethod
    def _shares_by_expense(
        shares: Optional[Iterable[ExpenseShare]],
    ) -> Dict[UUID, List[ExpenseShare]]:
        grouped: Dict[UUID, List[ExpenseShare]] = defaultdict(list)
        for share in shares or []:
            grouped[share.expense_id].append(share)
        return grouped

    @staticmethod
    def _credit(balances: Dict[UUID, Decimal], member_id: UUID, amount: Decimal) -> None:
        balances[member_id] = balances.get(member_id, Decimal("0")) + amount

    @staticmethod
    def calculate_balances(
        expenses: Optional[List[Expense]],
        shares: Optional[List[ExpenseShare]],
        settlements: Optional[List[Settlement]] = None,
    ) -> Dict[UUID, Decimal]:
        """
        Calculate the net balance of every member referenced by a group's history.

        The payer of an expense is credited its total and every participant is
        debited their share. A confirmed settlement where A pays B credits A and
        debits B, cancelling the debt it paid off. Pending and cancelled
        settlements are ignored.

        Args:
            expenses: Expenses of one group
            shares: Expense shares; shares of expenses not in ``expenses`` are ignored
            settlements: Optional settlements of the same group

        Returns:
            Dictionary mapping member IDs to net balance
            (positive = member is owed money, negative = member owes money).
            Members appear in the order they were first referenced.
        """
        balances: Dict[UUID, Decimal] = {}

        if not expenses:
            return balances

        shares_by_expense = BalanceService._shares_by_expense(shares)

        for expense in expenses:
            BalanceService._credit(balances, expense.paid_by, expense.total_amount)

            for share in shares_by_expense.get(expense.id, []):
                BalanceService._credit(balances, share.member_id, -share.amount)

        for settlement in SettlementService.confirmed_only(settlements):
            BalanceService._credit(balances, settlement.paid_by, settlement.amount)
            BalanceService._credit(balances, settlement.paid_to, -settlement.amount)

        logger.debug(
            "balances_calculated",
            expenses=len(expenses),
            members=len(balances),
        )

        return balances
