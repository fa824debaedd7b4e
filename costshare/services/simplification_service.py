"""Debt simplification (min-cash-flow)"""

from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from costshare.core.logging import get_logger
from costshare.models.debt import (Debt, SimplificationResult,
                                   SimplificationSummary,
                                   SimplifiedTransaction)
from costshare.services.matching import match_balances
from costshare.utils.decimal_utils import (MONEY_PLACES, SETTLEMENT_EPSILON,
                                          round_decimal, sum_decimals)

logger = get_logger(__name__)


class DebtSimplificationService:
    """
    Reduces a list of debts to fewer payments with the same net effect.

    Uses greedy largest-creditor / largest-debtor matching. The result never
    needs more than N-1 payments for N members with a nonzero balance, but it
    is a heuristic: some balance configurations admit fewer payments than it
    finds.
    """

    @staticmethod
    def calculate_net_balances(debts: Optional[List[Debt]]) -> Dict[UUID, Decimal]:
        """
        Calculate the net balance for each member (total owed to them minus total they owe).

        Args:
            debts: List of debts

        Returns:
            Dictionary mapping member IDs to net balance
        """
        balances: Dict[UUID, Decimal] = {}

        for debt in debts or []:
            balances[debt.creditor_id] = balances.get(debt.creditor_id, Decimal("0")) + debt.amount
            balances[debt.debtor_id] = balances.get(debt.debtor_id, Decimal("0")) - debt.amount

        return balances

    @staticmethod
    def greedy_matching(
        balances: Dict[UUID, Decimal],
        epsilon: Decimal = SETTLEMENT_EPSILON,
        decimal_places: int = MONEY_PLACES,
    ) -> List[SimplifiedTransaction]:
        """
        Match the largest debtor with the largest creditor until all settle.

        Args:
            balances: Net balance per member (positive = owed money)
            epsilon: Balances within epsilon of zero count as settled
            decimal_places: Places transaction amounts are rounded to

        Returns:
            List of transactions, largest debtor first
        """
        return [
            SimplifiedTransaction(
                from_member_id=debtor_id, to_member_id=creditor_id, amount=amount
            )
            for debtor_id, creditor_id, amount in match_balances(
                balances, epsilon, decimal_places
            )
        ]

    @staticmethod
    def simplify_debts(
        debts: Optional[List[Debt]],
        epsilon: Decimal = SETTLEMENT_EPSILON,
        decimal_places: int = MONEY_PLACES,
    ) -> List[SimplifiedTransaction]:
        """
        Simplify debts into the fewest payments the greedy heuristic finds.

        Greedy matching can pair members across otherwise unrelated debt
        clusters and end up with more payments than the input. The input
        debts are returned as the plan in that case.

        Args:
            debts: Any list of debts, freshly materialized or hand-built
            epsilon: Balances within epsilon of zero count as settled
            decimal_places: Places transaction amounts are rounded to

        Returns:
            List of simplified transactions (empty for empty input)
        """
        if not debts:
            return []

        balances = DebtSimplificationService.calculate_net_balances(debts)
        transactions = DebtSimplificationService.greedy_matching(
            balances, epsilon, decimal_places
        )

        if len(transactions) > len(debts):
            logger.debug(
                "greedy_plan_discarded",
                original=len(debts),
                greedy=len(transactions),
            )
            transactions = [
                SimplifiedTransaction(
                    from_member_id=debt.debtor_id,
                    to_member_id=debt.creditor_id,
                    amount=round_decimal(debt.amount, decimal_places),
                )
                for debt in debts
                if round_decimal(debt.amount, decimal_places) > 0
            ]

        return transactions

    @staticmethod
    def get_simplification_summary(
        original_debts: Optional[List[Debt]],
        simplified_transactions: List[SimplifiedTransaction],
    ) -> SimplificationSummary:
        """
        Compare the payment counts before and after simplification.

        Args:
            original_debts: Debts that were simplified
            simplified_transactions: Resulting payment plan

        Returns:
            SimplificationSummary with counts, payments saved and plan total
        """
        original_count = len(original_debts or [])
        simplified_count = len(simplified_transactions)

        return SimplificationSummary(
            original_count=original_count,
            simplified_count=simplified_count,
            transactions_saved=original_count - simplified_count,
            total_amount=sum_decimals(t.amount for t in simplified_transactions),
        )

    @staticmethod
    def simplify(
        debts: Optional[List[Debt]],
        epsilon: Decimal = SETTLEMENT_EPSILON,
        decimal_places: int = MONEY_PLACES,
    ) -> SimplificationResult:
        """
        Simplify debts and report how many payments were saved.

        Args:
            debts: Any list of debts
            epsilon: Balances within epsilon of zero count as settled
            decimal_places: Places transaction amounts are rounded to

        Returns:
            SimplificationResult with the transactions and a before/after summary
        """
        transactions = DebtSimplificationService.simplify_debts(
            debts, epsilon, decimal_places
        )
        summary = DebtSimplificationService.get_simplification_summary(debts, transactions)

        logger.debug(
            "debts_simplified",
            original=summary.original_count,
            simplified=summary.simplified_count,
            saved=summary.transactions_saved,
        )

        return SimplificationResult(transactions=transactions, summary=summary)
