"""Base strategy interface"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List
from uuid import UUID

from costshare.models.expense import ExpenseShare


class BaseSplitStrategy(ABC):
    """Base class for split strategies"""

    @abstractmethod
    def calculate_shares(
        self, expense_id: UUID, total_amount: Decimal, participant_data: List[dict]
    ) -> List[ExpenseShare]:
        """
        Calculate the owed share of each participant.

        Args:
            expense_id: Expense the shares belong to
            total_amount: Total expense amount
            participant_data: List of participant information (member_id, percentage)

        Returns:
            List of ExpenseShare objects summing to total_amount
        """
        pass
