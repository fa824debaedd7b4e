"""Even split strategy"""

from decimal import Decimal
from typing import List
from uuid import UUID

from costshare.core.logging import get_logger
from costshare.models.expense import ExpenseShare
from costshare.services.split_strategies.base import BaseSplitStrategy
from costshare.utils.decimal_utils import round_decimal

logger = get_logger(__name__)


class EvenSplitStrategy(BaseSplitStrategy):
    """Strategy for splitting expense evenly among participants"""

    def calculate_shares(
        self, expense_id: UUID, total_amount: Decimal, participant_data: List[dict]
    ) -> List[ExpenseShare]:
        """
        Calculate even split for all participants.

        The cent left over by rounding goes to the first participant.

        Args:
            expense_id: Expense the shares belong to
            total_amount: Total expense amount
            participant_data: List of participant information (member_id, etc.)

        Returns:
            List of ExpenseShare with equal amounts
        """
        num_participants = len(participant_data)

        if num_participants == 0:
            return []

        equal_share = round_decimal(total_amount / num_participants)
        percentage = round_decimal(Decimal("100") / num_participants)
        difference = total_amount - equal_share * num_participants

        shares = []
        for index, participant in enumerate(participant_data):
            amount = equal_share + difference if index == 0 else equal_share
            shares.append(
                ExpenseShare(
                    expense_id=expense_id,
                    member_id=participant["member_id"],
                    amount=amount,
                    percentage=percentage,
                )
            )

        if difference != 0:
            logger.debug(
                "split_rounding_adjusted",
                expense_id=str(expense_id),
                difference=str(difference),
            )

        return shares
