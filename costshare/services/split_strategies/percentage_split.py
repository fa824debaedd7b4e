"""Percentage (custom) split strategy"""

from decimal import Decimal
from typing import List
from uuid import UUID

from costshare.core.exceptions import ValidationError
from costshare.models.expense import ExpenseShare
from costshare.services.split_strategies.base import BaseSplitStrategy
from costshare.utils.decimal_utils import round_decimal


class PercentageSplitStrategy(BaseSplitStrategy):
    """Strategy for splitting expense by percentage"""

    def calculate_shares(
        self, expense_id: UUID, total_amount: Decimal, participant_data: List[dict]
    ) -> List[ExpenseShare]:
        """
        Calculate percentage-based split for participants.

        Participants are processed from the largest percentage down and 0%
        participants get no share. The last share absorbs the rounding
        remainder so the shares add up to total_amount exactly.

        Args:
            expense_id: Expense the shares belong to
            total_amount: Total expense amount
            participant_data: List of dicts with member_id and percentage

        Returns:
            List of ExpenseShare with calculated amounts

        Raises:
            ValidationError: If percentages don't sum to 100 or one is out of range
        """
        if not participant_data:
            return []

        percentages = [
            (participant["member_id"], Decimal(str(participant.get("percentage") or 0)))
            for participant in participant_data
        ]

        total_percentage = sum((p for _, p in percentages), Decimal("0"))
        if abs(total_percentage - Decimal("100")) > Decimal("0.01"):
            raise ValidationError(
                f"Percentages must sum to 100%, got {total_percentage}%"
            )

        for _, percentage in percentages:
            if percentage < 0 or percentage > 100:
                raise ValidationError(
                    f"Percentage must be between 0 and 100, got {percentage}"
                )

        ordered = [
            p for p in sorted(percentages, key=lambda p: p[1], reverse=True) if p[1] > 0
        ]
        last_index = len(ordered) - 1

        shares = []
        total_assigned = Decimal("0")
        for index, (member_id, percentage) in enumerate(ordered):
            if index == last_index:
                amount = total_amount - total_assigned
            else:
                amount = round_decimal(total_amount * percentage / Decimal("100"))
                total_assigned += amount

            shares.append(
                ExpenseShare(
                    expense_id=expense_id,
                    member_id=member_id,
                    amount=amount,
                    percentage=percentage,
                )
            )

        return shares
