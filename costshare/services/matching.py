"""Greedy largest-creditor / largest-debtor matching shared by the debt services"""

from decimal import Decimal
from typing import Dict, List, Tuple
from uuid import UUID

from costshare.utils.decimal_utils import (MONEY_PLACES, SETTLEMENT_EPSILON,
                                          is_settled, round_decimal)

# (debtor, creditor, rounded amount)
Match = Tuple[UUID, UUID, Decimal]


def match_balances(
    balances: Dict[UUID, Decimal],
    epsilon: Decimal = SETTLEMENT_EPSILON,
    decimal_places: int = MONEY_PLACES,
) -> List[Match]:
    """
    Pair debtors with creditors until every balance is within epsilon of zero.

    Creditors are walked from the largest credit down, debtors from the most
    negative balance up. Both sorts are stable, so members with equal balances
    keep the iteration order of ``balances``. Remainders are carried at full
    precision and only the emitted amounts are rounded. A match that rounds
    to zero still settles both sides but is not emitted.

    Args:
        balances: Net balance per member (positive = owed money)
        epsilon: Threshold below which a balance counts as settled
        decimal_places: Places the emitted amounts are rounded to

    Returns:
        List of (debtor, creditor, amount) tuples in emission order
    """
    creditors = [[member, amount] for member, amount in balances.items() if amount > epsilon]
    debtors = [[member, -amount] for member, amount in balances.items() if amount < -epsilon]

    creditors.sort(key=lambda entry: entry[1], reverse=True)
    debtors.sort(key=lambda entry: entry[1], reverse=True)

    matches: List[Match] = []
    for debtor_id, remaining in debtors:
        for creditor in creditors:
            if is_settled(remaining, epsilon):
                break

            available = creditor[1]
            if is_settled(available, epsilon):
                continue

            amount = min(remaining, available)
            rounded = round_decimal(amount, decimal_places)
            if rounded > 0:
                matches.append((debtor_id, creditor[0], rounded))

            remaining -= amount
            creditor[1] -= amount

    return matches
