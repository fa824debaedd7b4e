"""Split calculation endpoints"""

from fastapi import APIRouter

from costshare.schemas.ledger import SplitRequest, SplitResponse
from costshare.services.split_strategies import get_split_strategy

router = APIRouter(prefix="/splits", tags=["Splits"])


@router.post("", response_model=SplitResponse)
async def calculate_shares(request: SplitRequest):
    """
    Calculate each participant's share of an expense.

    EVEN splits divide the total equally, CUSTOM splits use the
    participants' percentages, which must add up to 100.

    Raises:
        400: If the percentages are invalid
    """
    strategy = get_split_strategy(request.split_type)
    shares = strategy.calculate_shares(
        request.expense_id,
        request.total_amount,
        [p.model_dump() for p in request.participants],
    )

    return SplitResponse(shares=shares)
