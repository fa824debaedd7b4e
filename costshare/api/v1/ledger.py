"""Ledger endpoints"""

from fastapi import APIRouter, Depends

from costshare.config import Settings, get_settings
from costshare.schemas.ledger import (BalanceListResponse, DebtListResponse,
                                      LedgerSnapshot, MemberBalance,
                                      SettleUpResponse, SimplifiedDebtsResponse,
                                      SimplifyRequest)
from costshare.services.balance_service import BalanceService
from costshare.services.debt_service import DebtService
from costshare.services.simplification_service import DebtSimplificationService

router = APIRouter(prefix="/ledger", tags=["Ledger"])


@router.post("/balances", response_model=BalanceListResponse)
async def calculate_balances(snapshot: LedgerSnapshot):
    """
    Calculate the net balance of every member in a group snapshot.

    Positive amounts mean the member is owed money, negative amounts mean
    the member owes money.
    """
    balances = BalanceService.calculate_balances(
        snapshot.expenses, snapshot.shares, snapshot.settlements
    )

    return BalanceListResponse(
        balances=[
            MemberBalance(member_id=member_id, amount=amount)
            for member_id, amount in balances.items()
        ]
    )


@router.post("/debts", response_model=DebtListResponse)
async def calculate_debts(
    snapshot: LedgerSnapshot, settings: Settings = Depends(get_settings)
):
    """
    Calculate who owes whom for a group snapshot.

    Only confirmed settlements offset the debts.
    """
    debts = DebtService.calculate_debts(
        snapshot.expenses,
        snapshot.shares,
        snapshot.settlements,
        epsilon=settings.settlement_epsilon,
        decimal_places=settings.decimal_places,
    )

    return DebtListResponse(debts=debts)


@router.post("/simplify", response_model=SimplifiedDebtsResponse)
async def simplify_debts(
    request: SimplifyRequest, settings: Settings = Depends(get_settings)
):
    """
    Reduce a list of debts to fewer payments with the same net effect.

    The summary reports how many payments the plan saves over the input.
    """
    result = DebtSimplificationService.simplify(
        request.debts,
        epsilon=settings.settlement_epsilon,
        decimal_places=settings.decimal_places,
    )

    return SimplifiedDebtsResponse(
        transactions=result.transactions, summary=result.summary
    )


@router.post("/settle-up", response_model=SettleUpResponse)
async def settle_up(
    snapshot: LedgerSnapshot, settings: Settings = Depends(get_settings)
):
    """Materialize a group's debts and simplify them in one call."""
    debts = DebtService.calculate_debts(
        snapshot.expenses,
        snapshot.shares,
        snapshot.settlements,
        epsilon=settings.settlement_epsilon,
        decimal_places=settings.decimal_places,
    )
    result = DebtSimplificationService.simplify(
        debts,
        epsilon=settings.settlement_epsilon,
        decimal_places=settings.decimal_places,
    )

    return SettleUpResponse(
        debts=debts, transactions=result.transactions, summary=result.summary
    )
