"""Pytest fixtures and configuration"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import AsyncGenerator, Optional
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from costshare.main import app
from costshare.models.debt import Debt
from costshare.models.expense import Expense, ExpenseShare, SplitType
from costshare.models.settlement import Settlement, SettlementStatus
from costshare.services.split_strategies import EvenSplitStrategy

FIXED_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def group_id() -> UUID:
    """Group ID shared by all records of a test"""
    return uuid4()


@pytest.fixture
def alice() -> UUID:
    return uuid4()


@pytest.fixture
def bob() -> UUID:
    return uuid4()


@pytest.fixture
def carol() -> UUID:
    return uuid4()


@pytest.fixture
def dave() -> UUID:
    return uuid4()


@pytest.fixture
def make_expense(group_id):
    """Build an expense with an even split among the given members"""

    def _make_expense(
        paid_by: UUID,
        total_amount: str,
        participants: list,
        description: str = "Dinner",
    ) -> tuple[Expense, list[ExpenseShare]]:
        expense = Expense(
            id=uuid4(),
            group_id=group_id,
            description=description,
            total_amount=Decimal(total_amount),
            paid_by=paid_by,
            split_type=SplitType.EVEN,
            expense_date=FIXED_TIME,
        )
        shares = EvenSplitStrategy().calculate_shares(
            expense.id, expense.total_amount, [{"member_id": m} for m in participants]
        )
        return expense, shares

    return _make_expense


@pytest.fixture
def make_settlement(group_id):
    """Build a settlement in the given status"""

    def _make_settlement(
        paid_by: UUID,
        paid_to: UUID,
        amount: str,
        status: SettlementStatus = SettlementStatus.CONFIRMED,
    ) -> Settlement:
        return Settlement(
            group_id=group_id,
            paid_by=paid_by,
            paid_to=paid_to,
            amount=Decimal(amount),
            status=status,
            settled_at=FIXED_TIME,
        )

    return _make_settlement


@pytest.fixture
def make_debt():
    """Build a hand-made debt"""

    def _make_debt(debtor: UUID, creditor: UUID, amount: str, group: Optional[UUID] = None) -> Debt:
        return Debt(
            group_id=group,
            debtor_id=debtor,
            creditor_id=creditor,
            amount=Decimal(amount),
            calculated_at=FIXED_TIME,
        )

    return _make_debt


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create test client bound to the ASGI app"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def fixed_time() -> datetime:
    """Timestamp pinned for reproducible debts"""
    return FIXED_TIME
