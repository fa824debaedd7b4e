"""Settlement construction and status transitions"""

from datetime import datetime, timezone
from typing import Iterable, List, Optional
from uuid import UUID

from costshare.core.exceptions import ValidationError
from costshare.core.logging import get_logger
from costshare.models.debt import SimplifiedTransaction
from costshare.models.settlement import Settlement, SettlementStatus

logger = get_logger(__name__)


class SettlementService:
    """
    Helpers for the settlement lifecycle.

    Nothing here is stored: every method returns a new Settlement value and
    leaves its input untouched. Persisting the result is the caller's job.
    """

    @staticmethod
    def create_from_transaction(
        transaction: SimplifiedTransaction,
        group_id: UUID,
        recorded_by: Optional[UUID] = None,
        settled_at: Optional[datetime] = None,
    ) -> Settlement:
        """
        Build a pending settlement that pays off a simplified transaction.

        Args:
            transaction: Payment suggested by the debt simplifier
            group_id: Group the payment belongs to
            recorded_by: Member recording the payment
            settled_at: When the payment was made (default: now, UTC)

        Returns:
            Settlement in PENDING status
        """
        settlement = Settlement(
            group_id=group_id,
            paid_by=transaction.from_member_id,
            paid_to=transaction.to_member_id,
            amount=transaction.amount,
            status=SettlementStatus.PENDING,
            settled_at=settled_at or datetime.now(timezone.utc),
            recorded_by=recorded_by,
        )

        logger.info(
            "settlement_recorded",
            settlement_id=str(settlement.id),
            group_id=str(group_id),
        )
        return settlement

    @staticmethod
    def _ensure_pending(settlement: Settlement, action: str) -> None:
        if settlement.status != SettlementStatus.PENDING:
            raise ValidationError(
                f"Cannot {action} settlement {settlement.id} in status {settlement.status.value}",
                details={"settlement_id": str(settlement.id), "status": settlement.status.value},
            )

    @staticmethod
    def confirm(
        settlement: Settlement,
        confirmed_by: UUID,
        confirmed_at: Optional[datetime] = None,
    ) -> Settlement:
        """
        Confirm a pending settlement.

        Args:
            settlement: Pending settlement
            confirmed_by: Member confirming receipt of the payment
            confirmed_at: Confirmation time (default: now, UTC)

        Returns:
            Confirmed copy of the settlement

        Raises:
            ValidationError: If the settlement is not pending
        """
        SettlementService._ensure_pending(settlement, "confirm")

        confirmed = settlement.model_copy(
            update={
                "status": SettlementStatus.CONFIRMED,
                "confirmed_by": confirmed_by,
                "confirmed_at": confirmed_at or datetime.now(timezone.utc),
            }
        )
        logger.info("settlement_confirmed", settlement_id=str(settlement.id))
        return confirmed

    @staticmethod
    def cancel(settlement: Settlement) -> Settlement:
        """
        Cancel a pending settlement.

        Raises:
            ValidationError: If the settlement is not pending
        """
        SettlementService._ensure_pending(settlement, "cancel")

        cancelled = settlement.model_copy(update={"status": SettlementStatus.CANCELLED})
        logger.info("settlement_cancelled", settlement_id=str(settlement.id))
        return cancelled

    @staticmethod
    def confirmed_only(settlements: Optional[Iterable[Settlement]]) -> List[Settlement]:
        """Settlements that count towards balances"""
        return [s for s in settlements or [] if s.status == SettlementStatus.CONFIRMED]
