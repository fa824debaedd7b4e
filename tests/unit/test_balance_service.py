"""Unit tests for balance calculations"""

from decimal import Decimal
from uuid import uuid4

from costshare.models.expense import ExpenseShare
from costshare.models.settlement import SettlementStatus
from costshare.services.balance_service import BalanceService


class TestCalculateBalancesEmpty:
    """Test empty histories"""

    def test_empty_expense_list(self):
        """Test that an empty history yields an empty map"""
        assert BalanceService.calculate_balances([], []) == {}

    def test_none_inputs(self):
        """Test that None collections degrade to an empty map"""
        assert BalanceService.calculate_balances(None, None, None) == {}

    def test_settlements_without_expenses(self, alice, bob, make_settlement):
        """Test that settlements alone produce no balances"""
        settlements = [make_settlement(bob, alice, "40.00")]

        assert BalanceService.calculate_balances([], [], settlements) == {}


class TestCalculateBalancesFromExpenses:
    """Test folding expenses and shares"""

    def test_single_even_expense(self, alice, bob, carol, make_expense):
        """Test $120 paid by Alice split evenly among three"""
        expense, shares = make_expense(alice, "120.00", [alice, bob, carol])

        balances = BalanceService.calculate_balances([expense], shares)

        assert balances == {
            alice: Decimal("80.00"),
            bob: Decimal("-40.00"),
            carol: Decimal("-40.00"),
        }

    def test_payer_not_participating(self, alice, bob, carol, make_expense):
        """Test a payer who owes no share is credited the full amount"""
        expense, shares = make_expense(alice, "90.00", [bob, carol])

        balances = BalanceService.calculate_balances([expense], shares)

        assert balances[alice] == Decimal("90.00")
        assert balances[bob] == Decimal("-45.00")
        assert balances[carol] == Decimal("-45.00")

    def test_multiple_expenses_net_out(self, alice, bob, make_expense):
        """Test opposite expenses cancel each other"""
        expense1, shares1 = make_expense(alice, "100.00", [alice, bob])
        expense2, shares2 = make_expense(bob, "60.00", [alice, bob])

        balances = BalanceService.calculate_balances(
            [expense1, expense2], shares1 + shares2
        )

        # Bob owes Alice 50 - 30 = 20
        assert balances[alice] == Decimal("20.00")
        assert balances[bob] == Decimal("-20.00")

    def test_shares_of_unknown_expense_ignored(self, alice, bob, make_expense):
        """Test that shares pointing at other expenses are skipped"""
        expense, shares = make_expense(alice, "100.00", [alice, bob])
        stray = ExpenseShare(expense_id=uuid4(), member_id=bob, amount=Decimal("999.00"))

        balances = BalanceService.calculate_balances([expense], shares + [stray])

        assert balances[bob] == Decimal("-50.00")

    def test_conservation(self, alice, bob, carol, dave, make_expense):
        """Test total credit equals total debit"""
        history = [
            make_expense(alice, "100.00", [alice, bob, carol]),
            make_expense(bob, "45.50", [bob, carol, dave]),
            make_expense(dave, "17.99", [alice, dave]),
            make_expense(carol, "250.00", [alice, bob, carol, dave]),
        ]
        expenses = [expense for expense, _ in history]
        shares = [share for _, expense_shares in history for share in expense_shares]

        balances = BalanceService.calculate_balances(expenses, shares)

        credit = sum(b for b in balances.values() if b > 0)
        debit = sum(-b for b in balances.values() if b < 0)
        assert abs(credit - debit) < Decimal("0.01")

    def test_members_in_first_reference_order(self, alice, bob, carol, make_expense):
        """Test that balances keep the order members were first seen in"""
        expense, shares = make_expense(carol, "30.00", [alice, bob, carol])

        balances = BalanceService.calculate_balances([expense], shares)

        assert list(balances) == [carol, alice, bob]

    def test_idempotent(self, alice, bob, carol, make_expense):
        """Test that repeated calls give identical results"""
        expense, shares = make_expense(alice, "100.00", [alice, bob, carol])

        first = BalanceService.calculate_balances([expense], shares)
        second = BalanceService.calculate_balances([expense], shares)

        assert first == second
        assert list(first) == list(second)

    def test_inputs_not_mutated(self, alice, bob, make_expense):
        """Test that the history is left untouched"""
        expense, shares = make_expense(alice, "100.00", [alice, bob])
        before = [s.model_copy() for s in shares]

        BalanceService.calculate_balances([expense], shares)

        assert shares == before


class TestCalculateBalancesWithSettlements:
    """Test folding settlements"""

    def test_confirmed_settlement_cancels_debt(self, alice, bob, make_expense, make_settlement):
        """Test Bob paying Alice moves Bob up and Alice down"""
        expense, shares = make_expense(alice, "100.00", [alice, bob])
        settlement = make_settlement(bob, alice, "50.00")

        balances = BalanceService.calculate_balances([expense], shares, [settlement])

        assert balances[alice] == Decimal("0.00")
        assert balances[bob] == Decimal("0.00")

    def test_partial_settlement(self, alice, bob, make_expense, make_settlement):
        """Test a partial payment leaves the remaining debt"""
        expense, shares = make_expense(alice, "100.00", [alice, bob])
        settlement = make_settlement(bob, alice, "20.00")

        balances = BalanceService.calculate_balances([expense], shares, [settlement])

        assert balances[alice] == Decimal("30.00")
        assert balances[bob] == Decimal("-30.00")

    def test_pending_and_cancelled_ignored(self, alice, bob, make_expense, make_settlement):
        """Test that only confirmed settlements count"""
        expense, shares = make_expense(alice, "100.00", [alice, bob])
        settlements = [
            make_settlement(bob, alice, "50.00", status=SettlementStatus.PENDING),
            make_settlement(bob, alice, "50.00", status=SettlementStatus.CANCELLED),
        ]

        balances = BalanceService.calculate_balances([expense], shares, settlements)

        assert balances[alice] == Decimal("50.00")
        assert balances[bob] == Decimal("-50.00")

    def test_settlement_with_new_member(self, alice, bob, carol, make_expense, make_settlement):
        """Test a settlement can reference a member absent from the expenses"""
        expense, shares = make_expense(alice, "100.00", [alice, bob])
        settlement = make_settlement(carol, alice, "10.00")

        balances = BalanceService.calculate_balances([expense], shares, [settlement])

        assert balances[carol] == Decimal("10.00")
        assert balances[alice] == Decimal("40.00")
        assert sum(balances.values()) == Decimal("0")
