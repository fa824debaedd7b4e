"""Integration tests for split API endpoints"""

from decimal import Decimal
from uuid import uuid4

import pytest
from httpx import AsyncClient


class TestSplitsEndpoint:
    """Test share calculation endpoint"""

    @pytest.mark.asyncio
    async def test_even_split(self, client: AsyncClient):
        """Test even split over the API"""
        participants = [{"member_id": str(uuid4())} for _ in range(3)]

        response = await client.post(
            "/api/v1/splits",
            json={
                "expense_id": str(uuid4()),
                "split_type": "EVEN",
                "total_amount": "100.00",
                "participants": participants,
            },
        )

        assert response.status_code == 200
        amounts = [Decimal(s["amount"]) for s in response.json()["shares"]]
        assert amounts == [Decimal("33.34"), Decimal("33.33"), Decimal("33.33")]

    @pytest.mark.asyncio
    async def test_custom_split(self, client: AsyncClient):
        """Test percentage split over the API"""
        member1, member2 = str(uuid4()), str(uuid4())

        response = await client.post(
            "/api/v1/splits",
            json={
                "expense_id": str(uuid4()),
                "split_type": "CUSTOM",
                "total_amount": "200.00",
                "participants": [
                    {"member_id": member1, "percentage": "25"},
                    {"member_id": member2, "percentage": "75"},
                ],
            },
        )

        assert response.status_code == 200
        shares = {s["member_id"]: Decimal(s["amount"]) for s in response.json()["shares"]}
        assert shares == {member1: Decimal("50.00"), member2: Decimal("150.00")}

    @pytest.mark.asyncio
    async def test_custom_split_invalid_percentages(self, client: AsyncClient):
        """Test percentages not summing to 100 give a 400 error body"""
        response = await client.post(
            "/api/v1/splits",
            json={
                "expense_id": str(uuid4()),
                "split_type": "CUSTOM",
                "total_amount": "200.00",
                "participants": [
                    {"member_id": str(uuid4()), "percentage": "25"},
                    {"member_id": str(uuid4()), "percentage": "25"},
                ],
            },
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["type"] == "ValidationError"
        assert error["path"] == "/api/v1/splits"
        assert "100" in error["message"]

    @pytest.mark.asyncio
    async def test_unknown_split_type(self, client: AsyncClient):
        """Test split types outside EVEN/CUSTOM are rejected"""
        response = await client.post(
            "/api/v1/splits",
            json={
                "expense_id": str(uuid4()),
                "split_type": "MANUAL",
                "total_amount": "10.00",
                "participants": [{"member_id": str(uuid4())}],
            },
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_no_participants(self, client: AsyncClient):
        """Test at least one participant is required"""
        response = await client.post(
            "/api/v1/splits",
            json={
                "expense_id": str(uuid4()),
                "split_type": "EVEN",
                "total_amount": "10.00",
                "participants": [],
            },
        )

        assert response.status_code == 422
