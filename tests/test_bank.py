"""
Tests for the bank endpoints.

Covers balance, deposit and withdrawal rules, the transaction log and
the amount formatting used in response messages.
"""

import re

import pytest
from fastapi.testclient import TestClient

from rest_basics_api.app.core.errors import InvalidAmountError
from rest_basics_api.app.services.bank_service import (
    format_amount,
    normalize_amount,
    utc_timestamp,
    validate_amount,
)

ISO_MILLIS_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestBalance:

    def test_balance_starts_at_zero(self, client: TestClient):
        response = client.get("/balance")

        assert response.status_code == 200
        assert response.json() == {"balance": 0}


class TestDeposit:
    """Test POST /deposit."""

    def test_deposit_increases_balance(self, client: TestClient):
        response = client.post("/deposit", json={"amount": 500})

        assert response.status_code == 200
        assert response.json() == {"message": "Deposited $500", "balance": 500}
        assert client.get("/balance").json() == {"balance": 500}

    def test_deposit_fractional_amount(self, client: TestClient):
        response = client.post("/deposit", json={"amount": 12.5})

        assert response.json() == {"message": "Deposited $12.5", "balance": 12.5}

    def test_deposit_whole_float_is_printed_without_decimals(self, client: TestClient):
        response = client.post("/deposit", json={"amount": 500.0})

        assert response.json()["message"] == "Deposited $500"

    def test_whole_float_deposit_is_stored_as_integer(self, client: TestClient):
        response = client.post("/deposit", json={"amount": 500.0})

        assert response.json() == {"message": "Deposited $500", "balance": 500}
        assert isinstance(response.json()["balance"], int)
        assert isinstance(client.get("/balance").json()["balance"], int)
        assert isinstance(client.get("/transactions").json()[0]["amount"], int)

    def test_fractions_adding_up_to_whole_balance(self, client: TestClient):
        client.post("/deposit", json={"amount": 0.5})

        response = client.post("/deposit", json={"amount": 0.5})

        assert response.json()["balance"] == 1
        assert isinstance(response.json()["balance"], int)

    def test_deposit_records_transaction(self, client: TestClient):
        client.post("/deposit", json={"amount": 100})

        transactions = client.get("/transactions").json()
        assert len(transactions) == 1
        assert transactions[0]["type"] == "deposit"
        assert transactions[0]["amount"] == 100
        assert ISO_MILLIS_UTC.match(transactions[0]["date"])

    @pytest.mark.parametrize("amount", [0, -5, "100", True, None, [100], {"value": 1}])
    def test_invalid_deposit_amount(self, client: TestClient, amount):
        response = client.post("/deposit", json={"amount": amount})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid deposit amount"}
        assert client.get("/balance").json() == {"balance": 0}
        assert client.get("/transactions").json() == []

    def test_deposit_without_amount(self, client: TestClient):
        response = client.post("/deposit", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid deposit amount"}

    def test_deposit_without_body(self, client: TestClient):
        response = client.post("/deposit")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid deposit amount"}

    def test_deposit_with_non_object_body(self, client: TestClient):
        response = client.post("/deposit", json=[500])

        assert response.status_code == 400
        assert client.get("/balance").json() == {"balance": 0}


class TestWithdraw:
    """Test POST /withdraw."""

    def test_withdraw_decreases_balance(self, client: TestClient):
        client.post("/deposit", json={"amount": 500})

        response = client.post("/withdraw", json={"amount": 200})

        assert response.status_code == 200
        assert response.json() == {"message": "Withdrew $200", "balance": 300}

    def test_withdraw_entire_balance(self, client: TestClient):
        client.post("/deposit", json={"amount": 50})

        response = client.post("/withdraw", json={"amount": 50})

        assert response.status_code == 200
        assert response.json()["balance"] == 0

    def test_withdraw_more_than_balance(self, client: TestClient):
        client.post("/deposit", json={"amount": 500})

        response = client.post("/withdraw", json={"amount": 999999})

        assert response.status_code == 400
        assert response.json() == {"error": "Insufficient funds"}
        assert client.get("/balance").json() == {"balance": 500}
        assert [t["type"] for t in client.get("/transactions").json()] == ["deposit"]

    def test_withdraw_from_empty_account(self, client: TestClient):
        response = client.post("/withdraw", json={"amount": 1})

        assert response.status_code == 400
        assert response.json() == {"error": "Insufficient funds"}

    @pytest.mark.parametrize("amount", [0, -1, "50", False, None])
    def test_invalid_withdrawal_amount(self, client: TestClient, amount):
        client.post("/deposit", json={"amount": 100})

        response = client.post("/withdraw", json={"amount": amount})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid withdrawal amount"}
        assert client.get("/balance").json() == {"balance": 100}

    def test_withdrawal_leaving_whole_balance_is_integer(self, client: TestClient):
        client.post("/deposit", json={"amount": 10.5})

        response = client.post("/withdraw", json={"amount": 0.5})

        assert response.json() == {"message": "Withdrew $0.5", "balance": 10}
        assert isinstance(response.json()["balance"], int)

    def test_withdraw_records_transaction(self, client: TestClient):
        client.post("/deposit", json={"amount": 100})
        client.post("/withdraw", json={"amount": 40})

        transactions = client.get("/transactions").json()
        assert [(t["type"], t["amount"]) for t in transactions] == [
            ("deposit", 100),
            ("withdrawal", 40),
        ]


class TestTransactions:
    """Test the transaction history endpoints."""

    def test_transactions_start_empty(self, client: TestClient):
        response = client.get("/transactions")

        assert response.status_code == 200
        assert response.json() == []

    def test_clear_transactions_keeps_balance(self, client: TestClient):
        client.post("/deposit", json={"amount": 500})
        client.post("/withdraw", json={"amount": 200})

        response = client.delete("/transactions")

        assert response.status_code == 200
        assert response.json() == {"message": "All transactions cleared."}
        assert client.get("/transactions").json() == []
        assert client.get("/balance").json() == {"balance": 300}

    def test_clear_empty_log(self, client: TestClient):
        response = client.delete("/transactions")

        assert response.status_code == 200
        assert response.json() == {"message": "All transactions cleared."}


class TestAmountHelpers:
    """Test the pure helpers behind the bank service."""

    @pytest.mark.parametrize(
        "amount, expected",
        [(500, "500"), (500.0, "500"), (12.5, "12.5"), (0.1, "0.1")],
    )
    def test_format_amount(self, amount, expected):
        assert format_amount(amount) == expected

    @pytest.mark.parametrize("amount", [float("nan"), float("inf"), -0.01, "1", True])
    def test_validate_amount_rejects(self, amount):
        with pytest.raises(InvalidAmountError, match="bad amount"):
            validate_amount(amount, "bad amount")
    @pytest.mark.parametrize(
        "amount, expected",
        [(500.0, 500), (500, 500), (12.5, 12.5)],
    )
    def test_normalize_amount(self, amount, expected):
        result = normalize_amount(amount)

        assert result == expected
        assert type(result) is type(expected)


    def test_validate_amount_accepts_large_integers(self):
        assert validate_amount(10 ** 400, "bad amount") == 10 ** 400

    def test_utc_timestamp_format(self):
        assert ISO_MILLIS_UTC.match(utc_timestamp())
