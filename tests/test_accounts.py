import pytest
from decimal import Decimal
from httpx import AsyncClient, ASGITransport

from account_service.services import account_service

pytestmark = pytest.mark.asyncio


async def open_and_login(client, account_request):
    resp = await client.post("/accounts", json=account_request)
    assert resp.status_code == 200
    opened = resp.json()
    resp = await client.get(
        "/accounts",
        params={"accountNumber": opened["accountNumber"], "pin": opened["pin"]},
    )
    assert resp.status_code == 200
    return resp.json()["accountId"]


async def test_open_account(client, account_request):
    resp = await client.post("/accounts", json=account_request)

    assert resp.status_code == 200
    data = resp.json()
    assert data["pin"] == "1234"
    assert len(data["accountNumber"]) == 10
    assert "transactionId" not in data


async def test_open_account_rejects_zero_pin(client, account_request):
    account_request["accountPin"] = "0000"
    account_request["confAccountPin"] = "0000"
    resp = await client.post("/accounts", json=account_request)

    assert resp.status_code == 400
    assert resp.json() == {
        "message": "Pin number should be of 4 numeric digits with non zero values."
    }


async def test_open_account_rejects_mismatched_confirmation(client, account_request):
    account_request["confAccountPin"] = "1233"
    resp = await client.post("/accounts", json=account_request)

    assert resp.status_code == 400
    assert resp.json()["message"] == "Pin and Pin Confirmation does not match."


async def test_open_account_requires_first_name(client, account_request):
    account_request["firstName"] = "  "
    resp = await client.post("/accounts", json=account_request)

    assert resp.status_code == 400
    assert resp.json()["message"] == "First name is required."


async def test_search_account(client, account_request):
    opened = (await client.post("/accounts", json=account_request)).json()

    resp = await client.get(
        "/accounts", params={"accountNumber": opened["accountNumber"], "pin": "1234"}
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["accountNumber"] == opened["accountNumber"]
    assert data["holderFullName"] == "Jaime Flores"

    resp = await client.get(
        "/accounts", params={"accountNumber": opened["accountNumber"], "pin": "4321"}
    )
    assert resp.status_code == 400


async def test_search_account_requires_number(client):
    resp = await client.get("/accounts", params={"pin": "1234"})

    assert resp.status_code == 400
    assert resp.json()["message"] == "Account number is required."


async def test_find_account_not_found(client):
    resp = await client.get("/accounts/999")

    assert resp.status_code == 400
    assert resp.json()["message"] == "The account does not exist"


async def test_invalid_path_parameter_renders_message(client):
    resp = await client.get("/accounts/not-a-number")

    assert resp.status_code == 400
    assert "message" in resp.json()


async def test_transaction_scenario(client, account_request):
    account_id = await open_and_login(client, account_request)

    for description in ("Gasoline", "Tickets"):
        resp = await client.put(
            f"/accounts/{account_id}/deposit",
            json={"amount": "50", "description": description},
        )
        assert resp.status_code == 200
        assert resp.json()["transactionId"]

    balance = (await client.get(f"/accounts/{account_id}/balance")).json()
    assert Decimal(balance["balance"]) == Decimal("100")

    resp = await client.put(
        f"/accounts/{account_id}/withdrawal",
        json={"amount": "25", "description": "Tickets"},
    )
    assert resp.status_code == 200
    balance = (await client.get(f"/accounts/{account_id}/balance")).json()
    assert Decimal(balance["balance"]) == Decimal("75")

    resp = await client.put(
        f"/accounts/{account_id}/check",
        json={"amount": "75", "type": "CREDIT", "description": "Rent"},
    )
    assert resp.status_code == 200
    balance = (await client.get(f"/accounts/{account_id}/balance")).json()
    assert Decimal(balance["balance"]) == Decimal("0")

    resp = await client.put(
        f"/accounts/{account_id}/check",
        json={"amount": "0.01", "type": "CREDIT", "description": "Rent"},
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Operation cancelled due to insufficient funds."


async def test_debit_requires_direction(client, account_request):
    account_id = await open_and_login(client, account_request)

    resp = await client.put(
        f"/accounts/{account_id}/debit",
        json={"amount": "10", "description": "Payroll"},
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Transaction Type is mandatory [DEBIT,CREDIT]"

    resp = await client.put(
        f"/accounts/{account_id}/debit",
        json={"amount": "10", "type": "REFUND", "description": "Payroll"},
    )
    assert resp.status_code == 400
    assert resp.json()["message"].startswith("Transaction type [DEBIT, CREDIT]")

    resp = await client.put(
        f"/accounts/{account_id}/debit",
        json={"amount": "10", "type": "DEBIT", "description": "Payroll"},
    )
    assert resp.status_code == 200


async def test_account_detail_lists_recent_transactions(client, account_request):
    account_id = await open_and_login(client, account_request)
    for i in range(7):
        await client.put(
            f"/accounts/{account_id}/deposit",
            json={"amount": str(i + 1), "description": f"deposit {i}"},
        )

    resp = await client.get(f"/accounts/{account_id}")
    assert resp.status_code == 200
    data = resp.json()
    assert Decimal(data["currentBalance"]) == Decimal("28")
    assert data["status"] == "ACTIVE"
    assert data["accountPin"] == "1234"
    assert len(data["lastTransactions"]) == 5
    assert data["lastTransactions"][0]["transactionType"] == "DEPOSIT"


async def test_close_account(client, account_request):
    account_id = await open_and_login(client, account_request)

    resp = await client.put(f"/accounts/{account_id}/close")
    assert resp.status_code == 200
    assert resp.json()["accountNumber"]

    detail = (await client.get(f"/accounts/{account_id}")).json()
    assert detail["status"] == "CLOSED"


async def test_sub_cent_deposit_is_rejected(client, account_request):
    account_id = await open_and_login(client, account_request)

    resp = await client.put(
        f"/accounts/{account_id}/deposit",
        json={"amount": "0.001", "description": "Rounding"},
    )

    assert resp.status_code == 400
    assert resp.json() == {
        "message": "Amount can not have more than 2 decimal places."
    }
    balance = (await client.get(f"/accounts/{account_id}/balance")).json()
    assert Decimal(balance["balance"]) == Decimal("0")
    detail = (await client.get(f"/accounts/{account_id}")).json()
    assert detail["lastTransactions"] == []


async def test_unexpected_error_is_generic(async_app, monkeypatch):
    async def boom(db, account_id):
        raise RuntimeError("database password is hunter2")

    monkeypatch.setattr(account_service, "get_current_balance", boom)

    transport = ASGITransport(app=async_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/v1/accounts/1/balance")

    assert resp.status_code == 400
    assert "hunter2" not in resp.text
    assert resp.json()["message"] == (
        "Something went wrong on our side, please try again."
    )
