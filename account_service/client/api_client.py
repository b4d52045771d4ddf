import logging
from decimal import Decimal
from typing import Any, Dict, Optional

import requests

from account_service.core.config import settings
from account_service.schemas.account import (
    AccountDetailOut,
    AccountSummaryOut,
    BalanceOut,
    ResponseOut,
)

logger = logging.getLogger(__name__)

GENERIC_CLIENT_MESSAGE = "There was something wrong in the system, please try again"


class ClientError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AccountServiceClient:
    """Thin HTTP client over the account service REST API."""

    def __init__(
        self,
        base_url: str | None = None,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        self.base_url = (base_url or settings.ACCOUNT_SERVICE_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout or settings.CLIENT_TIMEOUT_SECONDS

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            r = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("Request to %s failed: %s", url, e)
            raise ClientError(GENERIC_CLIENT_MESSAGE) from e

        if r.status_code >= 400:
            raise ClientError(self._error_message(r))
        try:
            return r.json()
        except ValueError as e:
            raise ClientError(GENERIC_CLIENT_MESSAGE) from e

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            message = response.json().get("message")
        except (ValueError, AttributeError):
            message = None
        return message or GENERIC_CLIENT_MESSAGE

    @staticmethod
    def _transaction_body(
        amount: Decimal, description: str, direction: Optional[str] = None
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {"amount": str(amount), "description": description}
        if direction is not None:
            body["type"] = direction
        return body

    def authenticate(self, account_number: str, pin: str) -> AccountSummaryOut:
        data = self._request(
            "GET", "/accounts", params={"accountNumber": account_number, "pin": pin}
        )
        return AccountSummaryOut.model_validate(data)

    def find_account_by_id(self, account_id: int) -> AccountDetailOut:
        data = self._request("GET", f"/accounts/{account_id}")
        return AccountDetailOut.model_validate(data)

    def get_current_balance(self, account_id: int) -> BalanceOut:
        data = self._request("GET", f"/accounts/{account_id}/balance")
        return BalanceOut.model_validate(data)

    def open_account(
        self,
        first_name: str,
        last_name: str,
        pin: str,
        pin_confirmation: str,
        holder_id: str,
    ) -> ResponseOut:
        data = self._request(
            "POST",
            "/accounts",
            json={
                "firstName": first_name,
                "lastName": last_name,
                "accountPin": pin,
                "confAccountPin": pin_confirmation,
                "holderIdNumber": holder_id,
            },
        )
        return ResponseOut.model_validate(data)

    def close_account(self, account_id: int) -> ResponseOut:
        data = self._request("PUT", f"/accounts/{account_id}/close")
        return ResponseOut.model_validate(data)

    def make_deposit(
        self, account_id: int, amount: Decimal, description: str
    ) -> ResponseOut:
        data = self._request(
            "PUT",
            f"/accounts/{account_id}/deposit",
            json=self._transaction_body(amount, description),
        )
        return ResponseOut.model_validate(data)

    def make_withdrawal(
        self, account_id: int, amount: Decimal, description: str
    ) -> ResponseOut:
        data = self._request(
            "PUT",
            f"/accounts/{account_id}/withdrawal",
            json=self._transaction_body(amount, description),
        )
        return ResponseOut.model_validate(data)
