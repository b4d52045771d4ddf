"""Interactive console client for the account service."""

import sys
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from account_service.client.api_client import AccountServiceClient, ClientError
from account_service.schemas.account import AccountDetailOut, AccountSummaryOut

RULE = "=" * 83
TABLE_BORDER = "+------------------------+---------------+----------+-----------------------------+"
TABLE_ROW = "| {:<22} | {:<13} | {:<8} | {:<27} |"


class BankMenu:
    def __init__(
        self,
        client: AccountServiceClient,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.client = client
        self.input = input_fn
        self.out = output
        self.selected: Optional[AccountSummaryOut] = None

    def _error(self, message: str) -> None:
        self.out(f"\nError: {message}")

    def _option(self, prompt: str) -> int:
        try:
            return int(self.input(prompt).strip())
        except ValueError:
            return 0

    def _amount(self) -> Optional[Decimal]:
        try:
            return Decimal(self.input("Amount: ").strip())
        except InvalidOperation:
            self._error("Amount has an invalid format")
            return None

    def run(self) -> None:
        while True:
            self.out("\n" + "=" * 48)
            self.out("============ Welcome to the Bank ===============")
            self.out("=" * 48)
            self.out("1. Open a new account")
            self.out("2. Login")
            self.out("3. Exit")
            option = self._option("Select the desired option:  ")
            if option == 1:
                self.open_account()
            elif option == 2:
                if self.login():
                    self.home()
            elif option == 3:
                return
            else:
                self.out("Option is not correct. Please try again.")

    def open_account(self) -> None:
        first_name = self.input("First Name: ")
        last_name = self.input("Last Name: ")
        pin = self.input("PIN: ")
        conf_pin = self.input("Confirm PIN: ")
        holder_id = self.input("ID (SSN, Voter Card ID): ")
        try:
            result = self.client.open_account(
                first_name, last_name, pin, conf_pin, holder_id
            )
        except ClientError as e:
            self._error(e.message)
            return
        self.out("Transaction executed successfully")
        self.out(f"Account number: {result.account_number}")
        self.out(f"Pin number: {result.pin}")

    def login(self) -> bool:
        account_number = self.input("Account Number: ").strip()
        pin = self.input("Pin: ").strip()
        try:
            self.selected = self.client.authenticate(account_number, pin)
        except ClientError as e:
            self._error(e.message)
            return False
        return True

    def home(self) -> None:
        while self.selected is not None:
            self.out("\n" + RULE)
            self.out(f" Welcome {self.selected.holder_full_name}")
            self.out(RULE)
            self.out(f"Date: {datetime.now().strftime('%d-%b-%Y %H:%M:%S')}")
            self.out(f"Account Number: {self.selected.account_number}")
            self.out("\nWhat do you want to do?")
            self.out("1. Make a deposit")
            self.out("2. Make a withdrawal")
            self.out("3. Get Account Statement")
            self.out("4. Log out")
            self.out(RULE)
            option = self._option("\n-> Select an option:  ")
            if option == 1:
                self.transaction(self.client.make_deposit)
            elif option == 2:
                self.transaction(self.client.make_withdrawal)
            elif option == 3:
                self.statement()
            elif option == 4:
                self.selected = None
            else:
                self.out("Option is not correct. Please try again.")

    def transaction(self, operation) -> None:
        amount = self._amount()
        if amount is None:
            return
        description = self.input("Description: ")
        try:
            result = operation(self.selected.account_id, amount, description)
        except ClientError as e:
            self._error(e.message)
            return
        self.out(f"Transaction executed successfully with id: {result.transaction_id}")

    def statement(self) -> None:
        try:
            detail = self.client.find_account_by_id(self.selected.account_id)
        except ClientError as e:
            self._error(e.message)
            return
        for line in format_statement(detail):
            self.out(line)


def format_statement(detail: AccountDetailOut) -> list:
    lines = [
        "\n" + RULE,
        "ACCOUNT STATEMENT".center(83),
        RULE,
        f"Account Number: {detail.account_number}",
        f"Holder Name: {detail.holder_full_name}",
        f"Account Pin: {detail.account_pin}",
        f"Holder Account Id: {detail.holder_id}",
        f"Current Balance: {detail.current_balance}",
        RULE,
    ]
    if detail.last_transactions:
        lines.append("LAST TRANSACTIONS".center(83))
        lines.append(RULE)
        lines.append(TABLE_BORDER)
        lines.append(TABLE_ROW.format("Date", "Type", "Amount", "Description"))
        lines.append(TABLE_BORDER)
        for txn in detail.last_transactions:
            lines.append(
                TABLE_ROW.format(
                    txn.transaction_date,
                    txn.transaction_type,
                    str(txn.amount),
                    txn.description or "",
                )
            )
        lines.append(TABLE_BORDER)
    return lines


def main() -> int:
    try:
        BankMenu(AccountServiceClient()).run()
    except (KeyboardInterrupt, EOFError):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
