"""Command-line client for the account service.

Examples::

    bank open Jaime Flores 1234 1234 1235454SN123
    bank login 6270001234 1234
    bank deposit 50 Gasoline
    bank balance
    bank logout
"""

import argparse
import sys
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, List, Optional

from account_service.client.api_client import AccountServiceClient, ClientError
from account_service.client.session import LoggedInAccount, SessionFile
from account_service.core.config import settings


def _amount(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError("Amount has an invalid format")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bank", description="Personal checking account client"
    )
    parser.add_argument(
        "--url",
        default=settings.ACCOUNT_SERVICE_URL,
        help="Account service base URL (default: %(default)s)",
    )
    parser.add_argument(
        "--session-file",
        default=settings.SESSION_FILE,
        help="File that keeps the logged in account (default: %(default)s)",
    )
    commands = parser.add_subparsers(dest="command", metavar="command")
    commands.required = True

    p = commands.add_parser("open", help="Open an account")
    p.add_argument("first_name")
    p.add_argument("last_name")
    p.add_argument("pin")
    p.add_argument("confirm_pin")
    p.add_argument("holder_id", help="Holder ID (SSN, Voter Card ID)")

    p = commands.add_parser("login", help="Login to an existing account")
    p.add_argument("account_number")
    p.add_argument("pin")

    commands.add_parser("close", help="Close the logged in account")

    p = commands.add_parser("deposit", help="Make a deposit")
    p.add_argument("amount", type=_amount)
    p.add_argument("description")

    p = commands.add_parser("withdraw", help="Make a withdrawal")
    p.add_argument("amount", type=_amount)
    p.add_argument("description")

    commands.add_parser("balance", help="Current balance of the logged in account")
    commands.add_parser("logout", help="Logout the logged in account")
    return parser


class BankCLI:
    def __init__(self, client: AccountServiceClient, session: SessionFile):
        self.client = client
        self.session = session
        self.current = session.load()
        self.handlers: Dict[str, Callable[[argparse.Namespace], None]] = {
            "open": self.open,
            "login": self.login,
            "close": self.close,
            "deposit": self.deposit,
            "withdraw": self.withdraw,
            "balance": self.balance,
            "logout": self.logout,
        }

    def run(self, args: argparse.Namespace) -> None:
        self.handlers[args.command](args)

    def _require_login(self) -> LoggedInAccount:
        if self.current is None:
            raise ClientError("You should be logged in to execute this command")
        return self.current

    def open(self, args: argparse.Namespace) -> None:
        result = self.client.open_account(
            args.first_name, args.last_name, args.pin, args.confirm_pin, args.holder_id
        )
        print("Transaction executed successfully")
        print(f"Account number: {result.account_number}")
        print(f"Pin number: {result.pin}")

    def login(self, args: argparse.Namespace) -> None:
        summary = self.client.authenticate(args.account_number, args.pin)
        self.current = LoggedInAccount(summary.account_id, summary.account_number)
        self.session.save(self.current)
        print(f"OK... welcome {summary.holder_full_name}")

    def close(self, args: argparse.Namespace) -> None:
        account = self._require_login()
        result = self.client.close_account(account.account_id)
        if result.account_number:
            print("Account Closed ok")

    def deposit(self, args: argparse.Namespace) -> None:
        account = self._require_login()
        result = self.client.make_deposit(
            account.account_id, args.amount, args.description
        )
        print(f"Transaction ok {result.transaction_id}")

    def withdraw(self, args: argparse.Namespace) -> None:
        account = self._require_login()
        result = self.client.make_withdrawal(
            account.account_id, args.amount, args.description
        )
        print(f"Transaction ok {result.transaction_id}")

    def balance(self, args: argparse.Namespace) -> None:
        account = self._require_login()
        result = self.client.get_current_balance(account.account_id)
        print(f"Current balance is {result.balance}")

    def logout(self, args: argparse.Namespace) -> None:
        self._require_login()
        self.current = None
        if self.session.clear():
            print("Logout ok...")
        else:
            print("Logout operation is failed.")


def main(
    argv: Optional[List[str]] = None,
    client: Optional[AccountServiceClient] = None,
) -> int:
    args = build_parser().parse_args(argv)
    cli = BankCLI(
        client or AccountServiceClient(base_url=args.url),
        SessionFile(args.session_file),
    )
    try:
        cli.run(args)
    except ClientError as e:
        print(e.message, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
