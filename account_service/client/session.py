from dataclasses import dataclass
from pathlib import Path


@dataclass
class LoggedInAccount:
    account_id: int
    account_number: str


class SessionFile:
    """
    Current CLI session, stored as two lines: account id, then account number.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> LoggedInAccount | None:
        if not self.path.exists():
            return None
        lines = self.path.read_text(encoding="utf-8").splitlines()
        if len(lines) < 2:
            return None
        try:
            return LoggedInAccount(account_id=int(lines[0]), account_number=lines[1])
        except ValueError:
            return None

    def save(self, account: LoggedInAccount) -> None:
        self.path.write_text(
            f"{account.account_id}\n{account.account_number}\n", encoding="utf-8"
        )

    def clear(self) -> bool:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        return True
