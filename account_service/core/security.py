import re
import secrets
import time

from account_service.core.config import settings
from account_service.core.errors import ValidationError

PIN_PATTERN = re.compile(r"[0-9]{4}")
TIME_DIGITS = 4


def generate_account_number(digits: int | None = None) -> str:
    """
    Fast-moving microsecond digits followed by random digits, with a fixed
    total length. Uniqueness is enforced by the caller against the store.
    """
    digits = digits or settings.ACCOUNT_NUMBER_DIGITS
    stamp = str(time.time_ns() // 1000)[-TIME_DIGITS:]
    random_digits = digits - TIME_DIGITS
    entropy = secrets.randbelow(10**random_digits)
    return f"{stamp}{entropy:0{random_digits}d}"


def validate_pin(pin: str | None, pin_confirmation: str | None) -> None:
    if not pin:
        raise ValidationError("Pin number is mandatory.")
    if not PIN_PATTERN.fullmatch(pin) or pin == "0000":
        raise ValidationError(
            "Pin number should be of 4 numeric digits with non zero values."
        )
    if pin != pin_confirmation:
        raise ValidationError("Pin and Pin Confirmation does not match.")


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
