import pytest

from account_service.core.errors import ValidationError
from account_service.core.security import generate_account_number, validate_pin


def test_account_number_has_fixed_length():
    for _ in range(50):
        number = generate_account_number()
        assert len(number) == 10
        assert number.isdigit()


def test_account_number_custom_length():
    assert len(generate_account_number(digits=16)) == 16


def test_account_numbers_differ():
    numbers = {generate_account_number() for _ in range(200)}
    assert len(numbers) > 190


@pytest.mark.parametrize("pin", ["1234", "0456", "9999", "0001"])
def test_valid_pins(pin):
    validate_pin(pin, pin)


@pytest.mark.parametrize("pin", ["0000", "123", "abcd", "12 4", "١٢٣٤"])
def test_invalid_pins(pin):
    with pytest.raises(ValidationError):
        validate_pin(pin, pin)
