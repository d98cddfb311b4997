import pytest

from barbershop.shared.validators import validate_br_phone, validate_date, validate_time


class TestValidators:
    def test_mobile_phone(self):
        assert validate_br_phone("(71) 98888-7777") == "(71) 98888-7777"
        assert validate_br_phone("+55 71 98888 7777") == "(71) 98888-7777"

    def test_landline_phone(self):
        assert validate_br_phone("7133334444") == "(71) 3333-4444"

    def test_other_lengths_pass_through(self):
        assert validate_br_phone("98888-7777") == "98888-7777"
        assert validate_br_phone(" +44 20 7946 0958 ") == "+44 20 7946 0958"

    def test_phone_without_digits_rejected(self):
        with pytest.raises(ValueError):
            validate_br_phone("sem telefone")

    def test_time_is_zero_padded(self):
        assert validate_time("9:00") == "09:00"

    def test_invalid_time(self):
        with pytest.raises(ValueError):
            validate_time("24:00")

    def test_invalid_date(self):
        with pytest.raises(ValueError):
            validate_date("2099-02-30")
        with pytest.raises(ValueError):
            validate_date("2099-2-3")
