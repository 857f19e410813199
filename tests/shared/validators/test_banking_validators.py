"""Tests for IBAN, card number and CVV validators."""

import pytest

from src.shared.validators.banking import luhn_checksum_valid, validate_card_cvv, validate_credit_card, validate_iban


class TestLuhnChecksum:
    """Test the Luhn checksum."""

    @pytest.mark.parametrize(
        "digits",
        ["4532015112830366", "4111111111111111", "5555555555554444", "378282246310005", "79927398713", "0"],
    )
    def test_valid_checksums(self, digits):
        """Test known-good numbers pass."""
        assert luhn_checksum_valid(digits)

    @pytest.mark.parametrize("digits", ["4532015112830367", "4111111111111112", "79927398710", "1"])
    def test_invalid_checksums(self, digits):
        """Test altered numbers fail."""
        assert not luhn_checksum_valid(digits)

    def test_doubling_starts_second_from_right(self):
        """Test parity is anchored at the rightmost digit.

        "18" sums to 8 + 2 = 10 and passes; "81" sums to 1 + (16 - 9) = 8.
        """
        assert luhn_checksum_valid("18")
        assert not luhn_checksum_valid("81")


class TestCreditCardValidation:
    """Test card number validation."""

    def test_valid_card(self):
        """Test a valid card number passes."""
        assert validate_credit_card("4532015112830366").valid

    def test_separators_are_ignored(self):
        """Test spaces and dashes are stripped before checking."""
        assert validate_credit_card("4532 0151 1283 0366").valid
        assert validate_credit_card("4532-0151-1283-0366").valid

    def test_checksum_failure(self):
        """Test a changed last digit fails the checksum."""
        assert validate_credit_card("4532015112830367").error == "Invalid card number"

    @pytest.mark.parametrize("number", ["000000000000", "0" * 20, "4111 1111 1111", "abc"])
    def test_length_outside_range(self, number):
        """Test fewer than 13 or more than 19 digits fail regardless of checksum."""
        assert validate_credit_card(number).error == "Card number must be between 13 and 19 digits"

    def test_missing_card_number(self):
        """Test empty card number is required."""
        assert validate_credit_card("").error == "Card number is required"


class TestCVVValidation:
    """Test CVV validation."""

    @pytest.mark.parametrize("cvv", ["123", "1234"])
    def test_valid_cvv(self, cvv):
        """Test 3 and 4 digit codes pass."""
        assert validate_card_cvv(cvv).valid

    @pytest.mark.parametrize("cvv", ["12", "12345", "12a"])
    def test_invalid_cvv(self, cvv):
        """Test other lengths and characters fail."""
        assert validate_card_cvv(cvv).error == "CVV must be 3 or 4 digits"

    def test_missing_cvv(self):
        """Test empty CVV is required."""
        assert validate_card_cvv("").error == "CVV is required"


class TestIBANValidation:
    """Test IBAN validation."""

    @pytest.mark.parametrize("iban", ["DE89370400440532013000", "GB82 WEST 1234 5698 7654 32", "NL91ABNA0417164300"])
    def test_valid_ibans(self, iban):
        """Test well-formed IBANs pass, with or without spaces."""
        assert validate_iban(iban).valid

    @pytest.mark.parametrize("iban", ["de89370400440532013000", "D89370400440532013000", "DEXX370400", "DE89", "DE89-3704"])
    def test_invalid_ibans(self, iban):
        """Test lowercase, short and punctuated IBANs fail."""
        assert validate_iban(iban).error == "Invalid IBAN format"

    def test_too_long_account_part(self):
        """Test more than 30 characters after the check digits fail."""
        assert not validate_iban("DE89" + "1" * 31).valid
        assert validate_iban("DE89" + "1" * 30).valid

    def test_missing_iban(self):
        """Test empty IBAN is required."""
        assert validate_iban("").error == "IBAN is required"
