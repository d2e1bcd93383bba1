"""Tests for the NUP17 federal protocol number."""

import pytest

from brvalidators.core.exceptions import EmptyValueError, InvalidDVError, InvalidLengthError
from brvalidators.documents import nup17
from brvalidators.documents.nup17 import dv, fake, is_nup17, mask, validate, validate_or_fail
from tests.helpers import FAKE_TRIALS, flip_digit, only_digits

VALID = [
    "23037.001380/2021-11",
    "23037.001434/2021-48",
    "23037.001321/2021-42",
    "23037001462202165",
    "23037001537202116",
    "23037001086202117",
]

INVALID = [
    "23037001380202112",
    "23037001434202142",
    "23037001462202162",
    "23037001537202112",
]


class TestValidate:
    @pytest.mark.parametrize("value", VALID)
    def test_valid_numbers(self, value):
        assert is_nup17(value) is True
        assert validate(value) is True
        assert nup17.validate(value) is True

    @pytest.mark.parametrize("value", INVALID)
    def test_invalid_numbers(self, value):
        assert validate(value) is False

    @pytest.mark.parametrize("value", INVALID)
    def test_validate_or_fail_raises_invalid_dv(self, value):
        with pytest.raises(InvalidDVError):
            validate_or_fail(value)

    @pytest.mark.parametrize("value", ["230370014622021650", "230370015372021160", "230370010862021170"])
    def test_extra_trailing_digit_rejected(self, value):
        with pytest.raises(InvalidLengthError):
            validate_or_fail(value)

    def test_short_value_rejected(self):
        with pytest.raises(InvalidLengthError):
            validate_or_fail("2303700146220216")

    def test_empty(self):
        assert is_nup17("") is False
        assert validate("") is False
        with pytest.raises(EmptyValueError):
            validate_or_fail("")
        with pytest.raises(EmptyValueError):
            dv("")

    def test_fullwidth_digits_rejected(self):
        value = "２３０３７．００１４６２／２０２１－６５"
        assert validate(value) is False
        with pytest.raises(EmptyValueError):
            dv(value)
        with pytest.raises(EmptyValueError):
            mask(value)

    def test_validate_or_fail_returns_true(self):
        assert validate_or_fail("23037.001380/2021-11") is True

    @pytest.mark.parametrize("value", VALID)
    def test_flipped_check_digit_invalid(self, value):
        digits = only_digits(value)
        for index in (15, 16):
            for delta in range(1, 10):
                assert validate(flip_digit(digits, index, delta)) is False


class TestDV:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("23037.001380/2021", "11"),
            ("23037.001434/2021", "48"),
            ("23037.001321/2021", "42"),
            ("230370014622021", "65"),
            ("230370015372021", "16"),
            ("230370010862021", "17"),
        ],
    )
    def test_known_digits(self, body, expected):
        result = dv(body)
        assert result == expected
        assert isinstance(result, str)

    def test_full_number_ignores_trailing_digits(self):
        assert dv("23037001380202111") == "11"

    def test_short_body_rejected(self):
        with pytest.raises(InvalidLengthError):
            dv("2303700138")


class TestMask:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("23037001380202111", "23037.001380/2021-11"),
            ("23037001434202148", "23037.001434/2021-48"),
            ("23037001321202142", "23037.001321/2021-42"),
            ("23037001462202165", "23037.001462/2021-65"),
            ("23037001537202116", "23037.001537/2021-16"),
            ("23037001086202117", "23037.001086/2021-17"),
        ],
    )
    def test_mask(self, value, expected):
        masked = mask(value)
        assert masked == expected
        assert len(masked) == 20
        assert validate(masked) is True


class TestFake:
    def test_fake_without_mask(self, rng):
        for _ in range(FAKE_TRIALS):
            value = fake(rng=rng)
            assert len(value) == 17
            assert validate(value) is True

    def test_fake_with_mask(self, rng):
        for _ in range(FAKE_TRIALS):
            value = fake(True, rng=rng)
            assert len(value) == 20
            assert validate(value) is True

    def test_fake_default_random_source(self):
        assert validate(fake()) is True
