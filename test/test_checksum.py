import random

import pytest

from gtinfix.checksum import compute_check_digit, is_ascii_numeric, zero_pad


@pytest.mark.parametrize(
    "code, expected",
    [
        ("000000000000", 0),
        ("123456789012", 2),
        ("123456789081", 1),
        ("036000291452", 2),
        ("999999999993", 3),
        ("0000000000000", 0),
        ("1234123412344", 4),
        ("9249874313545", 5),
        ("00000000000000", 0),
        ("01010101010104", 4),
        ("92498743135447", 7),
        ("12345670", 0),
    ],
)
def test_compute_check_digit_static_data(code, expected):
    assert compute_check_digit(code, len(code)) == expected


def test_check_position_is_ignored():
    assert compute_check_digit("1234567X", 8) == 0
    assert compute_check_digit("1234567", 8) == 0


def test_compute_check_digit_always_a_digit():
    rng = random.Random(1234)
    for _ in range(500):
        length = rng.choice((8, 12, 13, 14))
        body = "".join(rng.choice("0123456789") for _ in range(length - 1))
        assert 0 <= compute_check_digit(body, length) <= 9


def test_compute_check_digit_rejects_non_digits():
    with pytest.raises(ValueError):
        compute_check_digit("12a45670", 8)
    with pytest.raises(ValueError):
        compute_check_digit("١٢٣٤٥٦٧٠", 8)


def test_compute_check_digit_rejects_short_body():
    with pytest.raises(ValueError):
        compute_check_digit("123", 8)
    with pytest.raises(ValueError):
        compute_check_digit("", 0)


def test_is_ascii_numeric_valid_numbers():
    assert is_ascii_numeric("0")
    assert is_ascii_numeric("1")
    assert is_ascii_numeric("00")
    assert is_ascii_numeric("99")
    assert is_ascii_numeric("")  # nothing to disprove it


def test_is_ascii_numeric_invalid_numbers():
    assert not is_ascii_numeric("a")
    assert not is_ascii_numeric("0a")
    assert not is_ascii_numeric("-1")
    assert not is_ascii_numeric("4.2")
    assert not is_ascii_numeric(" 1")
    assert not is_ascii_numeric("１２")  # fullwidth
    assert not is_ascii_numeric("٣")


def test_zero_pad_static_data():
    assert zero_pad("hello", 6) == "0hello"
    assert zero_pad("", 0) == ""
    assert zero_pad("", 3) == "000"
    assert zero_pad("87248795257", 12) == "087248795257"


def test_zero_pad_string_longer_than_desired_length():
    assert zero_pad("hello", 3) == "hello"
    assert zero_pad("hello", 0) == "hello"


def test_zero_pad_idempotent():
    rng = random.Random(99)
    for _ in range(200):
        s = "".join(rng.choice("0123456789ab ") for _ in range(rng.randint(0, 16)))
        n = rng.randint(0, 16)
        once = zero_pad(s, n)
        assert zero_pad(once, n) == once
        assert len(once) == max(len(s), n)
