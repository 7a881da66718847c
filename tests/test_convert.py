import pytest

from minitalk.convert import atoi, itoa


@pytest.mark.parametrize("text, expected", [
    ("42", 42),
    ("-42", -42),
    ("+42", 42),
    ("0", 0),
    ("   \t\n\v\f\r123", 123),
    ("  -17abc", -17),
    ("2147483647", 2147483647),
    ("-2147483648", -2147483648),
])
def test_atoi_values(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "+-5", "-+5", "--5", "   ", "- 5"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483649") == 2147483647


def test_atoi_stops_at_first_non_digit():
    assert atoi("12 34") == 12
    assert atoi("7.5") == 7


@pytest.mark.parametrize("n", [0, 42, -42, 2147483647, -2147483648])
def test_itoa_values(n):
    assert itoa(n) == str(n)


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, -99999, 2147483647, -2147483648])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_rejects_non_integer():
    with pytest.raises(TypeError):
        itoa(1.5)