import pytest

from islandroutes.numbers import hex_to_int, int_sqrt, int_to_hex, power


@pytest.mark.parametrize("number", [1, 9, 10, 15, 16, 255, 4096, 0xDEADBEEF, 2**40 + 3])
def test_hex_round_trip(number):
    text = int_to_hex(number)
    assert hex_to_int(text) == number
    assert text == text.lower()
    assert not text.startswith("0")


def test_hex_to_int_known_value():
    assert hex_to_int("ff") == 255


def test_hex_to_int_accepts_both_cases():
    assert hex_to_int("ABCDEF") == hex_to_int("abcdef")
    assert hex_to_int("Ff") == hex_to_int("fF")


def test_hex_to_int_empty_is_zero():
    assert hex_to_int("") == 0


@pytest.mark.parametrize("text", ["0x10", "g", "12 ", "-1"])
def test_hex_to_int_rejects_invalid_digits(text):
    with pytest.raises(ValueError):
        hex_to_int(text)


def test_int_to_hex_of_zero_is_empty():
    assert int_to_hex(0) == ""


def test_int_to_hex_rejects_negative():
    with pytest.raises(ValueError):
        int_to_hex(-1)


@pytest.mark.parametrize("root", [1, 2, 3, 12, 100, 46340])
def test_int_sqrt_of_perfect_square(root):
    assert int_sqrt(root * root) == root
    assert int_sqrt(root * root + 1) == 0


@pytest.mark.parametrize("x", [0, 1])
def test_int_sqrt_of_zero_and_one(x):
    assert int_sqrt(x) == x


@pytest.mark.parametrize("x", [-1, -4, -2147483647])
def test_int_sqrt_of_negative_is_zero(x):
    assert int_sqrt(x) == 0


@pytest.mark.parametrize("base", [2.0, -3.0, 0.5, 0.0, 7.0])
def test_power_of_zero_exponent_is_one(base):
    assert power(base, 0) == 1


@pytest.mark.parametrize("base, exponent", [(2.0, 5), (-3.0, 4), (1.5, 3), (10.0, 2)])
def test_power_steps_by_one_factor(base, exponent):
    assert power(base, exponent + 1) == power(base, exponent) * base


def test_power_known_value():
    assert power(2, 10) == 1024.0


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2.0, -1)