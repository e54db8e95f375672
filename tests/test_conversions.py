from collections import Counter

import pytest

from solong.conversions import atoi, atol, itoa, lower_hex, sort_ints


@pytest.mark.parametrize("number", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == atoi("-42")
    assert atoi("  +17xyz9") == atoi("17")


def test_atoi_rejects_repeated_signs():
    assert atoi("   +--+-+-+54asdf2") == 0


def test_atoi_empty_and_garbage():
    assert atoi("") == atoi("0")
    assert atoi("abc") == atoi("0")


def test_atoi_wraps_at_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


def test_atol_holds_values_beyond_32_bits():
    assert atol("9223372036854775807") == 9223372036854775807
    assert atol("  -2147483649") == -2147483649
    assert atol("9223372036854775808") == -9223372036854775808


def test_itoa_extreme_int():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("number", [0, 9, 10, 15, 16, 4095, 2147483647])
def test_lower_hex_round_trip(number):
    text = lower_hex(number)
    assert int(text, 16) == number
    assert text == text.lower()


def test_lower_hex_pinned():
    assert lower_hex(255) == "ff"


def test_lower_hex_negative_raises():
    with pytest.raises(ValueError):
        lower_hex(-1)


def test_sort_ints_source_example():
    assert sort_ints([2, 5, 1, 0, 4, -9]) == [-9, 0, 1, 2, 4, 5]


@pytest.mark.parametrize(
    "values", [[], [3], [3, 3, 1], [10, -10, 0, 7, 7, -3], list(range(20, 0, -1))]
)
def test_sort_ints_is_ordered_permutation(values):
    original = list(values)
    result = sort_ints(values)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert Counter(result) == Counter(original)
    assert values == original