import pytest

from pushswap.parsing import (
    PushSwapError,
    check_duplicates,
    index_values,
    parse_number,
    parse_numbers,
    validate_arguments,
)


@pytest.mark.parametrize(
    "args",
    [[], [""], [" 1"], ["1a"], ["-"], ["+ 1"], ["1 -"], ["1", "x"], ["1\t2"]],
)
def test_validate_rejects(args):
    with pytest.raises(PushSwapError) as info:
        validate_arguments(args)
    assert info.value.message == "ERROR"


def test_validate_accepts_and_parse_reads_all_words():
    args = ["1", "-2 +3", "4 "]
    validate_arguments(args)
    assert parse_numbers(args) == [1, -2, 3, 4]


@pytest.mark.parametrize("text", ["42", "-2147483647", "2147483647", "+17"])
def test_parse_number_round_trip(text):
    assert parse_number(text) == int(text)


def test_parse_number_empty_is_zero():
    assert parse_number("") == 0


@pytest.mark.parametrize("text", ["2147483648", "-2147483648", "99999999999"])
def test_parse_number_overflow(text):
    with pytest.raises(PushSwapError) as info:
        parse_number(text)
    assert info.value.message == "Error"


@pytest.mark.parametrize("text", ["1-2", "--1", "12+"])
def test_parse_number_stray_characters(text):
    with pytest.raises(PushSwapError) as info:
        parse_number(text)
    assert info.value.message == "ERROR"


def test_check_duplicates():
    assert check_duplicates([3, 1, 2]) is None
    with pytest.raises(PushSwapError) as info:
        check_duplicates([3, 1, 3])
    assert info.value.message == "ERROR"


def test_index_values_example():
    assert index_values([-5, 100, 3]) == [0, 2, 1]


def test_index_values_preserves_order():
    values = [40, -7, 13, 2147483647, 0, -2147483647, 8]
    indices = index_values(values)
    assert sorted(indices) == list(range(len(values)))
    for i, first in enumerate(values):
        for j, second in enumerate(values):
            assert (first < second) == (indices[i] < indices[j])