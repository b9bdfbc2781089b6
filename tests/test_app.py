import pytest

from invaders.app import format_with_leading_zeros, main


def test_pads_to_width():
    assert format_with_leading_zeros(42, 5) == "00042"


def test_zero_is_all_zeros():
    assert format_with_leading_zeros(0, 5) == "00000"


def test_longer_number_is_unchanged():
    assert format_with_leading_zeros(123456, 5) == "123456"


@pytest.mark.parametrize("number", [0, 7, 99, 12345, 99999])
def test_padded_length_and_value(number):
    text = format_with_leading_zeros(number, 5)
    assert len(text) == 5
    assert int(text) == number


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--no-such-option"])
    assert info.value.code == 2