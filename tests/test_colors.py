import pytest

from minitalk.colors import Color, colorize


def test_escape_sequences_match_terminal_codes():
    assert colorize("a", Color.RED) == "\033[31ma\033[0m"
    assert colorize("a", Color.CLEAR) == "\033[2J\033[Ha\033[0m"
    assert colorize("", Color.RESET) == "\033[0m\033[0m"


def test_str_of_member_is_its_sequence():
    assert str(Color.GREEN) == "\033[32m"
    assert colorize("go", "green") == str(Color.GREEN) + "go" + str(Color.RESET)


def test_colorize_wraps_text_with_reset():
    assert colorize("hello", Color.YELLOW) == "\033[33mhello\033[0m"


def test_colorize_accepts_name_in_any_case():
    assert colorize("x", "magenta") == colorize("x", Color.MAGENTA)
    assert colorize("x", "Cyan") == colorize("x", Color.CYAN)


def test_colorize_keeps_text_intact():
    result = colorize("some text", Color.BLUE)
    assert result.startswith(Color.BLUE.value)
    assert result.endswith(Color.RESET.value)
    assert result[len(Color.BLUE.value):-len(Color.RESET.value)] == "some text"


def test_colorize_unknown_name_raises():
    with pytest.raises(ValueError):
        colorize("x", "chartreuse")