import pytest

from boggle.test_utils import scripted_console


def test_get_line():
    console, out = scripted_console("hello", "")
    assert console.get_line("? ") == "hello"
    assert console.get_line("? ") == ""
    with pytest.raises(EOFError):
        console.get_line("? ")
    assert out.getvalue() == "? ? ? "


def test_get_line_keeps_whitespace():
    console, _ = scripted_console("  spaced  ")
    assert console.get_line() == "  spaced  "


def test_get_yes_or_no():
    console, out = scripted_console("maybe", "", "YES", "nope")
    assert console.get_yes_or_no("Continue? ") is True
    assert console.get_yes_or_no("Continue? ") is False
    assert out.getvalue().count("Please type a word that begins with 'y' or 'n'.") == 2


def test_clear_skips_non_tty():
    console, out = scripted_console()
    console.clear()
    assert out.getvalue() == ""
