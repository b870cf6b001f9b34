import io

import pytest

from greatshop.cli import main, run_home


def _run(feed):
    out = io.StringIO()
    run_home(io.StringIO(feed), out)
    return out.getvalue()


def test_exit_from_home():
    text = _run("3\n")
    assert text.endswith("Exiting the application. Goodbye!")
    assert "1. Enter E-Commerce App" in text
    assert "2. Test Sorting Algorithms" in text


def test_invalid_option_shows_menu_again():
    text = _run("9\n3\n")
    assert "invalid option" in text
    assert text.count("Enter your option >_") == 2


def test_enter_store_and_return():
    text = _run("1\n4\n\n3\n")
    assert "Great-Shopping" in text
    assert "Returning to the home page...\n" in text
    assert text.endswith("Goodbye!")


def test_enter_sort_test_and_return():
    text = _run("2\n6\n\n3\n")
    assert "Sorting Algorithms Test" in text
    assert "Returning to home page...\n" in text
    assert text.endswith("Goodbye!")


def test_store_exit_ends_program():
    out = io.StringIO()
    with pytest.raises(SystemExit) as info:
        run_home(io.StringIO("1\n5\n"), out)
    assert info.value.code == 0


def test_end_of_input_returns():
    text = _run("")
    assert text.endswith("Enter your option >_")


def test_main_runs_home(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main([]) == 0
    assert "Exiting the application. Goodbye!" in capsys.readouterr().out