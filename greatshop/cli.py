"""The home screen and the command that starts the shop."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from greatshop.showcase import run_sort_test
from greatshop.storefront import run_store

_LOGO_LINES = (
    " ▄▄▄▄▄▄▄▄▄▄▄  ▄▄▄▄▄▄▄▄▄▄▄  ▄▄▄▄▄▄▄▄▄▄▄  ▄▄▄▄▄▄▄▄▄▄▄  ▄▄▄▄▄▄▄▄▄▄▄       ▄▄▄▄▄▄▄▄▄▄▄  ▄         ▄  ▄▄▄▄▄▄▄▄▄▄▄  ▄▄▄▄▄▄▄▄▄▄▄ ",
    "▐░░░░░░░░░░░▌▐░░░░░░░░░░░▌▐░░░░░░░░░░░▌▐░░░░░░░░░░░▌▐░░░░░░░░░░░▌     ▐░░░░░░░░░░░▌▐░▌       ▐░▌▐░░░░░░░░░░░▌▐░░░░░░░░░░░▌",
    "▐░█▀▀▀▀▀▀▀▀▀ ▐░█▀▀▀▀▀▀▀█░▌▐░█▀▀▀▀▀▀▀▀▀ ▐░█▀▀▀▀▀▀▀█░▌ ▀▀▀▀█░█▀▀▀▀      ▐░█▀▀▀▀▀▀▀▀▀ ▐░▌       ▐░▌▐░█▀▀▀▀▀▀▀█░▌▐░█▀▀▀▀▀▀▀█░▌",
    "▐░▌          ▐░▌       ▐░▌▐░▌          ▐░▌       ▐░▌     ▐░▌          ▐░▌          ▐░▌       ▐░▌▐░▌       ▐░▌▐░▌       ▐░▌",
    "▐░▌ ▄▄▄▄▄▄▄▄ ▐░█▄▄▄▄▄▄▄█░▌▐░█▄▄▄▄▄▄▄▄▄ ▐░█▄▄▄▄▄▄▄█░▌     ▐░▌          ▐░█▄▄▄▄▄▄▄▄▄ ▐░█▄▄▄▄▄▄▄█░▌▐░▌       ▐░▌▐░█▄▄▄▄▄▄▄█░▌",
    "▐░▌▐░░░░░░░░▌▐░░░░░░░░░░░▌▐░░░░░░░░░░░▌▐░░░░░░░░░░░▌     ▐░▌          ▐░░░░░░░░░░░▌▐░░░░░░░░░░░▌▐░▌       ▐░▌▐░░░░░░░░░░░▌",
    "▐░▌ ▀▀▀▀▀▀█░▌▐░█▀▀▀▀█░█▀▀ ▐░█▀▀▀▀▀▀▀▀▀ ▐░█▀▀▀▀▀▀▀█░▌     ▐░▌           ▀▀▀▀▀▀▀▀▀█░▌▐░█▀▀▀▀▀▀▀█░▌▐░▌       ▐░▌▐░█▀▀▀▀▀▀▀▀▀ ",
    "▐░▌       ▐░▌▐░▌     ▐░▌  ▐░▌          ▐░▌       ▐░▌     ▐░▌                    ▐░▌▐░▌       ▐░▌▐░▌       ▐░▌▐░▌          ",
    "▐░█▄▄▄▄▄▄▄█░▌▐░▌      ▐░▌ ▐░█▄▄▄▄▄▄▄▄▄ ▐░▌       ▐░▌     ▐░▌           ▄▄▄▄▄▄▄▄▄█░▌▐░▌       ▐░▌▐░█▄▄▄▄▄▄▄█░▌▐░▌          ",
    "▐░░░░░░░░░░░▌▐░▌       ▐░▌▐░░░░░░░░░░░▌▐░▌       ▐░▌     ▐░▌          ▐░░░░░░░░░░░▌▐░▌       ▐░▌▐░░░░░░░░░░░▌▐░▌          ",
    " ▀▀▀▀▀▀▀▀▀▀▀  ▀         ▀  ▀▀▀▀▀▀▀▀▀▀▀  ▀         ▀       ▀            ▀▀▀▀▀▀▀▀▀▀▀  ▀         ▀  ▀▀▀▀▀▀▀▀▀▀▀  ▀           ",
    " " * 122,
)

_WELCOME_LINES = (
    "╦ ╦╔═╗╦  ╦  ╔═╗╔═╗╔╦╗╔═╗  ╔╦╗╔═╗  ╔═╗╦ ╦╦═╗  ╔═╗╦ ╦╔═╗╔═╗",
    "║║║║╣ ║  ║  ║  ║ ║║║║║╣    ║ ║ ║  ║ ║║ ║╠╦╝  ╚═╗╠═╣║ ║╠═╝",
    "╚╩╝╚═╝╩═╝╩═╝╚═╝╚═╝╩ ╩╚═╝   ╩ ╚═╝  ╚═╝╚═╝╩╚═  ╚═╝╩ ╩╚═╝╩  ",
)

_TAGLINE_LINES = (
    "╦ ╦┌─┐┬ ┬┬─┐  ┌─┐┌┐┌┌─┐  ┌─┐┌┬┐┌─┐┌─┐  ┌┬┐┌─┐┌─┐┌┬┐┬┌┐┌┌─┐┌┬┐┬┌─┐┌┐┌  ┌─┐┌─┐┬─┐  ┌─┐┬  ┬┌─┐┬─┐┬ ┬┌┬┐┬ ┬┬┌┐┌┌─┐  ┬ ┬┌─┐┬ ┬  ┌┐┌┌─┐┌─┐┌┬┐ ",
    "╚╦╝│ ││ │├┬┘  │ ││││├┤───└─┐ │ │ │├─┘   ││├┤ └─┐ │ ││││├─┤ │ ││ ││││  ├┤ │ │├┬┘  ├┤ └┐┌┘├┤ ├┬┘└┬┘ │ ├─┤│││││ ┬  └┬┘│ ││ │  │││├┤ ├┤  ││ ",
    " ╩ └─┘└─┘┴└─  └─┘┘└┘└─┘  └─┘ ┴ └─┘┴    ─┴┘└─┘└─┘ ┴ ┴┘└┘┴ ┴ ┴ ┴└─┘┘└┘  └  └─┘┴└─  └─┘ └┘ └─┘┴└─ ┴  ┴ ┴ ┴┴┘└┘└─┘   ┴ └─┘└─┘  ┘└┘└─┘└─┘─┴┘o",
)

_DASHES = "-" * 92 + "\n"


def _block(lines: tuple[str, ...]) -> str:
    return "\n" + "\n".join(lines) + "\n"


_HOME_SCREEN = (
    _block(_LOGO_LINES)
    + "\n\n"
    + _block(_WELCOME_LINES)
    + "\n\n"
    + _block(_TAGLINE_LINES)
    + "\n\n Our app lets you browse products, compare prices, and test different sorting algorithms\n"
    "to help you understand which one works best.\n\n"
    "\n"
    + _DASHES
    + "                            1. Enter E-Commerce App\n\n"
    "                            2. Test Sorting Algorithms\n\n"
    "                            3. Exit\n"
    + _DASHES
    + "Enter your option >_"
)


def _clear(stdout: TextIO) -> None:
    if stdout.isatty():
        stdout.write("\033[2J\033[H")


def _read_choice(stdin: TextIO) -> int | None:
    while True:
        line = stdin.readline()
        if not line:
            raise EOFError
        if line.strip():
            break
    match = re.match(r"\s*([+-]?\d+)", line)
    return int(match.group(1)) if match else None


def run_home(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Show the home screen and dispatch to the shop or the sorting tests."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    while True:
        _clear(stdout)
        stdout.write(_HOME_SCREEN)
        stdout.flush()
        try:
            option = _read_choice(stdin)
        except EOFError:
            return
        if option == 1:
            run_store(stdin, stdout)
        elif option == 2:
            run_sort_test(stdin, stdout)
        elif option == 3:
            stdout.write("Exiting the application. Goodbye!")
            stdout.flush()
            return
        else:
            stdout.write("invalid option")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive shop on the terminal."""
    parser = argparse.ArgumentParser(
        prog="greatshop",
        description="Browse products and explore sorting algorithms.",
    )
    parser.parse_args(argv)
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        try:
            reconfigure(encoding="utf-8")
        except (ValueError, OSError):
            pass
    run_home(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())