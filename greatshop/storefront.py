"""The shop front: browse the catalogue and view it sorted by price or rating."""

from __future__ import annotations

import re
import sys
from typing import Iterable, TextIO

from greatshop.product import Product, format_catalog, load_catalog
from greatshop.sorting import by_rating, merge_sort

_RULE = "-" * 91 + "\n"

_MENU = (
    "*************************  Great-Shopping   *************************"
    "\n\n"
    + "_" * 121
    + "\n\n"
    "                  1.View products\n"
    "                  2.Sort product by price\n"
    "                  3.Sort product by ratings\n"
    "                  4.Back to Home page\n"
    "                  5.Exit"
    "\n\n"
    "Enter your option >_"
)


def format_table(products: Iterable[Product]) -> str:
    """Render products as a compact table of id, name, price and rating."""
    lines = [_RULE, f"{'Id':<6}{'Name':<25}{'Price':>12}{'Rating':>10}\n", _RULE]
    for product in products:
        lines.append(
            f"{str(product.id):<6}{product.name:<25}"
            f"{product.price:>12.2f}{product.rating:>10.2f}\n"
        )
    lines.append(_RULE)
    return "".join(lines)


def sorted_by_price(products: Iterable[Product]) -> list[Product]:
    """Return the products ordered by price with merge sort."""
    return merge_sort(products)


def sorted_by_rating(products: Iterable[Product]) -> list[Product]:
    """Return the products ordered by rating with merge sort."""
    return merge_sort(products, by_rating)


def _clear(stdout: TextIO) -> None:
    if stdout.isatty():
        stdout.write("\033[2J\033[H")


def _pause(stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("Press any key to continue . . . ")
    stdout.flush()
    stdin.readline()
    stdout.write("\n")


def _read_choice(stdin: TextIO) -> int | None:
    while True:
        line = stdin.readline()
        if not line:
            raise EOFError
        if line.strip():
            break
    match = re.match(r"\s*([+-]?\d+)", line)
    return int(match.group(1)) if match else None


def run_store(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Run the shop menu until the user goes back; exiting the shop ends the program."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    while True:
        _clear(stdout)
        stdout.write(_MENU)
        stdout.flush()
        try:
            choice = _read_choice(stdin)
        except EOFError:
            return
        if choice == 1:
            _clear(stdout)
            stdout.write("Here are products that are available\n")
            stdout.write(format_catalog(load_catalog()))
            _pause(stdin, stdout)
        elif choice == 2:
            _clear(stdout)
            stdout.write("products being sorted by price...\n")
            stdout.write(format_table(sorted_by_price(load_catalog())))
            _pause(stdin, stdout)
        elif choice == 3:
            _clear(stdout)
            stdout.write("products being sorted by ratings...\n")
            stdout.write(format_table(sorted_by_rating(load_catalog())))
            _pause(stdin, stdout)
        elif choice == 4:
            stdout.write("Returning to the home page...\n")
            _pause(stdin, stdout)
            return
        elif choice == 5:
            stdout.write("Exiting the application Goodbye\n")
            stdout.flush()
            raise SystemExit(0)
        else:
            stdout.write("Invalid option. Please try again.\n")