"""Step-by-step demonstrations of the sorting algorithms on the catalogue."""

from __future__ import annotations

import re
import sys
from enum import Enum
from typing import Callable, Iterable, TextIO

from greatshop.product import Product, load_catalog
from greatshop.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

_RULE = "-" * 94 + "\n"
_DOTS_BEFORE = "." * 31
_DOTS_AFTER = "." * 35

_INSERTION_TEXT = (
    "Insertion sort is best suited for sorting small to moderately sized product lists in an e-commerce app, \n"
    "    as it efficiently places each product into its correct position one at a time. Compared to selection sort and\n"
    "     bubble sort, it generally performs fewer swaps, making it faster for mostly sorted product lists, such as \n"
    "     when prices are updated slightly or new products are added incrementally. However, for larger product \n"
    "     catalogs or frequent sorting demands, more advanced algorithms like merge sort and quick sort can handle higher\n"
    "      data volumes more efficiently by dividing the list and combining results, while heap sort provides a reliable\n"
    "       option with a consistent performance. Overall, insertion sort is ideal when you expect smaller, incremental \n"
    "       changes in your product list that require quick and straightforward sorting by price or rating."
)

_SELECTION_TEXT = (
    "\n"
    "Selection sort is a simple yet intuitive sorting method that repeatedly finds the minimum-priced \n"
    "product from the unsorted section of the product list and swaps it into its correct position. \n"
    "While it is easy to understand and implement, it is less efficient than insertion sort for nearly\n"
    " sorted lists and tends to be slower than merge sort and quick sort for larger e-commerce product\n"
    " catalogs. This makes selection sort more suitable for educational purposes or small product lists\n"
    "  where transparency and simplicity of the algorithm are more important than speed, especially when \n"
    "  users might want to see how sorting happens step by step."
)

_BUBBLE_TEXT = (
    " \n"
    "Bubble sort is a straightforward sorting technique that repeatedly compares adjacent products \n"
    "and swaps them if they are in the wrong order based on price. Though simple to understand \n"
    "and implement, it is the least efficient among all the classic sorting algorithms for \n"
    "large product catalogs. Bubble sort performs many comparisons and swaps, making it slow \n"
    "when sorting extensive e-commerce product lists, but it can be useful for small or nearly \n"
    "sorted lists where you want to demonstrate step-by-step progress and visualize each swap \n"
    "clearly for learning or debugging purposes."
)

_MERGE_TEXT = (
    " \n"
    "Merge sort is a highly efficient, stable, and divide-and-conquer-based sorting algorithm that \n"
    "recursively divides the product list into smaller sublists until each contains a single product. \n"
    "It then merges these sublists in a sorted manner, ensuring that the products are ordered by \n"
    "price. Unlike simpler algorithms like bubble sort, merge sort has a consistent time complexity \n"
    "of O(n log n), making it well-suited for large product catalogs in e-commerce applications \n"
    "where performance is critical. However, it requires additional memory to store temporary \n"
    "lists during the merge step, which is a trade-off for its speed and stability."
)

_QUICK_TEXT = (
    "Quick Sort is a fast, divide-and-conquer sorting algorithm that efficiently organizes \n"
    "a product list based on price. It selects a pivot point, then partitions the list \n"
    "so that all products with lower prices are on one side and higher prices on the other.\n"
    "It then recursively sorts each partition. This method is especially useful \n"
    "for sorting large or frequently updated product lists in an e-commerce application,\n"
    "as it can handle large data volumes more efficiently than simpler algorithms like \n"
    "bubble sort or insertion sort."
)


class Algorithm(Enum):
    """The algorithms on offer, in menu order, with how each one is presented."""

    INSERTION = ("Insertion Sort By Price of product", "Name", "Price", "||", "DESCRIPTION", _INSERTION_TEXT)
    SELECTION = ("Selection Sort By Price", "name", "price", "||", "Description", _SELECTION_TEXT)
    BUBBLE = ("Bubble Sort By Price", "name", "price", "||", "Description", _BUBBLE_TEXT)
    MERGE = ("Merge Sort By Price", "name", "price", "||", "Description", _MERGE_TEXT)
    QUICK = ("Quick Sort By Price", "name", "price", " ||", "DESCRIPTION", _QUICK_TEXT)

    def __init__(self, title, name_label, price_label, separator, heading, description):
        self.title = title
        self.name_label = name_label
        self.price_label = price_label
        self.separator = separator
        self.heading = heading
        self.description = description

    def sort(self, products: Iterable[Product]) -> list[Product]:
        """Return the products sorted by price with this algorithm."""
        return _SORTERS[self](products)

    def line(self, product: Product) -> str:
        """Render one product as a listing line."""
        return (
            f"Id->{product.id}  {self.name_label}->{product.name}{self.separator}"
            f"  {self.price_label}==>{product.price:g}\n"
        )


_SORTERS: dict[Algorithm, Callable[[Iterable[Product]], list[Product]]] = {
    Algorithm.INSERTION: insertion_sort,
    Algorithm.SELECTION: selection_sort,
    Algorithm.BUBBLE: bubble_sort,
    Algorithm.MERGE: merge_sort,
    Algorithm.QUICK: quick_sort,
}

_MENU = (
    "*" * 84 + "\n"
    "*" + " " * 82 + "*\n"
    "*                              Sorting Algorithms Test                             *\n"
    + "*" * 84 + "\n"
    "\nWellcome to sorting algorithms test page here u will be able to test\n"
    "different sorting algorithms and compare their performance.\n"
    "\n\n"
    "1. insertion sort\n"
    "2. selection sort\n"
    "3. bubble sort\n"
    "4. merge sort\n"
    "5. quick sort\n"
    "6. back to home page\n"
    "\nEnter your choice >_"
)


def demonstrate(algorithm: Algorithm, products: Iterable[Product]) -> str:
    """Show the products before and after sorting, followed by a description."""
    before = list(products)
    after = algorithm.sort(before)
    parts = [f"{_DOTS_BEFORE}{algorithm.title}{_DOTS_AFTER}\n", "\n\nBefore Sorting:\n"]
    parts.extend(algorithm.line(product) for product in before)
    parts.append(_RULE)
    parts.append("\n\nAfter Sorting:\n")
    parts.extend(algorithm.line(product) for product in after)
    parts.append(_RULE)
    parts.append(f"\n\n{algorithm.heading}\n\n")
    parts.append(algorithm.description)
    return "".join(parts)


def _clear(stdout: TextIO) -> None:
    if stdout.isatty():
        stdout.write("\033[2J\033[H")


def _pause(stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("Press any key to continue . . . ")
    stdout.flush()
    stdin.readline()
    stdout.write("\n")


def _read_choice(stdin: TextIO) -> int | None:
    """Read the next non-blank line and take its leading integer; EOFError at end."""
    while True:
        line = stdin.readline()
        if not line:
            raise EOFError
        if line.strip():
            break
    match = re.match(r"\s*([+-]?\d+)", line)
    return int(match.group(1)) if match else None


def run_sort_test(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Run the interactive sorting-algorithm test page until the user goes back."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    algorithms = list(Algorithm)
    while True:
        _clear(stdout)
        stdout.write(_MENU)
        stdout.flush()
        try:
            choice = _read_choice(stdin)
        except EOFError:
            return
        if choice is not None and 1 <= choice <= len(algorithms):
            _clear(stdout)
            stdout.write(demonstrate(algorithms[choice - 1], load_catalog()))
            _pause(stdin, stdout)
        elif choice == len(algorithms) + 1:
            stdout.write("Returning to home page...\n")
            _pause(stdin, stdout)
            return
        else:
            stdout.write("Invalid choice. Please try again.\n")