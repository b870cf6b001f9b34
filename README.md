# greatshop

A small interactive terminal shop for learning about sorting. It has a
fixed catalogue of fifteen electronics products. With it you can:

- browse the catalogue with full product details,
- list the products ordered by price or by rating,
- watch five classic sorting algorithms (insertion, selection, bubble,
  merge and quick sort) order the catalogue by price. Each one shows the
  list before and after sorting, followed by a short description of the
  algorithm.

## Installation

```
pip install .
```

## Running

```
greatshop
```

The home page offers three choices:

1. **Enter E-Commerce App**: view the products, see them sorted by price or
   by rating, go back to the home page, or quit the program.
2. **Test Sorting Algorithms**: pick one of the five algorithms and see it
   sort the catalogue by price, or go back to the home page.
3. **Exit**

Type the number of an option and press Enter. After each listing the
program waits for Enter before it shows the menu again. When output goes to
a terminal the screen is cleared before each menu. The program also stops
when its input ends.

## Using it as a library

```python
from greatshop.product import load_catalog, format_catalog
from greatshop.sorting import quick_sort, merge_sort, by_rating
from greatshop.storefront import sorted_by_rating, format_table
from greatshop.showcase import Algorithm, demonstrate

products = load_catalog()
cheapest_first = quick_sort(products)
print(format_table(sorted_by_rating(products)))
print(demonstrate(Algorithm.BUBBLE, products))
```

- `greatshop.product`: the frozen `Product` dataclass (`id`, `name`,
  `price`, `rating`, `description`), `load_catalog()` which returns a new
  list of the built-in products, and `format_catalog(products)` which renders
  the detailed listing.
- `greatshop.sorting`: `insertion_sort`, `selection_sort`, `bubble_sort` and
  `quick_sort` order products by price; `merge_sort(products, key=by_price)`
  orders by any key function, for example `by_rating` or
  `lambda p: p.rating`. Every function returns a new list and leaves its
  input unchanged.
- `greatshop.storefront`: `sorted_by_price`, `sorted_by_rating`,
  `format_table` and the shop menu `run_store(stdin, stdout)`.
- `greatshop.showcase`: the `Algorithm` enum, `demonstrate(algorithm,
  products)` which returns the before/after text, and the test page
  `run_sort_test(stdin, stdout)`.
- `greatshop.cli`: the home page `run_home(stdin, stdout)` and `main()`,
  the entry point of the `greatshop` command.

The interactive functions take any text streams, so they can be driven
from `io.StringIO` objects.

## What it does not do

The shop only shows products. There is no cart, ordering or checkout,
products cannot be added or edited, and nothing is saved: the catalogue is
built into the package and is the same on every run.

## Running the tests

```
pip install .[test]
pytest
```