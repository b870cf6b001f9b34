import io

import pytest

from greatshop.product import format_catalog, load_catalog
from greatshop.storefront import (
    format_table,
    run_store,
    sorted_by_price,
    sorted_by_rating,
)


def _run(feed):
    out = io.StringIO()
    run_store(io.StringIO(feed), out)
    return out.getvalue()


def test_sorted_by_price_orders_prices():
    result = sorted_by_price(load_catalog())
    prices = [p.price for p in result]
    assert prices == sorted(prices)
    assert sorted(p.id for p in result) == [p.id for p in load_catalog()]


def test_sorted_by_rating_orders_ratings():
    result = sorted_by_rating(load_catalog())
    ratings = [p.rating for p in result]
    assert ratings == sorted(ratings)
    assert sorted(p.id for p in result) == [p.id for p in load_catalog()]


def test_sorting_leaves_input_untouched():
    products = load_catalog()
    sorted_by_price(products)
    sorted_by_rating(products)
    assert products == load_catalog()


def test_format_table_shape():
    products = load_catalog()
    lines = format_table(products).splitlines()
    assert len(lines) == len(products) + 4
    header = lines[1]
    for word in ("Id", "Name", "Price", "Rating"):
        assert word in header
    rows = lines[3:-1]
    assert all(len(row) == len(header) for row in rows)
    assert lines[0] == lines[2] == lines[-1]


def test_format_table_rows_follow_input_order():
    products = sorted_by_price(load_catalog())
    rows = format_table(products).splitlines()[3:-1]
    assert [int(row.split()[0]) for row in rows] == [p.id for p in products]


def test_format_table_two_decimals():
    products = load_catalog()
    rows = format_table(products).splitlines()[3:-1]
    for row, product in zip(rows, products):
        assert row.endswith(f"{product.rating:.2f}")
        assert f"{product.price:.2f}" in row


def test_format_table_empty():
    lines = format_table([]).splitlines()
    assert len(lines) == 4


def test_view_products():
    text = _run("1\n\n4\n\n")
    assert "Here are products that are available\n" in text
    assert format_catalog(load_catalog()) in text
    assert "Returning to the home page...\n" in text


def test_sort_by_price_option():
    text = _run("2\n\n4\n\n")
    assert "products being sorted by price...\n" in text
    assert format_table(sorted_by_price(load_catalog())) in text


def test_sort_by_rating_option():
    text = _run("3\n\n4\n\n")
    assert "products being sorted by ratings...\n" in text
    assert format_table(sorted_by_rating(load_catalog())) in text


@pytest.mark.parametrize("feed", ["7\n4\n\n", "abc\n4\n\n"])
def test_invalid_option(feed):
    text = _run(feed)
    assert "Invalid option. Please try again.\n" in text


def test_exit_ends_program():
    out = io.StringIO()
    with pytest.raises(SystemExit) as info:
        run_store(io.StringIO("5\n"), out)
    assert info.value.code == 0
    assert "Exiting the application Goodbye\n" in out.getvalue()


def test_end_of_input_returns():
    text = _run("")
    assert text.endswith("Enter your option >_")
    assert "Great-Shopping" in text