import dataclasses

import pytest

from greatshop.product import Product, format_catalog, load_catalog


def test_catalog_has_fifteen_products_in_id_order():
    catalog = load_catalog()
    assert [p.id for p in catalog] == list(range(1, 16))


def test_first_product_values():
    laptop = load_catalog()[0]
    assert laptop.name == "Laptop"
    assert laptop.price == 999.99
    assert laptop.rating == 4.5
    assert laptop.description == "High-performance laptop with 16GB RAM and 512GB SSD."


def test_load_catalog_returns_independent_lists():
    first = load_catalog()
    first.clear()
    assert len(load_catalog()) == 15


def test_product_is_immutable():
    product = load_catalog()[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        product.price = 1.0
    assert product.price == 999.99
    assert load_catalog()[0].price == 999.99


def test_format_catalog_contains_every_product_name():
    catalog = load_catalog()
    text = format_catalog(catalog)
    for product in catalog:
        assert f"| Name: {product.name}" in text


def test_format_catalog_price_and_rating_lines():
    text = format_catalog(load_catalog()[:1])
    assert "| Price: $999.99" in text
    assert "| Rating: 4.5" in text
    assert "| ID: 1" in text


def test_whole_rating_printed_without_decimals():
    keyboard = load_catalog()[4]
    text = format_catalog([keyboard])
    assert "| Rating: 4 " in text


def test_format_catalog_frame_for_empty_list():
    text = format_catalog([])
    assert text.startswith("\n================== Product List ==================\n")
    assert text.endswith("=" * 50 + "\n")
    assert "| ID:" not in text


def test_each_product_block_has_five_fields():
    catalog = load_catalog()
    text = format_catalog(catalog)
    for field in ("| ID: ", "| Name: ", "| Description: ", "| Price: $", "| Rating: "):
        assert text.count(field) == len(catalog)


def test_custom_product_round_trips_into_listing():
    item = Product(42, "Widget", 12.5, 3.25, "A small widget.")
    text = format_catalog([item])
    assert "| Name: Widget" in text
    assert "| Price: $12.5" in text
    assert "| Rating: 3.25" in text
    assert "| Description: A small widget." in text