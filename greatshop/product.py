"""The product record and the shop's built-in catalogue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

_RULE = "-" * 89
_HEADER = "\n================== Product List ==================\n"
_FOOTER = "=" * 50 + "\n"


@dataclass(frozen=True)
class Product:
    """A single item offered by the shop."""

    id: int
    name: str
    price: float
    rating: float
    description: str


_CATALOG: tuple[Product, ...] = (
    Product(1, "Laptop", 999.99, 4.5, "High-performance laptop with 16GB RAM and 512GB SSD."),
    Product(2, "Smartphone", 599.99, 4.2, "Latest smartphone with a 6.5-inch display and 128GB storage."),
    Product(3, "Headphones", 199.99, 4.8, "Noise-cancelling headphones with superior sound quality."),
    Product(4, "Monitor", 299.99, 4.1, "27-inch 4K monitor with HDR support."),
    Product(5, "Keyboard", 49.99, 4.0, "Mechanical keyboard with customizable RGB backlighting."),
    Product(6, "Mouse", 29.99, 4.3, "Wireless mouse with ergonomic design and long battery life."),
    Product(7, "Smartwatch", 249.99, 4.6, "Smartwatch with fitness tracking and heart rate monitoring."),
    Product(8, "Tablet", 399.99, 4.4, "10-inch tablet with high-resolution display and 64GB storage."),
    Product(9, "External Hard Drive", 89.99, 4.5, "1TB external hard drive with USB 3.0 connectivity."),
    Product(10, "Bluetooth Speaker", 79.99, 4.7, "Portable Bluetooth speaker with deep bass and long battery life."),
    Product(11, "Gaming Console", 499.99, 4.9, "Next-gen gaming console with 4K gaming capabilities."),
    Product(12, "Webcam", 89.99, 4.3, "1080p webcam with built-in microphone for video calls."),
    Product(13, "Router", 129.99, 4.2, "High-speed Wi-Fi router with dual-band support."),
    Product(14, "Smart TV", 799.99, 4.8, "55-inch 4K Smart TV with streaming capabilities."),
    Product(15, "Fitness Tracker", 99.99, 4.5, "Wearable fitness tracker with step counting and sleep monitoring."),
)


def load_catalog() -> list[Product]:
    """Return a fresh list holding the shop's products in catalogue order."""
    return list(_CATALOG)


def _number(value: float) -> str:
    """Format a number the way a default stream would: six significant digits."""
    return f"{value:g}"


def format_catalog(products: Iterable[Product]) -> str:
    """Render products as the detailed catalogue listing."""
    lines = [_HEADER]
    for product in products:
        lines.append(_RULE + "\n")
        lines.append(f"| ID: {str(product.id):<41}{' ' * 43}\n")
        lines.append(f"| Name: {product.name:<38}{' ' * 39}\n")
        lines.append(f"| Description: {product.description:<31}{' ' * 25}\n")
        lines.append(f"| Price: ${_number(product.price):<37}{' ' * 36}\n")
        lines.append(f"| Rating: {_number(product.rating):<36}{' ' * 35}\n")
        lines.append(_RULE + "\n")
    lines.append(_FOOTER)
    return "".join(lines)