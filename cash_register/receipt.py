"""Receipt formatting utilities."""

from typing import Iterator

from .models import Product, SalesRecord
from .state import RegisterState


def format_receipt_line(product: Product, record: SalesRecord) -> str:
    """Format a single receipt line."""
    return (
        f"Product: {product.description}, "
        f"Sales price: {record.sales_price}, "
        f"Quantity: {record.quantity}"
    )


def receipt_lines(state: RegisterState) -> Iterator[str]:
    """Receipt lines with perishables before non-perishables."""
    for product, record in state.entries():
        yield format_receipt_line(product, record)
