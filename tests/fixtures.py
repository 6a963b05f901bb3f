"""Shared products and helpers for cash register tests."""

from datetime import date

from cash_register.models import Product

TODAY = date(2026, 10, 17)

LAMP = Product("led lamp", "Led Lamp", 250, 1_234, False)
BANANA = Product("banana", "Bananas Fyffes", 150, 9_234, True)
CHEESE = Product("cheese", "Gouda 48+", 800, 7_687, True)

PRODUCTS = {product.barcode: product for product in (LAMP, BANANA, CHEESE)}
PRODUCTS_BY_NAME = {product.name: product for product in PRODUCTS.values()}

UNKNOWN_BARCODE = 5_353


def receipt_line(product: Product, sales_price: int, quantity: int = 1) -> str:
    return f"Product: {product.description}, Sales price: {sales_price}, Quantity: {quantity}"


def printed_lines(printer) -> list:
    """Every line sent to a mocked printer, in order."""
    return [call.args[0] for call in printer.println.call_args_list]


def sold_records(sales_service) -> list:
    """Every record submitted to a mocked sales service, in order."""
    return [call.args[0] for call in sales_service.sold.call_args_list]
