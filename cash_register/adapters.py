"""Concrete collaborators for running the register outside of tests."""

import json
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

import structlog

from .errors import CatalogError, errmsg
from .models import Product, SalesRecord

logger = structlog.get_logger()


class InMemoryCatalog:
    """Catalog backed by a barcode -> Product dict."""

    def __init__(self, products: Iterable[Product] = ()):
        self.products = {product.barcode: product for product in products}

    def lookup_product(self, barcode: int) -> Optional[Product]:
        return self.products.get(barcode)

    def add(self, product: Product) -> None:
        self.products[product.barcode] = product

    def __len__(self) -> int:
        return len(self.products)

    @classmethod
    def load(cls, path: str) -> "InMemoryCatalog":
        """Load a catalog from a JSON list of product objects."""
        try:
            with open(Path(path), "r", encoding="utf-8") as f:
                entries = json.load(f)
        except (OSError, ValueError) as e:
            raise CatalogError(errmsg.CATALOG_UNREADABLE, e) from e

        if not isinstance(entries, list):
            raise CatalogError(errmsg.CATALOG_MALFORMED, TypeError("expected a JSON list"))

        catalog = cls()
        for entry in entries:
            try:
                catalog.add(Product.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                raise CatalogError(errmsg.CATALOG_MALFORMED, e) from e

        logger.info("catalog_loaded", path=str(path), products=len(catalog))
        return catalog


class RecordingSalesService:
    """Sales service that keeps every sold record in submission order."""

    def __init__(self):
        self.sold_records = []
        self.log = logger.bind(service="sales")

    def sold(self, record: SalesRecord) -> None:
        self.sold_records.append(record)
        self.log.info(
            "sale_recorded",
            barcode=record.barcode,
            sales_price=record.sales_price,
            quantity=record.quantity,
        )


class ConsoleDisplay:
    """Display that writes prompts to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stderr

    def display_product(self, product: Product) -> None:
        self._write(f"{product.description} {product.price}")

    def display_calendar(self) -> None:
        self._write("Enter best before date")

    def display_error_message(self, message: str) -> None:
        self._write(f"ERROR: {message}")

    def _write(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()


class StreamPrinter:
    """Receipt printer that writes lines to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def println(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()
