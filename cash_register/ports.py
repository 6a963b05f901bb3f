"""Collaborators the register talks to.

The register only depends on these narrow contracts, so tests can hand it
mocks and the CLI can hand it the adapters in ``cash_register.adapters``.
"""

from typing import Optional, Protocol

from .models import Product, SalesRecord


class Catalog(Protocol):
    """Resolves barcodes to products."""

    def lookup_product(self, barcode: int) -> Optional[Product]:
        """Return the product for ``barcode``, or None when it is unknown."""
        ...


class SalesService(Protocol):
    """Records finalized sales."""

    def sold(self, record: SalesRecord) -> None:
        ...


class Display(Protocol):
    """Cashier-facing display."""

    def display_product(self, product: Product) -> None:
        ...

    def display_calendar(self) -> None:
        ...

    def display_error_message(self, message: str) -> None:
        ...


class Printer(Protocol):
    """Receipt printer."""

    def println(self, line: str) -> None:
        ...
