"""Register session state."""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, Optional

from .models import Product, SalesRecord


@dataclass
class RegisterState:
    """Session state of one register.

    The pending fields describe the item currently at the scanner: a
    non-perishable is pending at its list price with no best-before limit
    (``date.max``); a perishable has nothing pending until its best-before
    date is entered. The register reports them when it closes the item.
    """

    perishables: dict = field(default_factory=dict)  # Product -> SalesRecord, scan order
    non_perishables: dict = field(default_factory=dict)  # Product -> SalesRecord, scan order
    last_scanned: Optional[Product] = None
    pending_best_before: Optional[date] = None
    pending_price: int = 0
    awaiting_best_before: bool = False

    def group_for(self, product: Product) -> dict:
        """The mapping a product's records belong in."""
        return self.perishables if product.perishable else self.non_perishables

    def find_record(self, product: Product) -> Optional[SalesRecord]:
        return self.group_for(product).get(product)

    def entries(self) -> Iterator[tuple]:
        """(product, record) pairs, perishables first, each group in scan order."""
        yield from self.perishables.items()
        yield from self.non_perishables.items()

    def records(self) -> list:
        return [record for _, record in self.entries()]

    def is_empty(self) -> bool:
        return not self.perishables and not self.non_perishables

    def close_item(self) -> None:
        """Drop the pending item context without touching the records."""
        self.last_scanned = None
        self.clear_pending()

    def clear_pending(self) -> None:
        self.pending_best_before = None
        self.pending_price = 0
        self.awaiting_best_before = False

    def reset(self) -> None:
        self.perishables.clear()
        self.non_perishables.clear()
        self.close_item()
