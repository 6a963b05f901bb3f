"""Cash register business logic.

Drives one sales transaction at a time: barcodes are scanned into sales
records, perishables get their price corrected against a best-before date,
the receipt is printed and the transaction is finalized to the sales
service.

Transaction model:
- Scanning closes the previous item. Its record stays in the transaction,
  only the pending best-before/price context is dropped.
- A price correction always applies to the most recently scanned item.
- Only finalize submits records; it then empties the register.
"""

from datetime import date
from typing import Optional

import structlog

from .clock import Clock
from .errors import UnknownBestBeforeError, UnknownProductError, errmsg
from .models import Product, SalesRecord
from .ports import Catalog, Display, Printer, SalesService
from .pricing import days_until, discounted_price
from .receipt import receipt_lines
from .state import RegisterState

logger = structlog.get_logger()


class CashRegister:
    """A single-cashier register holding one open transaction."""

    def __init__(
        self,
        clock: Clock,
        printer: Printer,
        display: Display,
        sales_service: SalesService,
        catalog: Catalog,
        register_id: str = "register-1",
    ) -> None:
        self.clock = clock
        self.printer = printer
        self.display = display
        self.sales_service = sales_service
        self.catalog = catalog
        self.state = RegisterState()
        self.log = logger.bind(register_id=register_id)

    def scan(self, barcode: int) -> Product:
        """Scan a product into the open transaction.

        Repeated scans of the same product increase the quantity of its
        record. Perishables prompt the display for a best-before date.

        Raises:
            UnknownProductError: the catalog does not know ``barcode``. The
                display shows an error and the register is unchanged.
        """
        log = self.log.bind(barcode=barcode)

        product = self.catalog.lookup_product(barcode)
        if product is None:
            log.warning("unknown_product")
            self.display.display_error_message(errmsg.PRODUCT_NOT_FOUND)
            raise UnknownProductError(barcode)

        self._close_item()

        record = self.state.find_record(product)
        if record is not None:
            record.increase_quantity()
        else:
            record = SalesRecord(
                barcode=product.barcode,
                sale_date=self.clock.today(),
                sales_price=product.price,
            )
            self.state.group_for(product)[product] = record

        self.state.last_scanned = product
        self.display.display_product(product)

        if product.perishable:
            self.state.awaiting_best_before = True
            self.display.display_calendar()
        else:
            self.state.pending_price = product.price
            self.state.pending_best_before = date.max

        log.info(
            "product_scanned",
            product=product.name,
            perishable=product.perishable,
            quantity=record.quantity,
        )
        return product

    def correct_sales_price(self, best_before: Optional[date]) -> Optional[int]:
        """Price the last scanned item against its best-before date.

        The last scanned item is expected to be perishable. Returns the new
        sales price, or None when no item has been scanned.

        Raises:
            UnknownBestBeforeError: ``best_before`` is None.
        """
        if best_before is None:
            self.log.warning("best_before_missing")
            raise UnknownBestBeforeError()

        product = self.state.last_scanned
        if product is None:
            self.log.warning("no_item_to_correct", best_before=best_before.isoformat())
            return None

        days = days_until(self.clock.today(), best_before)
        sales_price = discounted_price(product.price, days)
        self.state.find_record(product).sales_price = sales_price
        self.state.clear_pending()

        self.log.info(
            "sales_price_corrected",
            barcode=product.barcode,
            days_until_best_before=days,
            list_price=product.price,
            sales_price=sales_price,
        )
        return sales_price

    def finalize_sales_transaction(self) -> list:
        """Submit every sales record to the sales service and empty the register."""
        self._close_item()
        records = self.state.records()
        for record in records:
            self.sales_service.sold(record)

        self.state.reset()
        self.log.info("transaction_finalized", records=len(records))
        return records

    def print_receipt(self) -> int:
        """Print one line per sales record, perishables first."""
        count = 0
        for line in receipt_lines(self.state):
            self.printer.println(line)
            count += 1

        self.log.info("receipt_printed", lines=count)
        return count

    def records(self) -> list:
        """Open sales records in receipt order."""
        return self.state.records()

    def total(self) -> int:
        return sum(record.line_total for record in self.state.records())

    @property
    def is_empty(self) -> bool:
        return self.state.is_empty()

    def _close_item(self) -> None:
        product = self.state.last_scanned
        if product is None:
            return

        if self.state.awaiting_best_before:
            self.log.warning(
                "best_before_not_entered",
                barcode=product.barcode,
                sales_price=self.state.find_record(product).sales_price,
            )
        else:
            pending_best_before = self.state.pending_best_before
            self.log.debug(
                "item_closed",
                barcode=product.barcode,
                pending_price=self.state.pending_price,
                pending_best_before=pending_best_before.isoformat() if pending_best_before else None,
            )
        self.state.close_item()
