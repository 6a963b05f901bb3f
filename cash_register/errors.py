"""Register errors and error message constants."""

from typing import Optional


class errmsg:
    """Error message constants for the cash register."""

    PRODUCT_NOT_FOUND = "No product found!"
    BEST_BEFORE_REQUIRED = "Best before date must not be null!"
    CATALOG_UNREADABLE = "Catalog file could not be read"
    CATALOG_MALFORMED = "Catalog entry is malformed"
    INVALID_ITEM = "Item must be BARCODE or BARCODE@BEST_BEFORE"
    INVALID_SETTING = "Invalid setting"
    PERISHABLE_NOT_BOOLEAN = "perishable must be true or false"


class RegisterError(Exception):
    """Base class for failures the cashier can recover from."""


class UnknownProductError(RegisterError):
    """The catalog could not resolve a scanned barcode."""

    def __init__(self, barcode: int, message: str = errmsg.PRODUCT_NOT_FOUND):
        super().__init__(message)
        self.barcode = barcode


class UnknownBestBeforeError(RegisterError):
    """A price correction was requested without a best-before date."""

    def __init__(self, message: str = errmsg.BEST_BEFORE_REQUIRED):
        super().__init__(message)


class CatalogError(Exception):
    """A product catalog file is missing or malformed."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message
