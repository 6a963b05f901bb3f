"""Point-of-sale cash register with best-before pricing for perishables."""

from .clock import Clock, FixedClock, SystemClock
from .errors import (
    CatalogError,
    RegisterError,
    UnknownBestBeforeError,
    UnknownProductError,
    errmsg,
)
from .models import Product, SalesRecord
from .pricing import discounted_price
from .register import CashRegister

__all__ = [
    "CashRegister",
    "CatalogError",
    "Clock",
    "FixedClock",
    "Product",
    "RegisterError",
    "SalesRecord",
    "SystemClock",
    "UnknownBestBeforeError",
    "UnknownProductError",
    "discounted_price",
    "errmsg",
]
