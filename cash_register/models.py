"""Data models for the cash register."""

from dataclasses import dataclass, field
from datetime import date

from .errors import errmsg


@dataclass(frozen=True)
class Product:
    """A catalog product. Two products are the same product when their barcodes match."""

    name: str = field(compare=False)
    description: str = field(compare=False)
    price: int = field(compare=False)  # smallest currency unit
    barcode: int
    perishable: bool = field(default=False, compare=False)

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        return cls(
            name=str(data["name"]),
            description=str(data["description"]),
            price=int(data["price"]),
            barcode=int(data["barcode"]),
            perishable=_require_bool(data.get("perishable", False)),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "barcode": self.barcode,
            "perishable": self.perishable,
        }


@dataclass
class SalesRecord:
    """One line of a sales transaction."""

    barcode: int
    sale_date: date
    sales_price: int
    quantity: int = 1

    def increase_quantity(self, amount: int = 1) -> None:
        self.quantity += amount

    @property
    def line_total(self) -> int:
        return self.sales_price * self.quantity


def _require_bool(value) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{errmsg.PERISHABLE_NOT_BOOLEAN}, got {value!r}")
    return value
