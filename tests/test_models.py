"""Tests for Product and SalesRecord."""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from cash_register.models import Product, SalesRecord

from .fixtures import BANANA, LAMP


class TestProduct:
    def test_equality_is_by_barcode(self):
        relabelled = Product("lamp", "Another Lamp", 999, LAMP.barcode, True)

        assert relabelled == LAMP
        assert hash(relabelled) == hash(LAMP)
        assert LAMP != BANANA

    def test_usable_as_mapping_key(self):
        records = {LAMP: "lamp record"}

        assert records[Product("x", "y", 0, LAMP.barcode)] == "lamp record"

    def test_is_immutable(self):
        with pytest.raises(FrozenInstanceError):
            LAMP.price = 1

    def test_from_dict(self):
        product = Product.from_dict(
            {"name": "banana", "description": "Bananas Fyffes", "price": "150", "barcode": 9234, "perishable": True}
        )

        assert product == BANANA
        assert product.price == 150
        assert product.perishable

    def test_from_dict_defaults_to_non_perishable(self):
        product = Product.from_dict({"name": "n", "description": "d", "price": 1, "barcode": 1})

        assert not product.perishable

    def test_from_dict_requires_barcode(self):
        with pytest.raises(KeyError):
            Product.from_dict({"name": "n", "description": "d", "price": 1})

    def test_to_dict_round_trips(self):
        assert Product.from_dict(BANANA.to_dict()).to_dict() == BANANA.to_dict()


class TestSalesRecord:
    def test_starts_with_quantity_one(self):
        record = SalesRecord(LAMP.barcode, date(2026, 10, 17), LAMP.price)

        assert record.quantity == 1

    def test_increase_quantity(self):
        record = SalesRecord(LAMP.barcode, date(2026, 10, 17), LAMP.price)
        record.increase_quantity()
        record.increase_quantity(3)

        assert record.quantity == 5

    def test_line_total(self):
        record = SalesRecord(LAMP.barcode, date(2026, 10, 17), 250, quantity=3)

        assert record.line_total == 750

    def test_compared_field_by_field(self):
        day = date(2026, 10, 17)

        assert SalesRecord(1, day, 10) == SalesRecord(1, day, 10)
        assert SalesRecord(1, day, 10) != SalesRecord(1, day, 9)
