"""Shared pytest fixtures for cash register tests."""

from unittest.mock import MagicMock

import pytest
import structlog

from cash_register.clock import FixedClock
from cash_register.ports import Catalog, Display, Printer, SalesService
from cash_register.register import CashRegister

from .fixtures import PRODUCTS, TODAY


@pytest.fixture
def clock():
    return FixedClock(TODAY)


@pytest.fixture
def printer():
    return MagicMock(spec=Printer)


@pytest.fixture
def display():
    return MagicMock(spec=Display)


@pytest.fixture
def sales_service():
    return MagicMock(spec=SalesService)


@pytest.fixture
def catalog():
    """Catalog mock that knows the lamp, banana and cheese."""
    catalog = MagicMock(spec=Catalog)
    catalog.lookup_product.side_effect = PRODUCTS.get
    return catalog


@pytest.fixture
def register(clock, printer, display, sales_service, catalog):
    return CashRegister(clock, printer, display, sales_service, catalog)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration a test installed."""
    yield
    structlog.reset_defaults()
