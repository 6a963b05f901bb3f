"""Tests for the best-before discount schedule."""

from datetime import date

import pytest

from cash_register.pricing import days_until, discounted_price, price_percentage


class TestDaysUntil:
    def test_future_date_is_positive(self):
        assert days_until(date(2026, 10, 17), date(2026, 10, 27)) == 10

    def test_same_day_is_zero(self):
        assert days_until(date(2026, 10, 17), date(2026, 10, 17)) == 0

    def test_past_date_is_negative(self):
        assert days_until(date(2026, 10, 17), date(2026, 10, 16)) == -1

    def test_counts_across_months(self):
        assert days_until(date(2026, 10, 17), date(2026, 12, 18)) == 62


@pytest.mark.parametrize(
    "days,percentage",
    [(365, 100), (2, 100), (1, 65), (0, 35), (-1, 0), (-30, 0)],
)
def test_price_percentage(days, percentage):
    assert price_percentage(days) == percentage


@pytest.mark.parametrize(
    "days,expected",
    [(10, 150), (2, 150), (1, 97), (0, 52), (-1, 0)],
)
def test_discounted_price_truncates(days, expected):
    assert discounted_price(150, days) == expected


def test_zero_price_stays_zero():
    assert discounted_price(0, 1) == 0


def test_negative_price_truncates_toward_zero():
    assert discounted_price(-150, 1) == -97
