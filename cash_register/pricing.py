"""Best-before discount schedule for perishable products.

Business Rules:
1. Two or more days until best-before: full price
2. One day until best-before: 65% of the list price
3. Best-before is today: 35% of the list price
4. Past best-before: free
"""

from datetime import date

# (minimum days until best-before, percentage of list price charged)
DISCOUNT_SCHEDULE = (
    (2, 100),
    (1, 65),
    (0, 35),
)
EXPIRED_PERCENTAGE = 0


def days_until(today: date, best_before: date) -> int:
    """Number of calendar days from today until the best-before date."""
    return (best_before - today).days


def price_percentage(days: int) -> int:
    """Percentage of the list price charged with the given days remaining."""
    for min_days, percentage in DISCOUNT_SCHEDULE:
        if days >= min_days:
            return percentage
    return EXPIRED_PERCENTAGE


def discounted_price(price: int, days: int) -> int:
    """Sales price for a perishable, truncated toward zero."""
    charged = abs(price) * price_percentage(days) // 100
    return charged if price >= 0 else -charged
