"""
Derived values computed at projection time.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from decimal import Decimal
from typing import Iterable, Optional, Tuple


ZERO = Decimal("0")


def full_name(first_name: str, last_name: str) -> str:
    """Cashier display name: first and last name joined by a single space."""
    return f"{first_name} {last_name}"


def order_total(lines: Optional[Iterable[Tuple[Optional[Decimal], int]]]) -> Decimal:
    """Sum of ``price * quantity`` over (price, quantity) pairs.

    Args:
        lines: One pair per order line. ``None`` means the lines were not
            loaded; a ``None`` price means the line's product was not loaded.

    Returns:
        Order total, ``0`` when there is nothing to add up
    """
    if lines is None:
        return ZERO

    total = ZERO
    for price, quantity in lines:
        if price is None:
            continue
        total += price * quantity
    return total
