"""Domain layer - derived values and domain errors."""

from .calculations import full_name, order_total
from .exceptions import EntityNotFoundError

__all__ = [
    "EntityNotFoundError",
    "full_name",
    "order_total",
]
