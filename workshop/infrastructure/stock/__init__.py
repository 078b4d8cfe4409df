"""Stock adapters."""

from .in_memory_stock_checker import InMemoryStockAvailabilityChecker
from .in_memory_stock_inventory import InMemoryStockInventory

__all__ = ["InMemoryStockAvailabilityChecker", "InMemoryStockInventory"]
