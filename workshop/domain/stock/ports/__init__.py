from .stock_availability_checker import StockAvailabilityChecker, StockLevel, StockLine
from .stock_decreaser import StockDecreaser

__all__ = ["StockAvailabilityChecker", "StockDecreaser", "StockLevel", "StockLine"]
