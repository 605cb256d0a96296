"""Lending order books with exact rational value-to-loan ranges, order matching and a contract call handler."""

__version__ = "0.1.0"
__all__ = ["contract", "interval", "matching", "order", "rational"]