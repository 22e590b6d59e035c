"""Aggregate spreadsheet line items by name, price them, and print the totals."""

__version__ = "0.1.0"
