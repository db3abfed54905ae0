"""Utility functions for shoptab."""

from shoptab.utils.date_parser import parse_date
from shoptab.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_amount"]
