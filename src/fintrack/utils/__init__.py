"""Utility functions for fintrack."""

from fintrack.utils.amount_parser import parse_amount, parse_minor_units
from fintrack.utils.ids import random_id

__all__ = ["parse_amount", "parse_minor_units", "random_id"]
