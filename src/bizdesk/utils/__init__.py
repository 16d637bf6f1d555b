"""Utility functions for bizdesk."""

from bizdesk.utils.date_parser import parse_date, get_date_range
from bizdesk.utils.amount_parser import parse_amount
from bizdesk.utils.resolvers import resolve_account, resolve_company, resolve_role

__all__ = [
    "parse_date",
    "get_date_range",
    "parse_amount",
    "resolve_account",
    "resolve_company",
    "resolve_role",
]
