"""Lookup tools

Spreadsheet style lookups of a value in a table sorted by one of its fields,
with exact, approximate and interpolated matching, plus a registry to
collect named lookup tables from files into a uniform function-call accessor.
"""

from .comparators import ComparatorContractError
from .evaluator import evaluator
from .extractor import extractor
from .vlookup import NOT_FOUND, LookupResult, table_vlookup
from .vlookup_table import vlookup_table

__all__ = [
    "ComparatorContractError",
    "LookupResult",
    "NOT_FOUND",
    "extractor",
    "evaluator",
    "table_vlookup",
    "vlookup_table",
]
