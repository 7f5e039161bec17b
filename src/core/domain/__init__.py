"""
Domain models and value objects.

Contains the change domain: Denomination table, Tender, ChangeResult variants.
"""

from src.core.domain.change_result import (
    EXACT_MESSAGE,
    INSUFFICIENT_MESSAGE,
    Breakdown,
    ChangeEntry,
    ChangeResult,
    Exact,
    Insufficient,
    change_result_from_dict,
    change_result_to_dict,
)
from src.core.domain.denomination import (
    DENOMINATION_INDEX,
    DENOMINATION_TABLE,
    SMALLEST_UNIT,
    Denomination,
    build_denomination_index,
    validate_denomination_table,
)
from src.core.domain.tender import Tender, tenders_from_counts

__all__ = [
    # Denomination
    "DENOMINATION_INDEX",
    "DENOMINATION_TABLE",
    "SMALLEST_UNIT",
    "Denomination",
    "build_denomination_index",
    "validate_denomination_table",
    # Tender
    "Tender",
    "tenders_from_counts",
    # ChangeResult
    "EXACT_MESSAGE",
    "INSUFFICIENT_MESSAGE",
    "Breakdown",
    "ChangeEntry",
    "ChangeResult",
    "Exact",
    "Insufficient",
    "change_result_from_dict",
    "change_result_to_dict",
]
