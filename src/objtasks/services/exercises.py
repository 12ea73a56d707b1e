"""ExerciseService — ticket selling and city sorting/grouping for the CLI."""

from __future__ import annotations

import logging
from typing import Any

from objtasks.domain.grouping import group, sort_cities_array
from objtasks.domain.tickets import sell_tickets
from objtasks.services.result import ServiceResult

logger = logging.getLogger(__name__)

VALID_BILLS = frozenset({25, 50, 100})


def _validate_cities(records: Any) -> str | None:
    """Return an error message if *records* is not a list of country/city dicts."""
    if not isinstance(records, list):
        return "Expected a JSON array of records"
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            return f"Record {index} is not an object"
        for key in ("country", "city"):
            if not isinstance(record.get(key), str):
                return f"Record {index} is missing a string {key!r}"
    return None


class ExerciseService:
    """Wrap the stateless object exercises in ServiceResult."""

    def sell_tickets(self, bills: list[int]) -> ServiceResult:
        op = "sell_tickets"
        unknown = sorted({bill for bill in bills if bill not in VALID_BILLS})
        if unknown:
            return ServiceResult.failure(
                op,
                "INVALID_INPUT",
                f"Bills must be 25, 50 or 100, got {unknown}",
                bills=unknown,
            )
        can_sell = sell_tickets(bills)
        logger.debug("Ticket queue of %d: can_sell=%s", len(bills), can_sell)
        return ServiceResult.success(op, can_sell=can_sell, customers=len(bills))

    def sort_cities(self, records: Any) -> ServiceResult:
        op = "sort_cities"
        error = _validate_cities(records)
        if error:
            return ServiceResult.failure(op, "INVALID_INPUT", error)
        return ServiceResult.success(op, items=sort_cities_array(records))

    def group_cities(self, records: Any) -> ServiceResult:
        op = "group_cities"
        error = _validate_cities(records)
        if error:
            return ServiceResult.failure(op, "INVALID_INPUT", error)
        groups = group(records, lambda r: r["country"], lambda r: r["city"])
        return ServiceResult.success(op, groups=groups)
