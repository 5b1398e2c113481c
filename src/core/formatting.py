"""Display helpers for advocate rows and result pages."""

import re

from src.core.schemas import PaginationResult

_NON_DIGITS = re.compile(r"\D")


def format_phone_number(value: int | str) -> str | None:
    """Format a 10-digit phone number as ``(555) 555-5555``.

    Non-digit characters are ignored. Returns None unless exactly 10 digits remain.
    """
    digits = _NON_DIGITS.sub("", str(value))
    if len(digits) != 10:
        return None
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def describe_range(pagination: PaginationResult) -> str:
    """Human-readable window of the current page, e.g. 'Showing 21 to 25 of 25 results'.

    The start is taken from the clamped offset, so a page below 1 describes the
    first page. A page past the last match has nothing to show.
    """
    if pagination.total_count == 0:
        return "No results"
    offset = max(0, (pagination.current_page - 1) * pagination.limit)
    if offset >= pagination.total_count:
        return f"No results on page {pagination.current_page} of {pagination.total_pages}"
    end = min(offset + pagination.limit, pagination.total_count)
    return f"Showing {offset + 1} to {end} of {pagination.total_count} results"
