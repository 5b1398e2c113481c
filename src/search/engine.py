"""Search engine: filter the roster, slice one page, compute pagination.

Data flow:
  1. Filter chain → matching advocates (original order kept)
  2. Slice [offset, offset + limit) → page
  3. Pagination metadata over the full match count

Pure: the roster is passed in and never mutated, nothing is cached.
"""

import logging
from collections.abc import Sequence

from src.core.schemas import Advocate, PaginationResult, SearchRequest, SearchResult
from src.search.matcher import build_filter_chain, run_filter_chain

logger = logging.getLogger(__name__)


def paginate(total_count: int, page: int, limit: int) -> PaginationResult:
    """Compute pagination metadata for ``total_count`` matches.

    ``page`` is reported as given; an out-of-range page is not an error.
    With no matches both navigation flags are false.
    """
    if limit <= 0:
        msg = f"limit must be positive, got {limit}"
        raise ValueError(msg)
    total_pages = -(-total_count // limit)
    has_matches = total_count > 0
    return PaginationResult(
        current_page=page,
        total_pages=total_pages,
        total_count=total_count,
        limit=limit,
        has_next_page=has_matches and page < total_pages,
        has_previous_page=has_matches and page > 1,
    )


def evaluate(records: Sequence[Advocate], request: SearchRequest) -> SearchResult:
    """Run a search over ``records`` and return one page of results."""
    filtered = run_filter_chain(records, build_filter_chain(request))
    offset = request.offset
    page = filtered[offset:offset + request.limit]
    pagination = paginate(len(filtered), request.page, request.limit)
    logger.debug(
        "Search %r: %d/%d matched, page %d has %d",
        request.search_term, len(filtered), len(records), request.page, len(page),
    )
    return SearchResult(data=page, pagination=pagination)
