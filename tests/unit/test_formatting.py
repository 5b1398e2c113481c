"""Tests for display helpers: phone formatting and result range text."""

import pytest

from src.core.formatting import describe_range, format_phone_number
from src.core.schemas import PaginationResult


class TestFormatPhoneNumber:
    def test_formats_int(self) -> None:
        assert format_phone_number(5551234567) == "(555) 123-4567"

    def test_formats_string(self) -> None:
        assert format_phone_number("5559876543") == "(555) 987-6543"

    def test_ignores_non_digits(self) -> None:
        assert format_phone_number("555-123-4567") == "(555) 123-4567"
        assert format_phone_number("(555) 123 4567") == "(555) 123-4567"

    @pytest.mark.parametrize("value", [555123456, "55512345678", "", "abc"])
    def test_wrong_length_returns_none(self, value: int | str) -> None:
        assert format_phone_number(value) is None


def _pagination(current_page: int, total_count: int, limit: int = 10) -> PaginationResult:
    total_pages = -(-total_count // limit)
    return PaginationResult(
        current_page=current_page,
        total_pages=total_pages,
        total_count=total_count,
        limit=limit,
        has_next_page=total_count > 0 and current_page < total_pages,
        has_previous_page=total_count > 0 and current_page > 1,
    )


class TestDescribeRange:
    def test_first_page(self) -> None:
        assert describe_range(_pagination(1, 25)) == "Showing 1 to 10 of 25 results"

    def test_last_partial_page(self) -> None:
        assert describe_range(_pagination(3, 25)) == "Showing 21 to 25 of 25 results"

    def test_single_result(self) -> None:
        assert describe_range(_pagination(1, 1)) == "Showing 1 to 1 of 1 results"

    def test_no_results(self) -> None:
        assert describe_range(_pagination(1, 0)) == "No results"

    def test_page_below_one_describes_first_page(self) -> None:
        assert describe_range(_pagination(0, 3, limit=2)) == "Showing 1 to 2 of 3 results"
        assert describe_range(_pagination(-3, 3, limit=2)) == "Showing 1 to 2 of 3 results"

    def test_page_past_the_end(self) -> None:
        assert describe_range(_pagination(5, 3, limit=2)) == "No results on page 5 of 2"
        assert describe_range(_pagination(3, 4, limit=2)) == "No results on page 3 of 2"
