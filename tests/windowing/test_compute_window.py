# ruff: noqa: S101

"""Tests for the window computation."""

import pytest

from response_envelope.envelope import build_page_uri, compute_window, default_results

DATA = list(range(1, 11))


@pytest.mark.windowing
class TestComputeWindow:
    """Branches of the window computation."""

    @staticmethod
    def test_unpaginated_unlimited() -> None:
        """Everything is visible."""
        visible, results = compute_window(DATA)

        assert visible == DATA
        assert visible is not DATA
        assert results.count == 10
        assert results.display_limit == -1
        assert results.pagination.paginated is False

    @staticmethod
    def test_unpaginated_limited() -> None:
        """The first items are visible and the limit is counted."""
        visible, results = compute_window(DATA, limit=3)

        assert visible == [1, 2, 3]
        assert results.count == 3
        assert results.pagination.total_pages == 0

    @staticmethod
    def test_paginated_unlimited_first_page() -> None:
        """The single unlimited page holds everything."""
        visible, results = compute_window(DATA, page=1)

        assert visible == DATA
        assert results.count == 10
        assert results.pagination.paginated is True
        assert results.pagination.total_pages == 1

    @staticmethod
    def test_paginated_unlimited_later_page() -> None:
        """Later unlimited pages are out of range."""
        visible, results = compute_window(DATA, page=3)

        assert visible == []
        assert results.count == 0
        assert results.out_of_range is True

    @staticmethod
    def test_paginated_limited() -> None:
        """A limited page counts every item and links its neighbours."""
        visible, results = compute_window(DATA, page=2, limit=3, base_uri="?p=??")

        assert visible == [4, 5, 6]
        assert results.count == 10
        assert results.pagination.total_pages == 4
        assert results.previous_page is not None
        assert results.previous_page.uri == "?p=1"
        assert results.next_page is not None
        assert results.next_page.uri == "?p=3"

    @staticmethod
    def test_paginated_limited_out_of_range() -> None:
        """Pages past the end carry no links."""
        visible, results = compute_window(DATA, page=5, limit=3)

        assert visible == []
        assert results.out_of_range is True
        assert results.previous_page is None
        assert results.next_page is None

    @staticmethod
    def test_empty_data_has_no_pages() -> None:
        """An empty list has zero pages, so page 1 is out of range."""
        visible, results = compute_window([], page=1, limit=3)

        assert visible == []
        assert results.count == 0
        assert results.pagination.total_pages == 0
        assert results.out_of_range is True

    @staticmethod
    def test_custom_placeholder() -> None:
        """Another placeholder token can be used."""
        _, results = compute_window(
            DATA, page=2, limit=5, base_uri="/p/{page}", placeholder="{page}"
        )

        assert results.previous_page is not None
        assert results.previous_page.uri == "/p/1"

    @staticmethod
    @pytest.mark.parametrize(
        ("size", "limit", "pages"),
        [(0, 1, 0), (1, 1, 1), (9, 3, 3), (10, 3, 4), (10, 20, 1), (101, 10, 11)],
    )
    def test_total_pages(size: int, limit: int, pages: int) -> None:
        """Total pages round up."""
        _, results = compute_window(list(range(size)), page=1, limit=limit)

        assert results.pagination.total_pages == pages

    @staticmethod
    def test_input_is_not_modified() -> None:
        """The full data stays as it was."""
        data = list(DATA)

        compute_window(data, page=2, limit=3)

        assert data == DATA


@pytest.mark.windowing
class TestHelpers:
    """Helpers around the window computation."""

    @staticmethod
    def test_default_results() -> None:
        """Defaults describe an unwindowed envelope."""
        assert default_results(4).to_dict() == {
            "count": 4,
            "outOfRange": False,
            "displayLimit": -1,
            "pagination": {"paginated": False, "totalPages": 0, "page": 0},
        }

    @staticmethod
    def test_default_results_are_fresh() -> None:
        """Each call returns a new object."""
        first = default_results()
        first.pagination.page = 3

        assert default_results().pagination.page == 0

    @staticmethod
    @pytest.mark.parametrize(
        ("base_uri", "page", "expected"),
        [
            ("/items?page=??", 2, "/items?page=2"),
            ("/??/x/??", 7, "/7/x/??"),
            ("", 2, None),
        ],
    )
    def test_build_page_uri(base_uri: str, page: int, expected: str | None) -> None:
        """Only the first placeholder is replaced."""
        assert build_page_uri(base_uri, page) == expected
