"""Page range expression parsing for :mod:`pdfsuite`."""

from __future__ import annotations

from typing import Iterator, Tuple

from ..exceptions import EmptyPageRangeError

PageRange = Tuple[int, ...]
"""Zero-based, strictly ascending, duplicate-free page indices."""


def _parse_int(value: str) -> int | None:
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def _token_pages(token: str, page_count: int) -> Iterator[int]:
    """Yield the one-based page numbers named by ``token`` that exist in the document.

    Malformed tokens yield nothing.
    """

    if "-" in token:
        start_str, end_str = token.split("-", 1)
        start = _parse_int(start_str)
        end = _parse_int(end_str)
        if start is None or end is None:
            return
        yield from range(max(start, 1), min(end, page_count) + 1)
        return

    number = _parse_int(token)
    if number is not None and 1 <= number <= page_count:
        yield number


def parse_page_range(expression: str | None, page_count: int) -> PageRange:
    """Parse a one-based range expression such as ``"1-3,5,7-9"``.

    Args:
        expression: Comma separated page numbers and ``start-end`` pairs.
        page_count: Total number of pages in the document; numbers outside
            ``1..page_count`` are dropped.

    Returns:
        Zero-based page indices in ascending order without duplicates. The
        parser is lenient: malformed or reversed tokens are skipped, so the
        result may be empty.
    """

    if not expression:
        return ()

    indices: set[int] = set()
    for token in expression.split(","):
        indices.update(page - 1 for page in _token_pages(token, page_count))
    return tuple(sorted(indices))


def require_page_range(expression: str | None, page_count: int) -> PageRange:
    """Parse ``expression`` and raise :class:`EmptyPageRangeError` if it selects nothing."""

    page_range = parse_page_range(expression, page_count)
    if not page_range:
        raise EmptyPageRangeError(expression, page_count)
    return page_range


__all__ = ["PageRange", "parse_page_range", "require_page_range"]
