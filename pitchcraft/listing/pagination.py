"""
Pagination helpers for the startup listing.

The listing shows a compact window of page links around the current page,
plus explicit links to the first and last pages when they fall outside the
window. Ellipsis placeholders mark gaps between those boundary links and
the window.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

PAGE_SIZE = 9
WINDOW_RADIUS = 2


@dataclass(frozen=True)
class PageWindow:
    """
    Visible pagination links for one (current_page, total_pages) pair.

    `pages` is the contiguous window; the boundary flags describe what is
    rendered on each side of it.
    """

    current_page: int
    total_pages: int
    pages: Tuple[int, ...]
    show_first: bool
    leading_ellipsis: bool
    show_last: bool
    trailing_ellipsis: bool

    def items(self) -> List[Optional[int]]:
        """
        Flatten the window into render order.

        Page numbers are strictly increasing; `None` marks an ellipsis.
        """
        out: List[Optional[int]] = []
        if self.show_first:
            out.append(1)
            if self.leading_ellipsis:
                out.append(None)
        out.extend(self.pages)
        if self.show_last:
            if self.trailing_ellipsis:
                out.append(None)
            out.append(self.total_pages)
        return out

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


def total_pages_for(total_count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages for `total_count` rows; never less than 1."""
    if total_count <= 0:
        return 1
    return (total_count + page_size - 1) // page_size


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp a requested page number into [1, total_pages]."""
    return max(1, min(page, max(1, total_pages)))


def page_window(current_page: int, total_pages: int) -> PageWindow:
    """
    Compute the visible page links.

    Example:
        page_window(5, 10).items() == [1, None, 3, 4, 5, 6, 7, None, 10]

    `current_page` is expected to be clamped to [1, total_pages] by the
    caller; see clamp_page().
    """
    if total_pages < 1:
        raise ValueError("total_pages must be >= 1")

    start = max(1, current_page - WINDOW_RADIUS)
    end = min(total_pages, current_page + WINDOW_RADIUS)

    return PageWindow(
        current_page=current_page,
        total_pages=total_pages,
        pages=tuple(range(start, end + 1)),
        show_first=start > 1,
        leading_ellipsis=start > 2,
        show_last=end < total_pages,
        trailing_ellipsis=end < total_pages - 1,
    )
