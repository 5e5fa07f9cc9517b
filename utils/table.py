import math

from utils.constants import PAGE_SIZE, TAB_ALL, TAB_TITLES, TABS


def _sort_key(value):
    if value is None:
        return (1, "")
    if isinstance(value, str):
        return (0, value.casefold())
    return (0, value)


def sort_rows(rows: list, key: str | None, descending: bool = False) -> list:
    """Return a new list sorted by attribute `key`; no key keeps input order.

    Strings compare case-insensitively. The sort is stable.
    """
    if not key:
        return list(rows)
    return sorted(rows, key=lambda r: _sort_key(getattr(r, key, None)), reverse=descending)


def page_count(total: int, page_size: int = PAGE_SIZE) -> int:
    """At least one page, even for an empty table."""
    if page_size <= 0:
        raise ValueError("page_size must be positive.")
    return max(1, math.ceil(total / page_size))


def clamp_page(page: int, total: int, page_size: int = PAGE_SIZE) -> int:
    """Clamp a zero-based page index into range."""
    return min(max(page, 0), page_count(total, page_size) - 1)


def page_slice(rows: list, page: int, page_size: int = PAGE_SIZE) -> list:
    page = clamp_page(page, len(rows), page_size)
    start = page * page_size
    return rows[start:start + page_size]


def page_label(page: int, total: int, page_size: int = PAGE_SIZE) -> str:
    page = clamp_page(page, total, page_size)
    return f"Page {page + 1} of {page_count(total, page_size)}"


CATEGORY_COLUMNS = ["name", "type", "actions"]


def category_column_keys(tab: str) -> list[str]:
    """Columns shown for a tab; the type badge only appears on the combined list."""
    if tab not in TABS:
        raise ValueError(f"Unknown tab: {tab!r}")
    if tab == TAB_ALL:
        return list(CATEGORY_COLUMNS)
    return [k for k in CATEGORY_COLUMNS if k != "type"]


def card_title(tab: str) -> str:
    if tab not in TABS:
        raise ValueError(f"Unknown tab: {tab!r}")
    return TAB_TITLES[tab]
