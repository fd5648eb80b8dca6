# storefront/models/criteria.py

"""UI-held catalog query criteria and their transitions."""

from dataclasses import dataclass, replace

from storefront.config.settings import Settings


@dataclass(frozen=True)
class QueryCriteria:
    """Current search/filter/sort/page selection for the catalog view.

    Changing the search text, category or sort key returns criteria
    pointing at page 1. Paging moves stay within ``[1, total_pages]``.
    """

    search_text: str = ""
    category: str = ""
    sort_key: str = Settings.DEFAULT_SORT
    page: int = 1
    page_size: int = Settings.PAGE_SIZE

    def with_search(self, text: str) -> "QueryCriteria":
        return replace(self, search_text=text, page=1)

    def with_category(self, category: str) -> "QueryCriteria":
        return replace(self, category=category, page=1)

    def with_sort(self, sort_key: str) -> "QueryCriteria":
        return replace(self, sort_key=sort_key, page=1)

    def next_page(self, total_pages: int) -> "QueryCriteria":
        return self.go_to(self.page + 1, total_pages)

    def prev_page(self) -> "QueryCriteria":
        return replace(self, page=max(1, self.page - 1))

    def go_to(self, page: int, total_pages: int) -> "QueryCriteria":
        """Jump to *page*, clamped to ``[1, total_pages]``."""
        return replace(self, page=max(1, min(page, max(1, total_pages))))
