"""TargetingEngine: builds key/value targeting criteria from page facts."""

from __future__ import annotations

from .hooks import FilterChain
from ..models.page_context import PageContext

TargetingBag = dict[str, list[str]]


class TargetingEngine:
    """Translate a PageContext into ordered ``{key: [values]}`` criteria."""

    def __init__(self, filters: FilterChain[TargetingBag] | None = None) -> None:
        self._filters = filters if filters is not None else FilterChain("targeting")

    def resolve(self, page: PageContext) -> TargetingBag:
        targeting: TargetingBag = {"Page": []}
        page_values = targeting["Page"]

        if page.is_home:
            page_values.append("home")
        if page.is_front_page:
            page_values.append("front-page")
        if page.is_admin:
            page_values.append("admin")
        if page.is_admin_bar_showing:
            page_values.append("admin-bar-showing")

        # Templates
        single = page.is_singular and not page.is_post_type_archive and not page.is_front_page
        if single:
            page_values.append("single")
        if page.is_post_type_archive:
            page_values.append("archive")
        if page.is_author:
            page_values.append("author")
        if page.is_date:
            page_values.append("date")
        if page.is_search:
            page_values.append("search")

        if single:
            targeting["Category"] = list(page.categories)
        if page.is_category and page.queried_category:
            targeting.setdefault("Category", []).append(page.queried_category)

        if page.is_single and page.tags:
            targeting["Tag"] = list(page.tags)
        if page.is_tag and page.queried_tag:
            targeting.setdefault("Tag", []).append(page.queried_tag)

        return self._filters.apply(targeting)
