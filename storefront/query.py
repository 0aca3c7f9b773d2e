# storefront/query.py
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from django.http import HttpRequest

from .models import Page
from .options import SHOW_PAGE, page_on_front, show_on_front
from .rewrite import RewriteRules, rewrite_rules


# Query string parameters the storefront understands
PUBLIC_QUERY_VARS = ("page_id", "pagename", "s", "paged")


class ContentQuery:
    """
    The parsed content query of a storefront request.

    Flags (``is_page``, ``is_search``, ``is_home``, ``is_front_page``) are
    computed by ``parse_query`` and are not refreshed by ``set``/``unset``;
    call ``parse_query`` again to re-resolve after changing the vars.

    An empty query on the root path resolves to the page listing, or to the
    static front page when the site is configured to show one. Queries for
    other paths (``/about/``) never resolve the front page.
    """

    def __init__(
        self,
        query_vars: Optional[Mapping[str, Any]] = None,
        *,
        main: bool = False,
        path: str = "/",
    ) -> None:
        self._main = main
        self.path = path
        self.query_vars: Dict[str, Any] = {}
        self.is_page = False
        self.is_search = False
        self.is_home = False
        self.is_front_page = False
        self.parse_query(query_vars or {})

    def __repr__(self) -> str:
        return f"<ContentQuery main={self._main} path={self.path!r} vars={self.query_vars!r}>"

    @classmethod
    def from_request(
        cls,
        request: HttpRequest,
        endpoint_vars: Optional[Mapping[str, str]] = None,
        rules: Optional[RewriteRules] = None,
    ) -> "ContentQuery":
        """Build the main query from registered GET vars and endpoint captures."""
        rules = rules or rewrite_rules
        allowed = set(PUBLIC_QUERY_VARS) | set(rules.endpoints)
        query_vars = {
            key: request.GET.get(key)
            for key in request.GET.keys()
            if key in allowed
        }
        query_vars.update(endpoint_vars or {})
        return cls(query_vars, main=True, path=request.path_info)

    def is_main_query(self) -> bool:
        return self._main

    def is_root(self) -> bool:
        return self.path in ("", "/")

    def get(self, name: str, default: Any = None) -> Any:
        return self.query_vars.get(name, default)

    def set(self, name: str, value: Any) -> None:
        if value is None:
            self.query_vars.pop(name, None)
        else:
            self.query_vars[name] = value

    def unset(self, name: str) -> None:
        self.query_vars.pop(name, None)

    def parse_query(self, query_vars: Mapping[str, Any]) -> None:
        self.query_vars = {k: v for k, v in query_vars.items() if v not in (None, "")}
        self.is_page = self.is_search = self.is_home = self.is_front_page = False

        qv = self.query_vars
        if qv.get("s"):
            self.is_search = True
        elif qv.get("page_id") or qv.get("pagename"):
            self.is_page = True
        elif not qv and self.is_root() and show_on_front() == SHOW_PAGE and page_on_front():
            self.query_vars["page_id"] = page_on_front()
            self.is_page = True
        else:
            self.is_home = True

        if self.is_page and show_on_front() == SHOW_PAGE:
            self.is_front_page = self.page_id() is not None and self.page_id() == page_on_front()

    def page_id(self) -> Optional[int]:
        try:
            return int(self.get("page_id")) if self.get("page_id") else None
        except (TypeError, ValueError):
            return None

    def get_page(self) -> Optional[Page]:
        """The single page this query resolves to, if any."""
        if not self.is_page:
            return None
        pages = Page.objects.published()
        page_id = self.page_id()
        if page_id:
            return pages.filter(pk=page_id).first()
        pagename = self.get("pagename")
        if pagename:
            return pages.filter(slug=pagename).first()
        return None

    def get_pages(self) -> Iterable[Page]:
        """Pages listed by a home or search query."""
        pages = Page.objects.published()
        if self.is_search:
            pages = pages.filter(title__icontains=self.get("s"))
        return pages
