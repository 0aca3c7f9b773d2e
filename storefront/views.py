# storefront/views.py
from __future__ import annotations

from django.core.paginator import Paginator
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, render
from django.views.decorators.http import require_GET

from .models import Page
from .query import ContentQuery

PAGES_PER_LISTING = 10


def _main_query(request: HttpRequest) -> ContentQuery:
    query = getattr(request, "content_query", None)
    if query is None:
        query = ContentQuery.from_request(request)
    return query


@require_GET
def front(request: HttpRequest) -> HttpResponse:
    """Site root: a single page, search results or the page listing."""
    query = _main_query(request)

    if query.is_page:
        page = query.get_page()
        if page is None:
            raise Http404("Page not found")
        return render(request, "storefront/page_detail.html", {
            "page": page,
            "is_front_page": query.is_front_page,
        })

    paginator = Paginator(query.get_pages(), PAGES_PER_LISTING)
    page_obj = paginator.get_page(query.get("paged") or 1)
    return render(request, "storefront/page_list.html", {
        "page_obj": page_obj,
        "search": query.get("s") if query.is_search else "",
    })


@require_GET
def page_detail(request: HttpRequest, slug: str) -> HttpResponse:
    page = get_object_or_404(Page.objects.published(), slug=slug)
    return render(request, "storefront/page_detail.html", {"page": page, "is_front_page": False})
