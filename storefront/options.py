from __future__ import annotations

from typing import Optional

from django.conf import settings

SHOW_POSTS = "posts"
SHOW_PAGE = "page"


def show_on_front() -> str:
    """What the site root displays: ``"posts"`` (page listing) or ``"page"``."""
    value = (getattr(settings, "SITE_SHOW_ON_FRONT", SHOW_POSTS) or SHOW_POSTS).lower()
    return value if value in (SHOW_POSTS, SHOW_PAGE) else SHOW_POSTS


def page_on_front() -> Optional[int]:
    """Id of the static front page, if one is configured."""
    raw = getattr(settings, "SITE_PAGE_ON_FRONT", None)
    try:
        return int(raw) if raw else None
    except (TypeError, ValueError):
        return None
