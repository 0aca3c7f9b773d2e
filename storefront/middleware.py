# storefront/middleware.py
from __future__ import annotations

import logging

from django.http import HttpRequest
from django.utils.deprecation import MiddlewareMixin

from .query import ContentQuery
from .rewrite import rewrite_rules

logger = logging.getLogger(__name__)


class ContentQueryMiddleware(MiddlewareMixin):
    """
    Applies rewrite endpoints and parses the main content query.

    A trailing endpoint segment is removed from ``request.path_info`` before
    URL resolution; its value lands in ``request.endpoint_vars`` and in the
    main query attached as ``request.content_query``.
    """

    def process_request(self, request: HttpRequest) -> None:
        path, endpoint_vars = rewrite_rules.match(request.path_info)
        if endpoint_vars:
            logger.debug("Rewrote %s to %s with %s", request.path_info, path, endpoint_vars)
            request.path_info = path
        request.endpoint_vars = endpoint_vars
        request.content_query = ContentQuery.from_request(request, endpoint_vars)
        return None
