# storefront/rewrite.py
"""
Rewrite endpoints: named path segments carrying a value.

An endpoint ``coupon_code`` lets ``/coupon_code/SAVE10/`` and
``/about/coupon_code/SAVE10/`` reach the same views as ``/`` and
``/about/`` with ``coupon_code=SAVE10`` added to the content query.
"""
from __future__ import annotations

import logging
import re
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

_ENDPOINT_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class RewriteRules:
    """Registry of endpoints recognised at every path level."""

    def __init__(self) -> None:
        self._endpoints: List[str] = []
        self._patterns: Dict[str, re.Pattern] = {}

    @property
    def endpoints(self) -> Tuple[str, ...]:
        return tuple(self._endpoints)

    def add_endpoint(self, name: str) -> None:
        if not name or not _ENDPOINT_NAME_RE.match(name):
            raise ValueError(f"Invalid rewrite endpoint name: {name!r}")
        if name in self._patterns:
            return
        self._endpoints.append(name)
        self._patterns[name] = re.compile(
            rf"^(?P<path>.*?)/{re.escape(name)}/(?P<value>[^/]+)/?$"
        )
        logger.debug("Registered rewrite endpoint %s", name)

    def remove_endpoint(self, name: str) -> None:
        if name in self._patterns:
            self._endpoints.remove(name)
            del self._patterns[name]

    def match(self, path: str) -> Tuple[str, Dict[str, str]]:
        """
        Split a trailing endpoint off ``path``.

        Returns the remaining path (always ending with a slash) and the
        captured ``{endpoint: value}``; the path is returned untouched with
        an empty dict when no endpoint matches.
        """
        for name in self._endpoints:
            m = self._patterns[name].match(path)
            if m:
                return (m.group("path") or "") + "/", {name: m.group("value")}
        return path, {}


# Site-wide registry, filled by apps at startup
rewrite_rules = RewriteRules()
