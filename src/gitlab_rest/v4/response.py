"""
Response metadata.

Wraps the transport response together with the pagination and rate-limit
values GitLab sends as headers.
"""

from __future__ import annotations
from typing import Mapping, Optional

import requests


def _int_header(headers: Mapping[str, str], name: str) -> int:
    value = headers.get(name)
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        return 0


class Response:
    """
    GitLab API response metadata.

    Offset pagination values come from the ``X-Total``, ``X-Total-Pages``,
    ``X-Per-Page``, ``X-Page``, ``X-Next-Page`` and ``X-Prev-Page`` headers and
    are 0 when the server did not send them. Keyset pagination links come
    from the ``Link`` header and are None when absent.
    """

    def __init__(self, raw: requests.Response):
        self.raw = raw
        headers = raw.headers

        self.total_items = _int_header(headers, "X-Total")
        self.total_pages = _int_header(headers, "X-Total-Pages")
        self.items_per_page = _int_header(headers, "X-Per-Page")
        self.current_page = _int_header(headers, "X-Page")
        self.next_page = _int_header(headers, "X-Next-Page")
        self.previous_page = _int_header(headers, "X-Prev-Page")

        links = raw.links or {}
        self.next_link: Optional[str] = links.get("next", {}).get("url")
        self.previous_link: Optional[str] = links.get("prev", {}).get("url")
        self.first_link: Optional[str] = links.get("first", {}).get("url")
        self.last_link: Optional[str] = links.get("last", {}).get("url")

        self.rate_limit_limit = _int_header(headers, "RateLimit-Limit")
        self.rate_limit_remaining = _int_header(headers, "RateLimit-Remaining")
        self.rate_limit_reset = _int_header(headers, "RateLimit-Reset")

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def reason(self) -> str:
        return self.raw.reason or ""

    @property
    def headers(self) -> Mapping[str, str]:
        return self.raw.headers

    @property
    def text(self) -> str:
        return self.raw.text

    @property
    def content(self) -> bytes:
        return self.raw.content

    @property
    def url(self) -> str:
        return self.raw.url

    @property
    def method(self) -> Optional[str]:
        request = self.raw.request
        return request.method if request is not None else None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def has_next(self) -> bool:
        return bool(self.next_page or self.next_link)

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}] {self.method} {self.url}>"
