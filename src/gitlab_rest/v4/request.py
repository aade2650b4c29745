"""
Outbound request representation and request options.

A RequestOption is any callable taking an ``APIRequest`` and changing it in
place. Options are applied in the order given; the client applies each one
to a staged copy, so a failing option never leaves a half-modified request.
"""

from __future__ import annotations
import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qsl, quote, urlsplit

from ..runtime.cancel import CancelToken
from ..runtime.errors import InvalidRequestError

if TYPE_CHECKING:
    from .response import Response


@dataclass
class APIRequest:
    """A fully-formed request waiting to be dispatched."""

    method: str
    url: str
    params: List[Tuple[str, str]] = field(default_factory=list)
    headers: Dict[str, str] = field(default_factory=dict)
    json: Optional[Dict[str, Any]] = None
    timeout: Optional[float] = None
    cancel_token: Optional[CancelToken] = None

    def copy(self) -> APIRequest:
        staged = copy.copy(self)
        staged.params = list(self.params)
        staged.headers = dict(self.headers)
        staged.json = copy.deepcopy(self.json)
        return staged

    def set_param(self, name: str, value: Any) -> None:
        """Replace every occurrence of query parameter ``name``."""
        self.params = [(k, v) for k, v in self.params if k != name]
        self.params.append((name, str(value)))


RequestOption = Callable[[APIRequest], None]


# =============================================================================
# Path helpers
# =============================================================================

def parse_id(value: Union[int, str], name: str = "id") -> str:
    """
    Turn a resource identifier into a single, escaped path segment.

    Integers must be positive. Strings (``namespace/project``) must be
    non-empty and are escaped so slashes stay inside the segment. The
    dot segments ``.`` and ``..`` are rejected, as URL resolution would
    drop them from the path.

    Raises:
        InvalidRequestError: For booleans, non-positive integers, empty
            strings, dot segments and any other type
    """
    if isinstance(value, bool):
        raise InvalidRequestError(f"invalid {name}: {value!r} (bool is not an identifier)")
    if isinstance(value, int):
        if value <= 0:
            raise InvalidRequestError(f"invalid {name}: {value} (must be positive)")
        return str(value)
    if isinstance(value, str):
        if not value.strip():
            raise InvalidRequestError(f"invalid {name}: empty string")
        if value in (".", ".."):
            raise InvalidRequestError(f"invalid {name}: {value!r} (dot segment)")
        return path_escape(value)
    raise InvalidRequestError(
        f"invalid {name}: {value!r} (type {type(value).__name__}, expected int or str)"
    )


def parse_int_id(value: int, name: str = "id") -> str:
    """Like parse_id, but only integers are accepted."""
    if isinstance(value, str):
        raise InvalidRequestError(f"invalid {name}: {value!r} (expected int)")
    return parse_id(value, name)


def path_escape(segment: str) -> str:
    return quote(segment, safe="")


# =============================================================================
# Request options
# =============================================================================

def with_header(name: str, value: str) -> RequestOption:
    """Set a single header."""
    def apply(req: APIRequest) -> None:
        if not name or any(c in name for c in ":\r\n"):
            raise InvalidRequestError(f"invalid header name: {name!r}")
        if "\r" in value or "\n" in value:
            raise InvalidRequestError(f"invalid value for header {name!r}")
        req.headers[name] = value
    return apply


def with_headers(headers: Mapping[str, str]) -> RequestOption:
    """Set several headers; either all are applied or none."""
    items = list(headers.items())

    def apply(req: APIRequest) -> None:
        for name, value in items:
            with_header(name, value)(req)
    return apply


def with_token(token: str) -> RequestOption:
    """Authenticate this request with a different private token."""
    def apply(req: APIRequest) -> None:
        if not token:
            raise InvalidRequestError("token cannot be empty")
        req.headers.pop("Authorization", None)
        req.headers["PRIVATE-TOKEN"] = token
    return apply


def with_sudo(user: Union[int, str]) -> RequestOption:
    """Run the request as another user (administrators only)."""
    def apply(req: APIRequest) -> None:
        req.headers["Sudo"] = parse_id(user, "sudo user")
    return apply


def with_query_params(params: Mapping[str, Any]) -> RequestOption:
    """Add or replace custom query parameters."""
    items = list(params.items())

    def apply(req: APIRequest) -> None:
        for name, value in items:
            if not name:
                raise InvalidRequestError("query parameter name cannot be empty")
            req.set_param(name, value)
    return apply


def with_cancel_token(token: CancelToken) -> RequestOption:
    """Attach a cancellation token honored by the dispatcher."""
    def apply(req: APIRequest) -> None:
        req.cancel_token = token
    return apply


def with_timeout(seconds: float) -> RequestOption:
    """Override the client timeout for this request."""
    def apply(req: APIRequest) -> None:
        if seconds <= 0:
            raise InvalidRequestError(f"timeout must be positive, got {seconds}")
        req.timeout = seconds
    return apply


def with_offset_pagination(page: int, per_page: Optional[int] = None) -> RequestOption:
    """Request a specific page of an offset-paginated list."""
    def apply(req: APIRequest) -> None:
        if page < 1:
            raise InvalidRequestError(f"page must be >= 1, got {page}")
        req.set_param("page", page)
        if per_page is not None:
            req.set_param("per_page", per_page)
    return apply


def with_keyset_pagination(next_link: str) -> RequestOption:
    """
    Copy the query parameters of a keyset ``next`` link onto the request.

    The link is the ``rel="next"`` URL GitLab returns in the Link header.
    """
    def apply(req: APIRequest) -> None:
        if not next_link:
            raise InvalidRequestError("next link cannot be empty")
        query = urlsplit(next_link).query
        if not query:
            raise InvalidRequestError(f"next link has no query parameters: {next_link!r}")
        for name, value in parse_qsl(query, keep_blank_values=True):
            req.set_param(name, value)
    return apply


def with_next_page(response: "Response") -> RequestOption:
    """
    Continue from a previous response, whichever pagination it used.

    Uses the ``next`` link when it is a keyset link, or when the response
    carries no ``X-Next-Page`` number (GitLab omits it in keyset mode).
    Otherwise the page number is used.
    """
    def apply(req: APIRequest) -> None:
        link = response.next_link
        if link and (not response.next_page or _is_keyset_link(link)):
            with_keyset_pagination(link)(req)
        elif response.next_page:
            req.set_param("page", response.next_page)
        else:
            raise InvalidRequestError("response has no next page")
    return apply


def _is_keyset_link(link: str) -> bool:
    params = dict(parse_qsl(urlsplit(link).query))
    return params.get("pagination") == "keyset" or "cursor" in params


__all__ = [
    "APIRequest",
    "RequestOption",
    "parse_id",
    "parse_int_id",
    "path_escape",
    "with_header",
    "with_headers",
    "with_token",
    "with_sudo",
    "with_query_params",
    "with_cancel_token",
    "with_timeout",
    "with_offset_pagination",
    "with_keyset_pagination",
    "with_next_page",
]
