"""
GitLab v4 REST Client.

Provides the request pipeline shared by every resource service:
``new_request`` builds a request from a method, a relative path, typed
options and request options; ``do`` sends it exactly once and decodes the
body into the requested type.

Reference: https://docs.gitlab.com/ee/api/rest/
"""

from __future__ import annotations
import logging
from typing import Any, Iterable, Optional, Tuple, Union, get_origin
from urllib.parse import urljoin

import requests

from ..config import ClientConfig
from ..runtime.codec import decode_json, parse_error_message
from ..runtime.errors import (
    CancelledError,
    DecodeError,
    InvalidRequestError,
    TransportError,
    error_from_response,
)
from .options import Options
from .request import APIRequest, RequestOption
from .response import Response

logger = logging.getLogger(__name__)

_QUERY_METHODS = {"GET", "HEAD", "DELETE"}
_BODY_METHODS = {"POST", "PUT", "PATCH"}


def _is_list_type(target: Any) -> bool:
    return target is list or get_origin(target) is list


class GitLabClient:
    """
    GitLab v4 REST client.

    The configuration is read-only after construction, so a client can be
    shared between threads as long as the underlying ``requests.Session``
    can.

    Example:
        ```python
        client = GitLabClient("https://gitlab.example.com", token="glpat-...")

        moves, resp = client.storage_moves.retrieve_all_storage_moves(
            RetrieveAllStorageMovesOptions(per_page=50)
        )
        while resp.has_next:
            page, resp = client.storage_moves.retrieve_all_storage_moves(
                RetrieveAllStorageMovesOptions(per_page=50), with_next_page(resp)
            )
            moves.extend(page)
        ```
    """

    def __init__(
        self,
        config: Union[str, ClientConfig, None] = None,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Base URL string or a ClientConfig (default: from environment)
            token: Private token; overrides the one in ``config``
            session: Optional requests.Session for connection pooling
        """
        if config is None:
            config = ClientConfig.from_env()
        elif isinstance(config, str):
            config = ClientConfig(base_url=config)
        if token is not None:
            config = config.with_token(token)

        self._config = config
        self._base_url = config.api_url
        self._session = session or requests.Session()
        self._owns_session = session is None

        self.logger = logger
        if config.debug:
            self.logger.setLevel(logging.DEBUG)

        # Resource services
        from .storage_moves import ProjectRepositoryStorageMoveService
        self.storage_moves = ProjectRepositoryStorageMoveService(self)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        """Absolute API base URL, always ending in a slash."""
        return self._base_url

    def close(self) -> None:
        """Close the HTTP session if owned by this client."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> GitLabClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # =========================================================================
    # Request builder
    # =========================================================================

    def new_request(
        self,
        method: str,
        path: str,
        opts: Optional[Options] = None,
        options: Iterable[RequestOption] = (),
    ) -> APIRequest:
        """
        Build a request for a relative API path.

        Args:
            method: HTTP method
            path: Path relative to the API base, e.g. ``"projects/7/repository_storage_moves"``
            opts: Typed options; query parameters for GET/HEAD/DELETE, JSON
                body for POST/PUT/PATCH. None sends neither.
            options: Request options applied in order after construction

        Returns:
            The built request

        Raises:
            InvalidRequestError: If the path is malformed or an option fails
        """
        method = method.upper()
        if method not in _QUERY_METHODS and method not in _BODY_METHODS:
            raise InvalidRequestError(f"unsupported HTTP method: {method}")
        if (not path or path.startswith('/') or "://" in path
                or any(seg in (".", "..") for seg in path.split('/'))):
            raise InvalidRequestError(f"invalid relative path: {path!r}")

        req = APIRequest(
            method=method,
            url=urljoin(self._base_url, path),
            headers={
                "Accept": "application/json",
                "User-Agent": self._config.user_agent,
            },
        )
        if self._config.token:
            req.headers["PRIVATE-TOKEN"] = self._config.token

        if opts is not None:
            if method in _QUERY_METHODS:
                req.params = opts.to_query()
            else:
                req.json = opts.to_body()
                req.headers["Content-Type"] = "application/json"

        for option in options:
            staged = req.copy()
            try:
                option(staged)
            except InvalidRequestError:
                raise
            except Exception as e:
                raise InvalidRequestError(f"request option failed: {e}", cause=e) from e
            req = staged

        return req

    # =========================================================================
    # Dispatcher
    # =========================================================================

    def do(self, req: APIRequest, target: Any = None) -> Tuple[Any, Response]:
        """
        Send a request once and decode the response.

        Args:
            req: Request built by ``new_request``
            target: Type to decode a 2xx body into (model, ``List[Model]``,
                ``dict``...). None skips decoding.

        Returns:
            Tuple of (decoded value, response metadata). An empty or 204
            body decodes to ``[]`` for list targets and None otherwise.

        Raises:
            CancelledError: The request's token was cancelled or its deadline hit
            TransportError: No response was received
            APIStatusError: The server answered with a non-2xx status
            DecodeError: A 2xx body did not match ``target``
        """
        token = req.cancel_token
        if token is not None and token.cancelled:
            logger.warning(f"{req.method} {req.url} not sent: {token.reason}")
            raise CancelledError(f"request not sent: {token.reason}")

        timeout = self._effective_timeout(req)
        prepared = self._session.prepare_request(requests.Request(
            method=req.method,
            url=req.url,
            params=req.params or None,
            headers=req.headers,
            json=req.json,
        ))

        logger.debug(f"Request: {req.method} {prepared.url}")
        try:
            raw = self._session.send(
                prepared,
                timeout=timeout,
                verify=self._config.verify_ssl,
            )
        except requests.exceptions.Timeout as e:
            if token is not None and token.cancelled:
                logger.warning(f"{req.method} {req.url} cancelled: {token.reason}")
                raise CancelledError(f"request aborted: {token.reason}", cause=e) from e
            logger.warning(f"{req.method} {req.url} timed out after {timeout}s")
            raise TransportError(f"request timed out: {e}", cause=e) from e
        except requests.exceptions.RequestException as e:
            logger.warning(f"{req.method} {req.url} failed: {e}")
            raise TransportError(f"HTTP request failed: {e}", cause=e) from e

        resp = Response(raw)
        logger.debug(f"Response: {req.method} {prepared.url} -> {resp.status_code}")

        if token is not None and token.cancelled:
            raise CancelledError(f"request aborted: {token.reason}")

        if not resp.ok:
            raise error_from_response(resp, parse_error_message(raw.content))

        if target is None:
            return None, resp
        if resp.status_code == 204 or not raw.content:
            # List targets stay lists when there is nothing to decode
            return ([] if _is_list_type(target) else None), resp

        try:
            value = decode_json(raw.content, target)
        except DecodeError as e:
            raise DecodeError(e.message, e.details, e.cause, response=resp) from e.cause
        return value, resp

    def _effective_timeout(self, req: APIRequest) -> float:
        timeout = self._config.timeout
        if req.timeout is not None:
            timeout = min(timeout, req.timeout)
        if req.cancel_token is not None:
            remaining = req.cancel_token.remaining()
            if remaining is not None:
                # urllib3 rejects a zero timeout
                timeout = max(min(timeout, remaining), 0.001)
        return timeout
