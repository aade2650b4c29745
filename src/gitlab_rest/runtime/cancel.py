"""
Caller-owned cancellation for in-flight requests.
"""

from __future__ import annotations
import threading
import time
from typing import Optional


class CancelToken:
    """
    Thread-safe cancellation flag with an optional deadline.

    A token is created by the caller and attached to requests with
    ``with_cancel_token``. Cancelling it, or letting its deadline pass,
    stops any request that has not been sent yet and turns the result of an
    in-flight request into a ``CancelledError``.

    Example:
        ```python
        token = CancelToken.with_timeout(5.0)
        moves, resp = client.storage_moves.retrieve_all_storage_moves(
            None, with_cancel_token(token)
        )
        ```
    """

    def __init__(self, deadline: Optional[float] = None):
        """
        Args:
            deadline: Absolute ``time.monotonic()`` value after which the
                token counts as cancelled
        """
        self._event = threading.Event()
        self._deadline = deadline
        self._reason: Optional[str] = None

    @classmethod
    def with_timeout(cls, seconds: float) -> CancelToken:
        """Create a token that expires ``seconds`` from now."""
        return cls(deadline=time.monotonic() + seconds)

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    @property
    def reason(self) -> Optional[str]:
        if self._reason is None and self.expired:
            return "deadline exceeded"
        return self._reason

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    @property
    def cancelled(self) -> bool:
        return self._event.is_set() or self.expired

    def cancel(self, reason: str = "cancelled by caller") -> None:
        if not self._event.is_set():
            self._reason = reason
            self._event.set()

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None without a deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def __repr__(self) -> str:
        return f"CancelToken(cancelled={self.cancelled}, deadline={self._deadline})"
