from __future__ import annotations

from typing import Any, Dict, Optional


class UpstreamError(RuntimeError):
    """A remote API (catalog or generation) answered with a failure or could not be reached."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload or {}


class GenerationError(UpstreamError):
    """The text-generation API failed to produce a description."""


class RequestError(ValueError):
    """The local request body or path could not be interpreted."""

    def __init__(self, message: str, *, payload: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload
