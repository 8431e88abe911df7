# remote_element/errorhandler.py
"""
@file errorhandler.py
@brief Turns error payloads returned by the remote end into exceptions.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Type

from .exceptions import (ElementNotInteractableError, InvalidElementStateError,
                         InvalidSessionIdError, NoSuchElementError,
                         NoSuchShadowRootError, RemoteError, ScriptError,
                         StaleElementReferenceError)


W3C_ERRORS: Dict[str, Type[RemoteError]] = {
    "no such element": NoSuchElementError,
    "no such shadow root": NoSuchShadowRootError,
    "stale element reference": StaleElementReferenceError,
    "javascript error": ScriptError,
    "invalid session id": InvalidSessionIdError,
    "invalid element state": InvalidElementStateError,
    "element not interactable": ElementNotInteractableError,
}

# Legacy (OSS) numeric status codes
OSS_ERRORS: Dict[int, Type[RemoteError]] = {
    6: InvalidSessionIdError,
    7: NoSuchElementError,
    10: StaleElementReferenceError,
    12: InvalidElementStateError,
    17: ScriptError,
}


class ErrorHandler:
    """Checks raw responses and raises the matching RemoteError subclass."""

    def check_response(self, raw: Dict[str, Any]) -> None:
        """
        @param raw Decoded JSON body returned by the command executor
        @throws RemoteError (or subclass) if the body reports a failure
        """
        if not isinstance(raw, dict):
            raise RemoteError(f"Malformed response from remote end: {raw!r}")

        status = raw.get("status")
        value = raw.get("value")

        if isinstance(value, dict) and isinstance(value.get("error"), str):
            error = value["error"]
            exc_class = W3C_ERRORS.get(error, RemoteError)
            raise exc_class(self._message(value, error), value.get("stacktrace"))

        if isinstance(status, int) and not isinstance(status, bool) and status != 0:
            exc_class = OSS_ERRORS.get(status, RemoteError)
            payload = value if isinstance(value, dict) else {}
            raise exc_class(self._message(payload, f"status {status}"), payload.get("stackTrace"))

    @staticmethod
    def _message(payload: Dict[str, Any], fallback: str) -> str:
        message: Optional[str] = payload.get("message")
        return str(message) if message else fallback
