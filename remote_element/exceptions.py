# remote_element/exceptions.py
"""
@file exceptions.py
@brief Exception classes for the remote element client.
"""

from __future__ import annotations
from typing import Any, Dict, Optional


class RemoteElementError(Exception):
    """Base exception for the package."""
    pass


class ConfigError(RemoteElementError):
    """Raised when YAML/dict client configuration is invalid."""
    pass


class InvalidArgumentError(RemoteElementError, ValueError):
    """Raised when a caller passes malformed input to an element operation."""
    pass


class UnsupportedOperationError(RemoteElementError):
    """Raised for capabilities that are intentionally not offered."""
    pass


class ConversionError(RemoteElementError):
    """
    Raised when a value returned by the remote end does not have the
    expected shape.

    Attributes:
        expected: Human-readable name of the expected shape
        value: The value actually returned
    """

    def __init__(self, expected: str, value: Any, message: Optional[str] = None):
        self.expected = expected
        self.value = value
        self.message = message
        super().__init__(self.__str__())

    def __str__(self) -> str:
        base = f"Returned value cannot be converted to {self.expected}: {self.value!r}"
        if self.message:
            base += f" ({self.message})"
        return f"{base} [actual type: {type(self.value).__name__}]"


class RemoteError(RemoteElementError):
    """
    Raised when the session or the remote end fails to execute a command.

    Diagnostic annotations can be attached while the error propagates
    (see add_info); they are rendered after the message.

    Attributes:
        message: Message reported by the remote end or the session
        stacktrace: Remote stacktrace, when the remote end sends one
        additional_info: Ordered annotations added by callers
    """

    def __init__(self, message: str = "", stacktrace: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.stacktrace = stacktrace
        self.additional_info: Dict[str, str] = {}

    def add_info(self, key: str, value: str) -> RemoteError:
        """
        Attach a diagnostic annotation.

        @param key Annotation name, e.g. "Element"
        @param value Annotation value
        @return self so that the same error can be re-raised
        """
        self.additional_info[key] = value
        return self

    def __str__(self) -> str:
        base_msg = self.message or type(self).__name__

        details = [f"{key}: {value}" for key, value in self.additional_info.items()]
        if details:
            return f"{base_msg} [{', '.join(details)}]"
        return base_msg


class SessionClosedError(RemoteError):
    """Raised when an element is used after its session was torn down."""
    pass


class NoSuchElementError(RemoteError):
    """Raised when a search finds no element."""
    pass


class NoSuchShadowRootError(RemoteError):
    """Raised when an element has no shadow root."""
    pass


class StaleElementReferenceError(RemoteError):
    """Raised when the remote element was removed from its document."""
    pass


class ScriptError(RemoteError):
    """Raised when a script evaluated on the remote end fails."""
    pass


class InvalidSessionIdError(RemoteError):
    """Raised when the remote end does not know the session."""
    pass


class InvalidElementStateError(RemoteError):
    """Raised when the element is in a state that forbids the command."""
    pass


class ElementNotInteractableError(RemoteError):
    """Raised when the element cannot be interacted with."""
    pass
