"""
@file interfaces.py
@brief Abstract base classes for the collaborators of a remote element.

The element proxy only consumes these contracts: the session executes
commands, the command executor is the transport boundary, locators supply a
strategy/value pair, file detectors decide which strings are local files,
and output types decode screenshots.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional


class ISession(ABC):
    """
    Abstract session interface.

    Owns the connection to the remote end, executes commands on behalf of
    element handles and turns raw search results into new handles.
    """

    @property
    def closed(self) -> bool:
        """
        Whether the session has been torn down.

        Returns:
            True once the session can no longer execute commands
        """
        return False

    @abstractmethod
    def execute(self, command: Any, parameters: Optional[Dict[str, Any]] = None) -> Any:
        """
        Execute a command.

        Args:
            command: A CommandPayload, or a command name used with parameters
            parameters: Command parameters when command is a name

        Returns:
            Response whose value is command specific

        Raises:
            RemoteError: if the command fails
        """
        pass

    @abstractmethod
    def find_element(self, context: Any, command_builder: Callable[[str, str], Any], locator: "ILocator") -> Any:
        """
        Find the first element matching a locator.

        Args:
            context: Search context the command is scoped to
            command_builder: Builds the command from (using, value)
            locator: Locator describing the query

        Returns:
            The element handle
        """
        pass

    @abstractmethod
    def find_elements(self, context: Any, command_builder: Callable[[str, str], Any], locator: "ILocator") -> List[Any]:
        """
        Find all elements matching a locator.

        Returns:
            List of element handles (possibly empty)
        """
        pass


class ICommandExecutor(ABC):
    """
    Transport boundary.

    Implementations send one command to the remote end and return the
    decoded JSON body, e.g. {"value": ...} or {"value": {"error": ...}}.
    """

    @abstractmethod
    def execute(self, session_id: Optional[str], command_name: str, parameters: Dict[str, Any]) -> Dict[str, Any]:
        pass


class ISearchContext(ABC):
    """Anything elements can be searched from."""

    @abstractmethod
    def find_element(self, locator: "ILocator") -> Any:
        pass

    @abstractmethod
    def find_elements(self, locator: "ILocator") -> List[Any]:
        pass


class ILocator(ABC):
    """Query descriptor that can be expressed as a remote strategy/value pair."""

    @abstractmethod
    def to_remote(self) -> Any:
        """
        Returns:
            RemoteLocator with ``using`` and ``value``
        """
        pass


class IFileDetector(ABC):
    """Upload strategy: decides whether a string names a local file."""

    @abstractmethod
    def get_local_file(self, keys: str) -> Optional[str]:
        """
        Args:
            keys: Text passed to send_keys (one line of it)

        Returns:
            Path of the local file, or None if the text is not a local file
        """
        pass


class IOutputType(ABC):
    """Screenshot decoder chosen by the caller."""

    @abstractmethod
    def convert_from_base64_png(self, base64_png: str) -> Any:
        pass

    @abstractmethod
    def convert_from_png_bytes(self, png: bytes) -> Any:
        pass


class IUnwrappable(ABC):
    """Implemented by decorators that wrap another element handle."""

    @property
    @abstractmethod
    def wrapped_element(self) -> Any:
        """
        Returns:
            The element this object decorates
        """
        pass


class ICoordinates(ABC):
    """Different ways of expressing an element position."""

    @abstractmethod
    def on_screen(self) -> Any:
        pass

    @abstractmethod
    def in_viewport(self) -> Any:
        pass

    @abstractmethod
    def on_page(self) -> Any:
        pass

    @property
    @abstractmethod
    def auxiliary(self) -> Any:
        pass
