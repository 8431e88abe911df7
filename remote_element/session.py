# remote_element/session.py
"""
@file session.py
@brief Reference session: executes commands through a command executor and
       turns element references in responses into element handles.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Optional

from . import commands
from .commands import Command, CommandPayload, Response
from .config import ClientConfig
from .dialect import OSS_ELEMENT_KEY, W3C_ELEMENT_KEY, W3C_SHADOW_ROOT_KEY
from .element import RemoteElement
from .errorhandler import ErrorHandler
from .exceptions import ConversionError, NoSuchElementError, SessionClosedError
from .file_detector import UselessFileDetector, detector_for
from .interfaces import ICommandExecutor, IFileDetector, ILocator, ISession
from .output_type import FileOutputType
from .shadowroot import ShadowRoot


class RemoteSession(ISession):
    """
    Owns the command executor and the session id of one remote session.
    """

    def __init__(
        self,
        executor: ICommandExecutor,
        session_id: Optional[str] = None,
        file_detector: Optional[IFileDetector] = None,
        error_handler: Optional[ErrorHandler] = None,
        artifacts_dir: str = "artifacts",
        logger: Optional[logging.Logger] = None,
    ):
        self.executor = executor
        self.session_id = session_id
        self.file_detector: IFileDetector = file_detector or UselessFileDetector()
        self.error_handler = error_handler or ErrorHandler()
        self.artifacts_dir = artifacts_dir
        self.log = logger or logging.getLogger("remote_element")
        self._closed = False

    @classmethod
    def from_config(
        cls,
        executor: ICommandExecutor,
        config: ClientConfig,
        session_id: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> RemoteSession:
        """Create a session and apply the client configuration (including logging)."""
        config.apply_logging()
        return cls(
            executor,
            session_id=session_id,
            file_detector=detector_for(config.file_detector),
            artifacts_dir=config.artifacts_dir,
            logger=logger,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    # --- Execution ---

    def execute(self, command: Any, parameters: Optional[Dict[str, Any]] = None) -> Response:
        if isinstance(command, CommandPayload):
            name, params = command.name, command.parameters
        else:
            name, params = str(command), parameters or {}

        if self._closed:
            raise SessionClosedError(f"Cannot execute {name}: session {self.session_id} is closed")

        self.log.debug("Executing %s with %s", name, sorted(params))
        raw = self.executor.execute(self.session_id, name, self._wrap_value(params))
        self.error_handler.check_response(raw)

        return Response(
            value=self._unwrap_value(raw.get("value")),
            session_id=raw.get("sessionId", self.session_id),
        )

    def _wrap_value(self, value: Any) -> Any:
        if isinstance(value, (RemoteElement, ShadowRoot)):
            return value.to_json()
        if isinstance(value, dict):
            return {key: self._wrap_value(item) for key, item in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._wrap_value(item) for item in value]
        return value

    def _unwrap_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            if W3C_ELEMENT_KEY in value:
                return self.create_element(value[W3C_ELEMENT_KEY])
            if OSS_ELEMENT_KEY in value:
                return self.create_element(value[OSS_ELEMENT_KEY])
            if W3C_SHADOW_ROOT_KEY in value:
                return ShadowRoot(self, value[W3C_SHADOW_ROOT_KEY])
            return {key: self._unwrap_value(item) for key, item in value.items()}
        if isinstance(value, list):
            return [self._unwrap_value(item) for item in value]
        return value

    def create_element(self, element_id: str) -> RemoteElement:
        return RemoteElement(self, element_id, file_detector=self.file_detector)

    # --- Search ---

    def find_element(
        self,
        context: Any,
        command_builder: Callable[[str, str], CommandPayload],
        locator: ILocator,
    ) -> RemoteElement:
        remote = locator.to_remote()
        element = self.execute(command_builder(remote.using, remote.value)).value
        if element is None:
            raise NoSuchElementError(f"Unable to locate element: {locator}")
        if not isinstance(element, RemoteElement):
            raise ConversionError("RemoteElement", element)
        element.set_found_by(context, remote.using, remote.value)
        return element

    def find_elements(
        self,
        context: Any,
        command_builder: Callable[[str, str], CommandPayload],
        locator: ILocator,
    ) -> List[RemoteElement]:
        remote = locator.to_remote()
        found = self.execute(command_builder(remote.using, remote.value)).value
        if found is None:
            return []
        if not isinstance(found, list):
            raise ConversionError("list", found)
        for element in found:
            if not isinstance(element, RemoteElement):
                raise ConversionError("RemoteElement", element)
            element.set_found_by(context, remote.using, remote.value)
        return found

    def find(self, locator: ILocator) -> RemoteElement:
        """Find the first element in the whole document."""
        return self.find_element(self, commands.find_element, locator)

    def find_all(self, locator: ILocator) -> List[RemoteElement]:
        """Find all elements in the whole document."""
        return self.find_elements(self, commands.find_elements, locator)

    # --- Lifecycle ---

    def screenshot_output(self, prefix: str = "element") -> FileOutputType:
        """Output type writing screenshots into this session's artifacts dir."""
        return FileOutputType(out_dir=self.artifacts_dir, prefix=prefix)

    def close(self) -> None:
        """Quit the remote session. Element handles stop working afterwards."""
        if self._closed:
            return
        self.log.info("Closing session %s", self.session_id)
        try:
            self.execute(Command.QUIT)
        finally:
            self._closed = True

    def __enter__(self) -> RemoteSession:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __str__(self) -> str:
        return f"RemoteSession: ({self.session_id})"
