# remote_element/element.py
"""
@file element.py
@brief Client-side proxy for one element of a remotely rendered document.
"""

from __future__ import annotations
import os
import time
import weakref
from typing import Any, Dict, List, Optional

from . import archive
from . import commands
from .commandlogger import COMMAND_LOGGER
from .commands import Command, CommandPayload, Response
from .dialect import Dialect
from .exceptions import (ConversionError, InvalidArgumentError, RemoteError,
                         ScriptError, SessionClosedError,
                         UnsupportedOperationError)
from .file_detector import UselessFileDetector
from .geometry import Dimension, Point, Rectangle
from .interfaces import (ICoordinates, IFileDetector, ILocator, IOutputType,
                         ISearchContext, ISession, IUnwrappable)


def _to_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConversionError("bool", value)
    return value


def _to_str(value: Any) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise ConversionError("str", value)
    return value


def _string_value_of(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


class RemoteElement(ISearchContext):
    """
    Proxy for an element living in a remote session.

    The handle keeps only the element id and a weak reference to the session
    that created it. Every operation builds one command, executes it through
    the session and decodes the response value.
    """

    def __init__(
        self,
        session: Optional[ISession],
        element_id: str,
        found_by: Optional[str] = None,
        file_detector: Optional[IFileDetector] = None,
    ):
        """
        @param session Owning session (only weakly referenced)
        @param element_id Opaque id assigned by the remote end
        @param found_by Description of the search that produced the element
        @param file_detector Upload strategy for send_keys
        """
        if not isinstance(element_id, str) or not element_id:
            raise InvalidArgumentError(f"Element id must be a non-empty string, got: {element_id!r}")
        self._id = element_id
        self._parent_ref: Optional[weakref.ref] = None
        self._found_by = found_by
        self._file_detector: IFileDetector = file_detector or UselessFileDetector()
        if session is not None:
            self.set_parent(session)

    # --- Identity ---

    @property
    def id(self) -> str:
        return self._id

    @property
    def found_by(self) -> Optional[str]:
        return self._found_by

    @property
    def file_detector(self) -> IFileDetector:
        return self._file_detector

    def set_found_by(self, found_from: Any, locator: str, term: str) -> None:
        self._found_by = f"[{found_from}] -> {locator}: {term}"

    def set_parent(self, session: ISession) -> None:
        self._parent_ref = weakref.ref(session)

    def set_file_detector(self, detector: IFileDetector) -> None:
        self._file_detector = detector

    @property
    def wrapped_session(self) -> Optional[ISession]:
        """The owning session, or None if it is gone."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def parent(self) -> ISession:
        """
        The owning session.

        @throws SessionClosedError if the handle is detached or the session
                was collected or closed
        """
        session = self.wrapped_session
        if session is None:
            raise SessionClosedError("Element is not attached to a live session")
        if session.closed:
            raise SessionClosedError("Session has been closed")
        return session

    # --- Dispatch ---

    def _execute(self, command: Any, parameters: Optional[Dict[str, Any]] = None) -> Response:
        if isinstance(command, CommandPayload):
            name, params, args = command.name, command.parameters, (command,)
        else:
            name, params = command, parameters or {}
            args = (name, params)

        start_time = time.time()
        try:
            response = self.parent.execute(*args)
        except RemoteError as ex:
            ex.add_info("Element", str(self))
            COMMAND_LOGGER.log(
                command=name,
                element=str(self),
                status="error",
                duration_ms=int((time.time() - start_time) * 1000),
                parameters=params,
                exception=ex,
            )
            raise

        COMMAND_LOGGER.log(
            command=name,
            element=str(self),
            status="ok",
            duration_ms=int((time.time() - start_time) * 1000),
            parameters=params,
        )
        return response

    # --- Actions ---

    def click(self) -> None:
        self._execute(commands.click_element(self._id))

    def submit(self) -> None:
        try:
            self._execute(commands.submit_element(self._id))
        except ScriptError as ex:
            raise UnsupportedOperationError(
                "To submit an element, it must be nested inside a form element"
            ) from ex

    def clear(self) -> None:
        self._execute(commands.clear_element(self._id))

    def send_keys(self, *keys_to_send: str) -> None:
        """
        Type keys into the element.

        When every line of the text names a local file (according to the
        file detector) the files are uploaded first and the remote paths are
        typed instead.
        """
        if not keys_to_send:
            raise InvalidArgumentError("Keys to send must be one or more strings")
        for keys in keys_to_send:
            if keys is None:
                raise InvalidArgumentError("Keys to send must not contain None")
            if not isinstance(keys, str):
                raise InvalidArgumentError(f"Keys to send must be strings, got {type(keys).__name__}")

        all_keys = "".join(keys_to_send)

        lines = [line for line in all_keys.split("\n") if line]
        files = [self._file_detector.get_local_file(line) for line in lines]
        if files and None not in files:
            all_keys = "\n".join(self._upload(local_file) for local_file in files)

        self._execute(commands.send_keys_to_element(self._id, [all_keys]))

    def _upload(self, local_file: str) -> str:
        if not local_file or not os.path.isfile(local_file):
            raise InvalidArgumentError(f"You may only upload files: {local_file}")

        try:
            zipped = archive.zip_file(local_file)
        except OSError as e:
            raise RemoteError(f"Cannot upload {local_file}") from e

        response = self._execute(commands.upload_file(zipped))
        token = response.value
        if not isinstance(token, str):
            raise ConversionError("str", token, f"upload of {local_file}")
        return token

    # --- Queries ---

    def get_tag_name(self) -> Optional[str]:
        return _to_str(self._execute(commands.get_element_tag_name(self._id)).value)

    def get_dom_property(self, name: str) -> Optional[str]:
        return _string_value_of(self._execute(commands.get_element_dom_property(self._id, name)).value)

    def get_dom_attribute(self, name: str) -> Optional[str]:
        return _string_value_of(self._execute(commands.get_element_dom_attribute(self._id, name)).value)

    def get_attribute(self, name: str) -> Optional[str]:
        return _string_value_of(self._execute(commands.get_element_attribute(self._id, name)).value)

    def get_aria_role(self) -> Optional[str]:
        return _string_value_of(self._execute(commands.get_element_aria_role(self._id)).value)

    def get_accessible_name(self) -> Optional[str]:
        return _string_value_of(self._execute(commands.get_element_accessible_name(self._id)).value)

    def is_selected(self) -> bool:
        return _to_bool(self._execute(commands.is_element_selected(self._id)).value)

    def is_enabled(self) -> bool:
        return _to_bool(self._execute(commands.is_element_enabled(self._id)).value)

    def is_displayed(self) -> bool:
        value = self._execute(commands.is_element_displayed(self._id)).value
        # Some remote ends answer null for elements outside the document
        if value is None:
            return False
        return _to_bool(value)

    def get_text(self) -> Optional[str]:
        return _to_str(self._execute(commands.get_element_text(self._id)).value)

    def get_css_value(self, property_name: str) -> Optional[str]:
        response = self._execute(commands.get_element_value_of_css_property(self._id, property_name))
        return _to_str(response.value)

    def get_shadow_root(self) -> ISearchContext:
        value = self._execute(commands.get_element_shadow_root(self._id)).value
        if not isinstance(value, ISearchContext):
            raise ConversionError("ShadowRoot", value)
        return value

    # --- Child search ---

    def find_element(self, locator: ILocator) -> RemoteElement:
        return self.parent.find_element(
            self,
            lambda using, value: commands.find_child_element(self._id, using, str(value)),
            locator,
        )

    def find_elements(self, locator: ILocator) -> List[RemoteElement]:
        return self.parent.find_elements(
            self,
            lambda using, value: commands.find_child_elements(self._id, using, str(value)),
            locator,
        )

    # --- Geometry ---

    def get_location(self) -> Point:
        return Point.from_dict(self._execute(commands.get_element_location(self._id)).value)

    def get_size(self) -> Dimension:
        return Dimension.from_dict(self._execute(commands.get_element_size(self._id)).value)

    def get_rect(self) -> Rectangle:
        return Rectangle.from_dict(self._execute(commands.get_element_rect(self._id)).value)

    def get_coordinates(self) -> ElementCoordinates:
        return ElementCoordinates(self)

    def _location_in_view(self) -> Point:
        payload = commands.get_element_location_once_scrolled_into_view(self._id)
        return Point.from_dict(self._execute(payload).value)

    def get_screenshot_as(self, output_type: IOutputType) -> Any:
        """
        Capture the element and decode it with output_type.

        @throws RuntimeError if the remote value is neither base64 text nor bytes
        """
        result = self._execute(commands.element_screenshot(self._id)).value
        if isinstance(result, str):
            return output_type.convert_from_base64_png(result)
        if isinstance(result, (bytes, bytearray)):
            return output_type.convert_from_png_bytes(bytes(result))
        shape = "None" if result is None else f"{type(result).__name__} instance"
        raise RuntimeError(f"Unexpected result for {Command.ELEMENT_SCREENSHOT} command: {shape}")

    # --- Equality / serialization ---

    def __eq__(self, other: Any) -> bool:
        while isinstance(other, IUnwrappable):
            other = other.wrapped_element
        if not isinstance(other, RemoteElement):
            return False
        return self._id == other._id

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash(self._id)

    def to_json(self) -> Dict[str, str]:
        return {
            Dialect.OSS.encoded_element_key: self._id,
            Dialect.W3C.encoded_element_key: self._id,
        }

    def __repr__(self) -> str:
        if self._found_by is None:
            return f"[{object.__repr__(self)} -> unknown locator]"
        return f"[{self._found_by}]"

    __str__ = __repr__


class ElementCoordinates(ICoordinates):
    """Position of an element on the screen, in the viewport and on the page."""

    def __init__(self, element: RemoteElement):
        self._element = element

    def on_screen(self) -> Point:
        raise UnsupportedOperationError("Not supported yet.")

    def in_viewport(self) -> Point:
        return self._element._location_in_view()

    def on_page(self) -> Point:
        return self._element.get_location()

    @property
    def auxiliary(self) -> str:
        return self._element.id
