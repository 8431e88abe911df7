"""
Remote Element - client-side proxies for elements of a remotely rendered document.

This package provides:
- RemoteElement: element handle that realises every operation as a remote command
- RemoteSession: reference session over a pluggable command executor
- Locators, file detectors (uploads) and screenshot output types
- Exceptions: error taxonomy shared by handles and sessions
"""

from remote_element.element import RemoteElement, ElementCoordinates
from remote_element.session import RemoteSession
from remote_element.shadowroot import ShadowRoot
from remote_element.locators import By, Locator, RemoteLocator
from remote_element.keys import Keys
from remote_element.geometry import Point, Dimension, Rectangle
from remote_element.file_detector import LocalFileDetector, UselessFileDetector
from remote_element.commands import Command, CommandPayload, Response
from remote_element.dialect import Dialect
from remote_element.config import ClientConfig, load_config
from remote_element.commandlogger import COMMAND_LOGGER
from remote_element.exceptions import (
    RemoteElementError,
    ConfigError,
    InvalidArgumentError,
    UnsupportedOperationError,
    ConversionError,
    RemoteError,
    SessionClosedError,
    NoSuchElementError,
    StaleElementReferenceError,
    ScriptError,
)
from remote_element.interfaces import ISession, ICommandExecutor, IUnwrappable
from remote_element import output_type

__all__ = [
    "RemoteElement",
    "ElementCoordinates",
    "RemoteSession",
    "ShadowRoot",
    "By",
    "Locator",
    "RemoteLocator",
    "Keys",
    "Point",
    "Dimension",
    "Rectangle",
    "LocalFileDetector",
    "UselessFileDetector",
    "Command",
    "CommandPayload",
    "Response",
    "Dialect",
    "ClientConfig",
    "load_config",
    "COMMAND_LOGGER",
    "RemoteElementError",
    "ConfigError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
    "ConversionError",
    "RemoteError",
    "SessionClosedError",
    "NoSuchElementError",
    "StaleElementReferenceError",
    "ScriptError",
    "ISession",
    "ICommandExecutor",
    "IUnwrappable",
    "output_type",
]

__version__ = "1.0.0"
