"""
Shared fakes for element and session tests.
"""

import pytest

from remote_element.commandlogger import COMMAND_LOGGER
from remote_element.commands import CommandPayload, Response
from remote_element.element import RemoteElement
from remote_element.interfaces import ICommandExecutor, ISession


class FakeSession(ISession):
    """
    Session double recording every executed command.

    responses maps a command name to a value, an exception instance to raise,
    or a callable receiving the command parameters.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.executed = []
        self.searches = []
        self.found = None
        self._closed = False

    @property
    def closed(self):
        return self._closed

    def close(self):
        self._closed = True

    def execute(self, command, parameters=None):
        if isinstance(command, CommandPayload):
            payload = command
        else:
            payload = CommandPayload(command, parameters or {})
        self.executed.append(payload)

        result = self.responses.get(payload.name)
        if isinstance(result, BaseException):
            raise result
        if callable(result):
            result = result(payload.parameters)
        return Response(value=result)

    def find_element(self, context, command_builder, locator):
        remote = locator.to_remote()
        self.searches.append((context, command_builder(remote.using, remote.value)))
        return self.found

    def find_elements(self, context, command_builder, locator):
        remote = locator.to_remote()
        self.searches.append((context, command_builder(remote.using, remote.value)))
        return list(self.found or [])

    def names(self):
        return [payload.name for payload in self.executed]


class FakeExecutor(ICommandExecutor):
    """
    Transport double for RemoteSession.

    responses maps a command name to a raw JSON body or a callable
    receiving the wire parameters. Unknown commands answer {"value": None}.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def execute(self, session_id, command_name, parameters):
        self.calls.append((session_id, command_name, parameters))
        raw = self.responses.get(command_name, {"value": None})
        if callable(raw):
            raw = raw(parameters)
        return raw


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def element(session):
    return RemoteElement(session, "elem-1", found_by="[fake] -> css selector: #target")


@pytest.fixture
def executor():
    return FakeExecutor()


@pytest.fixture(autouse=True)
def reset_command_logger():
    yield
    COMMAND_LOGGER.disable()
    COMMAND_LOGGER.configure()
