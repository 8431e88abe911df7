"""
Tests for command logging.
"""

import json

import pytest

from remote_element.commandlogger import COMMAND_LOGGER, CommandLogger
from remote_element.commands import Command
from remote_element.exceptions import NoSuchElementError


class TestCommandLogger:
    """Tests for CommandLogger output."""

    def test_disabled_logger_emits_nothing(self, capsys):
        logger = CommandLogger()
        assert logger.log(command="clickElement") is None
        assert capsys.readouterr().out == ""

    def test_line_format(self, capsys):
        logger = CommandLogger()
        logger.configure(run_id="r1")
        logger.enable()

        line = logger.log(
            command="getElementAttribute",
            element="[el]",
            duration_ms=3,
            parameters={"id": "abc", "name": "href"},
        )

        assert "getElementAttribute" in line
        assert "element='[el]'" in line
        assert "name=href" in line
        assert "id=abc" not in line
        assert "run_id=r1" in line
        assert capsys.readouterr().out.strip() == line

    def test_jsonl_format_with_exception(self):
        logger = CommandLogger()
        logger.configure(console=False, format="jsonl")
        logger.enable()

        line = logger.log(command="clickElement", status="error", exception=NoSuchElementError("gone"))

        event = json.loads(line)
        assert event["status"] == "error"
        assert event["exception"]["type"] == "NoSuchElementError"
        assert event["exception"]["message"] == "gone"

    def test_send_keys_text_is_masked(self):
        logger = CommandLogger()
        logger.configure(console=False)
        logger.enable()

        line = logger.log(
            command=Command.SEND_KEYS_TO_ELEMENT,
            parameters={"id": "a", "value": ["a very long secret text"]},
        )

        assert "a very lon..." in line
        assert "secret text" not in line

    def test_upload_payload_is_summarised(self):
        logger = CommandLogger()
        logger.configure(console=False)
        logger.enable()

        line = logger.log(command=Command.UPLOAD_FILE, parameters={"file": "QUJD" * 100})

        assert "<zip base64, 400 chars>" in line
        assert "QUJDQUJD" not in line

    def test_invalid_format(self):
        with pytest.raises(ValueError):
            CommandLogger().configure(format="xml")


class TestElementLogging:
    """Elements report every dispatched command."""

    def test_commands_are_logged(self, session, element, capsys):
        COMMAND_LOGGER.configure(format="jsonl")
        COMMAND_LOGGER.enable()
        session.responses[Command.GET_ELEMENT_TEXT] = "hi"

        element.get_text()

        event = json.loads(capsys.readouterr().out.strip())
        assert event["command"] == Command.GET_ELEMENT_TEXT
        assert event["element"] == str(element)
        assert event["status"] == "ok"

    def test_failures_are_logged(self, session, element, capsys):
        COMMAND_LOGGER.configure(format="jsonl")
        COMMAND_LOGGER.enable()
        session.responses[Command.CLICK_ELEMENT] = NoSuchElementError("gone")

        with pytest.raises(NoSuchElementError):
            element.click()

        event = json.loads(capsys.readouterr().out.strip())
        assert event["status"] == "error"
        assert event["exception"]["type"] == "NoSuchElementError"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
