"""
@file commandlogger.py
@brief Log of commands dispatched by element handles.
"""

from __future__ import annotations

import json
import os
import threading
import time
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .commands import Command


class CommandLogger:
    """Thread-safe command logger with line/jsonl output."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._enabled = False
        self._console = True
        self._file_path: Optional[str] = None
        self._level = "INFO"
        self._run_id = "default"
        self._format = "line"
        self._max_traceback_chars = 4000

    def configure(
        self,
        *,
        console: bool = True,
        file_path: Optional[str] = None,
        level: str = "INFO",
        run_id: Optional[str] = None,
        format: str = "line",
        max_traceback_chars: int = 4000,
    ) -> None:
        """Configure logger settings."""
        fmt = (format or "line").lower()
        if fmt not in {"line", "jsonl"}:
            raise ValueError("CommandLogger format must be 'line' or 'jsonl'")

        with self._lock:
            self._console = bool(console)
            self._file_path = file_path
            self._level = level.upper()
            self._format = fmt
            self._max_traceback_chars = max(256, int(max_traceback_chars))
            if run_id:
                self._run_id = run_id

    def enable(self) -> None:
        with self._lock:
            self._enabled = True

    def disable(self) -> None:
        with self._lock:
            self._enabled = False

    def is_enabled(self) -> bool:
        return self._enabled

    def log(
        self,
        *,
        command: str,
        element: Optional[str] = None,
        status: str = "ok",
        duration_ms: Optional[int] = None,
        parameters: Optional[Dict[str, Any]] = None,
        exception: Optional[BaseException] = None,
    ) -> Optional[str]:
        """Emit a log event. Returns the formatted line, or None when disabled."""
        if not self._enabled:
            return None

        event: Dict[str, Any] = {
            "timestamp": time.strftime("%H:%M:%S"),
            "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": self._level,
            "command": command,
            "element": element,
            "status": status,
            "duration_ms": duration_ms,
            "parameters": self._redact(command, dict(parameters or {})),
            "run_id": self._run_id,
        }
        if exception is not None:
            event["exception"] = self._format_exception(exception)

        line = self._format_output(event)

        if self._console:
            print(line, flush=True)

        if self._file_path:
            self._write_file(line)
        return line

    def _write_file(self, line: str) -> None:
        try:
            os.makedirs(os.path.dirname(os.path.abspath(self._file_path)) or ".", exist_ok=True)
            with open(self._file_path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError:
            pass

    def _format_output(self, event: Dict[str, Any]) -> str:
        if self._format == "jsonl":
            return json.dumps(event, ensure_ascii=False, separators=(",", ":"), default=str)
        return self._format_line(event)

    def _format_line(self, event: Dict[str, Any]) -> str:
        parts = [event["timestamp"], event["level"], event["command"]]

        if event.get("element"):
            parts.append(f"element='{event['element']}'")
        parts.append(f"status={event['status']}")
        if event.get("duration_ms") is not None:
            parts.append(f"duration_ms={event['duration_ms']}")
        parts.append(f"run_id={event['run_id']}")

        for key, value in event["parameters"].items():
            if key == "id":
                continue
            parts.append(f"{key}={value}")

        exc = event.get("exception")
        if exc:
            parts.append(f"exc_type={exc['type']}")
            parts.append(f"exc_message={exc['message']}")

        return " | ".join(parts)

    def _redact(self, command: str, parameters: Dict[str, Any]) -> Dict[str, Any]:
        if command == Command.SEND_KEYS_TO_ELEMENT and "value" in parameters:
            text = "".join(str(v) for v in parameters["value"])
            parameters["value"] = self._mask_text(text)
        if command == Command.UPLOAD_FILE and "file" in parameters:
            parameters["file"] = f"<zip base64, {len(parameters['file'])} chars>"
        return parameters

    @staticmethod
    def _mask_text(text: str, max_visible: int = 10) -> str:
        if len(text) <= max_visible:
            return text
        return f"{text[:max_visible]}..."

    def _format_exception(self, exception: BaseException) -> Dict[str, Any]:
        tb = "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))
        if len(tb) > self._max_traceback_chars:
            tb = tb[: self._max_traceback_chars] + "...<truncated>"
        cause = exception.__cause__
        return {
            "type": type(exception).__name__,
            "message": str(exception),
            "traceback": tb.strip(),
            "cause_type": type(cause).__name__ if cause is not None else None,
        }


COMMAND_LOGGER = CommandLogger()
