# remote_element/config.py
"""
@file config.py
@brief Client configuration loaded from YAML and validated with JSON schema.
"""

from __future__ import annotations
import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import jsonschema
import yaml

from .commandlogger import COMMAND_LOGGER, CommandLogger
from .exceptions import ConfigError

SCHEMA_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "schemas", "config.schema.json")

_schema_cache: Optional[Dict[str, Any]] = None


def _schema() -> Dict[str, Any]:
    global _schema_cache
    if _schema_cache is None:
        with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
            _schema_cache = json.load(f)
    return _schema_cache


@dataclass(frozen=True)
class ClientConfig:
    file_detector: str = "useless"
    artifacts_dir: str = "artifacts"
    log_commands: bool = False
    log_console: bool = True
    log_format: str = "line"
    log_file: Optional[str] = None
    log_level: str = "INFO"
    run_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> ClientConfig:
        """
        Build a config from a mapping with optional "client" and "logging"
        sections. Unknown keys and bad values raise ConfigError.
        """
        data = data or {}
        try:
            jsonschema.validate(instance=data, schema=_schema())
        except jsonschema.ValidationError as e:
            where = ".".join(str(p) for p in e.absolute_path) or "<root>"
            raise ConfigError(f"{where}: {e.message}") from e

        client = data.get("client", {}) or {}
        logging_cfg = data.get("logging", {}) or {}
        return cls(
            file_detector=str(client.get("file_detector", "useless")),
            artifacts_dir=str(client.get("artifacts_dir", "artifacts")),
            log_commands=bool(logging_cfg.get("commands", False)),
            log_console=bool(logging_cfg.get("console", True)),
            log_format=str(logging_cfg.get("format", "line")),
            log_file=logging_cfg.get("file"),
            log_level=str(logging_cfg.get("level", "INFO")),
            run_id=logging_cfg.get("run_id"),
        )

    def apply_logging(self, logger: CommandLogger = COMMAND_LOGGER) -> None:
        """Configure (and enable or disable) the command logger."""
        logger.configure(
            console=self.log_console,
            file_path=self.log_file,
            level=self.log_level,
            run_id=self.run_id,
            format=self.log_format,
        )
        if self.log_commands:
            logger.enable()
        else:
            logger.disable()


def load_config(path: str) -> ClientConfig:
    """Load and validate a YAML client configuration file."""
    path = os.path.abspath(path)
    if not os.path.exists(path):
        raise ConfigError(f"Client config YAML not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Client config YAML must be a mapping at root.")
    return ClientConfig.from_dict(data)
