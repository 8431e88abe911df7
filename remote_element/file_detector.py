# remote_element/file_detector.py
"""Upload strategies used by send_keys to spot local file paths."""

from __future__ import annotations
import logging
import os
from typing import Optional

from .interfaces import IFileDetector
from .keys import contains_special_key

log = logging.getLogger("remote_element.file_detector")


class UselessFileDetector(IFileDetector):
    """Never treats text as a file; keystrokes are always sent verbatim."""

    def get_local_file(self, keys: str) -> Optional[str]:
        return None


class LocalFileDetector(IFileDetector):
    """
    Treats a line of keystrokes as a local file when it names an existing
    regular file. Lines containing special key code points are never files.
    """

    def get_local_file(self, keys: str) -> Optional[str]:
        if not keys or contains_special_key(keys):
            return None
        path = os.path.expanduser(keys)
        if os.path.isfile(path):
            log.debug("Detected local file for upload: %s", path)
            return os.path.abspath(path)
        return None


def detector_for(name: str) -> IFileDetector:
    """Build a detector from its configuration name ('useless' or 'local')."""
    if name == "local":
        return LocalFileDetector()
    if name == "useless":
        return UselessFileDetector()
    raise ValueError(f"Unknown file detector: {name}. Use 'useless' or 'local'")
