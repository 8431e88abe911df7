# remote_element/locators.py
"""
@file locators.py
@brief Locator factory and its conversion to remote search strategies.
"""

from __future__ import annotations
import re
from dataclasses import dataclass

from .exceptions import InvalidArgumentError
from .interfaces import ILocator


_CSS_ESCAPE = re.compile(r"""([\s'"\\#.:;,!?+<>=~*^$|%&@`{}\-/\[\]()])""")

CSS_SELECTOR = "css selector"
XPATH = "xpath"
LINK_TEXT = "link text"
PARTIAL_LINK_TEXT = "partial link text"
TAG_NAME = "tag name"


def css_escape(value: str) -> str:
    """Escape an identifier for use inside a CSS selector."""
    escaped = _CSS_ESCAPE.sub(r"\\\1", value)
    if escaped and escaped[0].isdigit():
        escaped = f"\\{30 + int(escaped[0])} {escaped[1:]}"
    return escaped


@dataclass(frozen=True)
class RemoteLocator:
    """Strategy name and value as sent to the remote end."""
    using: str
    value: str


@dataclass(frozen=True)
class Locator(ILocator):
    """
    A query for elements.

    strategy is the user-facing strategy name (id, name, class name...);
    to_remote() maps it onto the strategies the remote end understands.
    """
    strategy: str
    value: str

    def to_remote(self) -> RemoteLocator:
        if self.strategy == "id":
            return RemoteLocator(CSS_SELECTOR, f"#{css_escape(self.value)}")
        if self.strategy == "name":
            quoted = self.value.replace("'", "\\'")
            return RemoteLocator(CSS_SELECTOR, f"*[name='{quoted}']")
        if self.strategy == "class name":
            return RemoteLocator(CSS_SELECTOR, f".{css_escape(self.value)}")
        return RemoteLocator(self.strategy, self.value)

    def __str__(self) -> str:
        return f"By.{self.strategy.replace(' ', '_')}: {self.value}"


def _locator(strategy: str, value: str) -> Locator:
    if value is None:
        raise InvalidArgumentError(f"Cannot find elements when the {strategy} is null.")
    return Locator(strategy, str(value))


class By:
    """Factory for the supported locator strategies."""

    @staticmethod
    def id(value: str) -> Locator:
        return _locator("id", value)

    @staticmethod
    def name(value: str) -> Locator:
        return _locator("name", value)

    @staticmethod
    def class_name(value: str) -> Locator:
        if value is not None and " " in value.strip():
            raise InvalidArgumentError(f"Compound class names are not permitted: {value!r}")
        return _locator("class name", value)

    @staticmethod
    def css_selector(value: str) -> Locator:
        return _locator(CSS_SELECTOR, value)

    @staticmethod
    def xpath(value: str) -> Locator:
        return _locator(XPATH, value)

    @staticmethod
    def tag_name(value: str) -> Locator:
        return _locator(TAG_NAME, value)

    @staticmethod
    def link_text(value: str) -> Locator:
        return _locator(LINK_TEXT, value)

    @staticmethod
    def partial_link_text(value: str) -> Locator:
        return _locator(PARTIAL_LINK_TEXT, value)
