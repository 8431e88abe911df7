# remote_element/commands.py
"""
@file commands.py
@brief Command names, command payloads and responses.

Builders return a CommandPayload tagged with the command name and the
parameters the remote end expects for it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class Command:
    CLICK_ELEMENT = "clickElement"
    SUBMIT_ELEMENT = "submitElement"
    SEND_KEYS_TO_ELEMENT = "sendKeysToElement"
    CLEAR_ELEMENT = "clearElement"
    UPLOAD_FILE = "uploadFile"
    GET_ELEMENT_TAG_NAME = "getElementTagName"
    GET_ELEMENT_DOM_PROPERTY = "getElementDomProperty"
    GET_ELEMENT_DOM_ATTRIBUTE = "getElementDomAttribute"
    GET_ELEMENT_ATTRIBUTE = "getElementAttribute"
    GET_ELEMENT_ARIA_ROLE = "getElementAriaRole"
    GET_ELEMENT_ACCESSIBLE_NAME = "getElementAccessibleName"
    IS_ELEMENT_SELECTED = "isElementSelected"
    IS_ELEMENT_ENABLED = "isElementEnabled"
    IS_ELEMENT_DISPLAYED = "isElementDisplayed"
    GET_ELEMENT_TEXT = "getElementText"
    GET_ELEMENT_VALUE_OF_CSS_PROPERTY = "getElementValueOfCssProperty"
    GET_ELEMENT_SHADOW_ROOT = "getElementShadowRoot"
    GET_ELEMENT_LOCATION = "getElementLocation"
    GET_ELEMENT_SIZE = "getElementSize"
    GET_ELEMENT_RECT = "getElementRect"
    GET_ELEMENT_LOCATION_ONCE_SCROLLED_INTO_VIEW = "getElementLocationOnceScrolledIntoView"
    ELEMENT_SCREENSHOT = "elementScreenshot"
    FIND_ELEMENT = "findElement"
    FIND_ELEMENTS = "findElements"
    FIND_CHILD_ELEMENT = "findChildElement"
    FIND_CHILD_ELEMENTS = "findChildElements"
    FIND_ELEMENT_FROM_SHADOW_ROOT = "findElementFromShadowRoot"
    FIND_ELEMENTS_FROM_SHADOW_ROOT = "findElementsFromShadowRoot"
    QUIT = "quit"


@dataclass(frozen=True)
class CommandPayload:
    """A command name plus its parameters."""
    name: str
    parameters: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Response:
    """Decoded result of one executed command."""
    value: Any = None
    session_id: Optional[str] = None


def _element(command_name: str, element_id: str, **extra: Any) -> CommandPayload:
    params: Dict[str, Any] = {"id": element_id}
    params.update(extra)
    return CommandPayload(command_name, params)


def click_element(element_id: str) -> CommandPayload:
    return _element(Command.CLICK_ELEMENT, element_id)


def submit_element(element_id: str) -> CommandPayload:
    return _element(Command.SUBMIT_ELEMENT, element_id)


def send_keys_to_element(element_id: str, keys: List[str]) -> CommandPayload:
    return _element(Command.SEND_KEYS_TO_ELEMENT, element_id, value=list(keys))


def clear_element(element_id: str) -> CommandPayload:
    return _element(Command.CLEAR_ELEMENT, element_id)


def upload_file(zipped_file: str) -> CommandPayload:
    return CommandPayload(Command.UPLOAD_FILE, {"file": zipped_file})


def get_element_tag_name(element_id: str) -> CommandPayload:
    return _element(Command.GET_ELEMENT_TAG_NAME, element_id)


def get_element_dom_property(element_id: str, name: str) -> CommandPayload:
    return _element(Command.GET_ELEMENT_DOM_PROPERTY, element_id, name=name)


def get_element_dom_attribute(element_id: str, name: str) -> CommandPayload:
    return _element(Command.GET_ELEMENT_DOM_ATTRIBUTE, element_id, name=name)


def get_element_attribute(element_id: str, name: str) -> CommandPayload:
    return _element(Command.GET_ELEMENT_ATTRIBUTE, element_id, name=name)


def get_element_aria_role(element_id: str) -> CommandPayload:
    return _element(Command.GET_ELEMENT_ARIA_ROLE, element_id)


def get_element_accessible_name(element_id: str) -> CommandPayload:
    return _element(Command.GET_ELEMENT_ACCESSIBLE_NAME, element_id)


def is_element_selected(element_id: str) -> CommandPayload:
    return _element(Command.IS_ELEMENT_SELECTED, element_id)


def is_element_enabled(element_id: str) -> CommandPayload:
    return _element(Command.IS_ELEMENT_ENABLED, element_id)


def is_element_displayed(element_id: str) -> CommandPayload:
    return _element(Command.IS_ELEMENT_DISPLAYED, element_id)


def get_element_text(element_id: str) -> CommandPayload:
    return _element(Command.GET_ELEMENT_TEXT, element_id)


def get_element_value_of_css_property(element_id: str, property_name: str) -> CommandPayload:
    return _element(Command.GET_ELEMENT_VALUE_OF_CSS_PROPERTY, element_id, propertyName=property_name)


def get_element_shadow_root(element_id: str) -> CommandPayload:
    return _element(Command.GET_ELEMENT_SHADOW_ROOT, element_id)


def get_element_location(element_id: str) -> CommandPayload:
    return _element(Command.GET_ELEMENT_LOCATION, element_id)


def get_element_size(element_id: str) -> CommandPayload:
    return _element(Command.GET_ELEMENT_SIZE, element_id)


def get_element_rect(element_id: str) -> CommandPayload:
    return _element(Command.GET_ELEMENT_RECT, element_id)


def get_element_location_once_scrolled_into_view(element_id: str) -> CommandPayload:
    return _element(Command.GET_ELEMENT_LOCATION_ONCE_SCROLLED_INTO_VIEW, element_id)


def element_screenshot(element_id: str) -> CommandPayload:
    return _element(Command.ELEMENT_SCREENSHOT, element_id)


def find_element(using: str, value: str) -> CommandPayload:
    return CommandPayload(Command.FIND_ELEMENT, {"using": using, "value": value})


def find_elements(using: str, value: str) -> CommandPayload:
    return CommandPayload(Command.FIND_ELEMENTS, {"using": using, "value": value})


def find_child_element(element_id: str, using: str, value: str) -> CommandPayload:
    return _element(Command.FIND_CHILD_ELEMENT, element_id, using=using, value=value)


def find_child_elements(element_id: str, using: str, value: str) -> CommandPayload:
    return _element(Command.FIND_CHILD_ELEMENTS, element_id, using=using, value=value)


def find_element_from_shadow_root(shadow_id: str, using: str, value: str) -> CommandPayload:
    return CommandPayload(
        Command.FIND_ELEMENT_FROM_SHADOW_ROOT,
        {"shadowId": shadow_id, "using": using, "value": value},
    )


def find_elements_from_shadow_root(shadow_id: str, using: str, value: str) -> CommandPayload:
    return CommandPayload(
        Command.FIND_ELEMENTS_FROM_SHADOW_ROOT,
        {"shadowId": shadow_id, "using": using, "value": value},
    )
