"""
Tests for RemoteElement command dispatch, conversions and identity.
"""

import gc

import pytest

from remote_element.commands import Command, CommandPayload
from remote_element.element import RemoteElement
from remote_element.exceptions import (ConversionError, InvalidArgumentError,
                                       NoSuchElementError, RemoteError,
                                       ScriptError, SessionClosedError,
                                       UnsupportedOperationError)
from remote_element.interfaces import ISearchContext, IUnwrappable
from remote_element.locators import By

from conftest import FakeSession


class Wrapper(IUnwrappable):
    """Decorator handle exposing the element it wraps."""

    def __init__(self, inner):
        self._inner = inner

    @property
    def wrapped_element(self):
        return self._inner


class TestConstruction:
    """Tests for handle construction and attachment."""

    def test_rejects_empty_id(self, session):
        """An element id must be a non-empty string."""
        with pytest.raises(InvalidArgumentError):
            RemoteElement(session, "")

    def test_rejects_non_string_id(self, session):
        """Non-string ids are rejected."""
        with pytest.raises(InvalidArgumentError):
            RemoteElement(session, 42)

    def test_wrapped_session_is_weak(self):
        """The handle must not keep its session alive."""
        session = FakeSession()
        element = RemoteElement(session, "abc")
        assert element.wrapped_session is session

        del session
        gc.collect()

        assert element.wrapped_session is None
        with pytest.raises(SessionClosedError):
            element.click()

    def test_detached_handle_fails_with_remote_error(self):
        """A handle without a session fails with RemoteError on use."""
        element = RemoteElement(None, "abc")
        with pytest.raises(RemoteError) as exc_info:
            element.get_text()
        assert "Element" in exc_info.value.additional_info

    def test_closed_session_fails(self, session, element):
        """Operations after session teardown raise SessionClosedError."""
        session.close()
        with pytest.raises(SessionClosedError):
            element.click()
        assert session.executed == []

    def test_set_found_by_format(self, session):
        """found_by describes context, strategy and value."""
        element = RemoteElement(session, "abc")
        element.set_found_by("ctx", "css selector", "#a")
        assert element.found_by == "[ctx] -> css selector: #a"
        assert str(element) == "[[ctx] -> css selector: #a]"

    def test_repr_without_found_by(self, session):
        """Unknown origin is rendered explicitly."""
        element = RemoteElement(session, "abc")
        assert "unknown locator" in repr(element)


class TestCommandDispatch:
    """Tests for command construction and response decoding."""

    def test_click_sends_element_id(self, session, element):
        """click sends a single clickElement with the element id."""
        element.click()
        assert session.executed == [CommandPayload(Command.CLICK_ELEMENT, {"id": "elem-1"})]

    def test_clear(self, session, element):
        element.clear()
        assert session.names() == [Command.CLEAR_ELEMENT]

    def test_get_text(self, session, element):
        session.responses[Command.GET_ELEMENT_TEXT] = "Hello"
        assert element.get_text() == "Hello"

    def test_get_text_rejects_non_string(self, session, element):
        """Strict string results are not coerced."""
        session.responses[Command.GET_ELEMENT_TEXT] = 12
        with pytest.raises(ConversionError) as exc_info:
            element.get_text()
        assert exc_info.value.expected == "str"
        assert exc_info.value.value == 12

    def test_get_tag_name(self, session, element):
        session.responses[Command.GET_ELEMENT_TAG_NAME] = "input"
        assert element.get_tag_name() == "input"

    def test_get_css_value_sends_property_name(self, session, element):
        session.responses[Command.GET_ELEMENT_VALUE_OF_CSS_PROPERTY] = "block"
        assert element.get_css_value("display") == "block"
        assert session.executed[0].parameters == {"id": "elem-1", "propertyName": "display"}

    def test_attribute_values_are_stringified(self, session, element):
        """Attribute and property reads convert values with str()."""
        session.responses[Command.GET_ELEMENT_ATTRIBUTE] = 5
        session.responses[Command.GET_ELEMENT_DOM_PROPERTY] = True
        assert element.get_attribute("maxlength") == "5"
        assert element.get_dom_property("checked") == "True"

    def test_attribute_none_stays_none(self, session, element):
        session.responses[Command.GET_ELEMENT_DOM_ATTRIBUTE] = None
        assert element.get_dom_attribute("missing") is None
        assert session.executed[0].parameters == {"id": "elem-1", "name": "missing"}

    def test_aria_role_and_accessible_name(self, session, element):
        session.responses[Command.GET_ELEMENT_ARIA_ROLE] = "button"
        session.responses[Command.GET_ELEMENT_ACCESSIBLE_NAME] = "Save"
        assert element.get_aria_role() == "button"
        assert element.get_accessible_name() == "Save"

    def test_is_selected_and_enabled(self, session, element):
        session.responses[Command.IS_ELEMENT_SELECTED] = True
        session.responses[Command.IS_ELEMENT_ENABLED] = False
        assert element.is_selected() is True
        assert element.is_enabled() is False

    def test_boolean_mismatch_raises(self, session, element):
        """A non-boolean answer is a ConversionError, not a truthiness check."""
        session.responses[Command.IS_ELEMENT_ENABLED] = "true"
        with pytest.raises(ConversionError):
            element.is_enabled()

    def test_is_selected_null_is_an_error(self, session, element):
        """Only is_displayed accepts null."""
        session.responses[Command.IS_ELEMENT_SELECTED] = None
        with pytest.raises(ConversionError):
            element.is_selected()

    def test_is_displayed_null_is_false(self, session, element):
        session.responses[Command.IS_ELEMENT_DISPLAYED] = None
        assert element.is_displayed() is False

    def test_is_displayed_true(self, session, element):
        session.responses[Command.IS_ELEMENT_DISPLAYED] = True
        assert element.is_displayed() is True

    def test_is_displayed_rejects_other_shapes(self, session, element):
        session.responses[Command.IS_ELEMENT_DISPLAYED] = 1
        with pytest.raises(ConversionError):
            element.is_displayed()

    def test_get_shadow_root_requires_search_context(self, session, element):
        session.responses[Command.GET_ELEMENT_SHADOW_ROOT] = {"not": "a root"}
        with pytest.raises(ConversionError):
            element.get_shadow_root()

    def test_get_shadow_root_returns_context(self, session, element):
        class Root(ISearchContext):
            def find_element(self, locator):
                return None

            def find_elements(self, locator):
                return []

        root = Root()
        session.responses[Command.GET_ELEMENT_SHADOW_ROOT] = root
        assert element.get_shadow_root() is root


class TestErrorEnrichment:
    """Tests for annotation of remote failures."""

    def test_remote_error_gets_element_info(self, session, element):
        """The same error object is re-raised with the element description."""
        error = NoSuchElementError("gone")
        session.responses[Command.CLICK_ELEMENT] = error

        with pytest.raises(NoSuchElementError) as exc_info:
            element.click()

        assert exc_info.value is error
        assert error.additional_info["Element"] == str(element)
        assert "Element: [[fake] -> css selector: #target]" in str(error)

    def test_non_remote_errors_are_not_annotated(self, session, element):
        session.responses[Command.CLICK_ELEMENT] = KeyError("x")
        with pytest.raises(KeyError):
            element.click()


class TestSubmit:
    """Tests for submit()."""

    def test_script_error_becomes_unsupported(self, session, element):
        session.responses[Command.SUBMIT_ELEMENT] = ScriptError("no form")
        with pytest.raises(UnsupportedOperationError) as exc_info:
            element.submit()
        assert "form element" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ScriptError)

    def test_other_remote_errors_propagate(self, session, element):
        session.responses[Command.SUBMIT_ELEMENT] = NoSuchElementError("gone")
        with pytest.raises(NoSuchElementError):
            element.submit()

    def test_submit_success(self, session, element):
        element.submit()
        assert session.names() == [Command.SUBMIT_ELEMENT]


class TestChildSearch:
    """Tests for find_element / find_elements command construction."""

    def test_find_element_builds_child_command(self, session, element):
        child = RemoteElement(session, "child")
        session.found = child

        assert element.find_element(By.css_selector("span.x")) is child

        context, payload = session.searches[0]
        assert context is element
        assert payload == CommandPayload(
            Command.FIND_CHILD_ELEMENT,
            {"id": "elem-1", "using": "css selector", "value": "span.x"},
        )

    def test_find_elements_builds_child_command(self, session, element):
        session.found = [RemoteElement(session, "a"), RemoteElement(session, "b")]

        found = element.find_elements(By.id("q"))

        assert [e.id for e in found] == ["a", "b"]
        _, payload = session.searches[0]
        assert payload.name == Command.FIND_CHILD_ELEMENTS
        assert payload.parameters == {"id": "elem-1", "using": "css selector", "value": "#q"}


class TestIdentity:
    """Tests for equality, hashing and serialization."""

    def test_equal_ids_are_equal(self):
        s1, s2 = FakeSession(), FakeSession()
        a = RemoteElement(s1, "same", found_by="one")
        b = RemoteElement(s2, "same", found_by="two")
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_ids_differ(self, session):
        assert RemoteElement(session, "a") != RemoteElement(session, "b")

    def test_unwraps_nested_wrappers(self, session):
        a = RemoteElement(session, "same")
        wrapped = Wrapper(Wrapper(RemoteElement(session, "same")))
        assert a == wrapped
        assert a != Wrapper(RemoteElement(session, "other"))

    def test_non_element_is_never_equal(self, element):
        assert element != "elem-1"
        assert element != Wrapper("elem-1")
        assert element != None  # noqa: E711

    def test_to_json_has_both_dialect_keys(self, element):
        assert element.to_json() == {
            "ELEMENT": "elem-1",
            "element-6066-11e4-a52e-4f735466cecf": "elem-1",
        }

    def test_executes_by_name_and_parameters(self, session, element):
        """_execute also accepts a command name with parameters."""
        session.responses["custom"] = "ok"
        assert element._execute("custom", {"id": "elem-1"}).value == "ok"
        assert session.executed == [CommandPayload("custom", {"id": "elem-1"})]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
