# remote_element/shadowroot.py
"""Search context rooted at an element's shadow root."""

from __future__ import annotations
import weakref
from typing import Any, Dict, List

from . import commands
from .dialect import W3C_SHADOW_ROOT_KEY
from .exceptions import InvalidArgumentError, SessionClosedError
from .interfaces import ILocator, ISearchContext, ISession


class ShadowRoot(ISearchContext):
    """
    Handle for a remote shadow root.

    Like element handles it keeps only an id and a weak session reference;
    searches are delegated to the session.
    """

    def __init__(self, session: ISession, shadow_id: str):
        if not isinstance(shadow_id, str) or not shadow_id:
            raise InvalidArgumentError(f"Shadow root id must be a non-empty string, got: {shadow_id!r}")
        self._id = shadow_id
        self._parent_ref = weakref.ref(session)

    @property
    def id(self) -> str:
        return self._id

    @property
    def parent(self) -> ISession:
        session = self._parent_ref()
        if session is None or session.closed:
            raise SessionClosedError("Shadow root is not attached to a live session")
        return session

    def find_element(self, locator: ILocator) -> Any:
        return self.parent.find_element(
            self,
            lambda using, value: commands.find_element_from_shadow_root(self._id, using, str(value)),
            locator,
        )

    def find_elements(self, locator: ILocator) -> List[Any]:
        return self.parent.find_elements(
            self,
            lambda using, value: commands.find_elements_from_shadow_root(self._id, using, str(value)),
            locator,
        )

    def to_json(self) -> Dict[str, str]:
        return {W3C_SHADOW_ROOT_KEY: self._id}

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, ShadowRoot) and other._id == self._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"ShadowRoot({self._id!r})"
