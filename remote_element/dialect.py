# remote_element/dialect.py
"""Wire-protocol dialects and how they encode element references."""

from __future__ import annotations
from enum import Enum


W3C_ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"
W3C_SHADOW_ROOT_KEY = "shadow-6066-11e4-a52e-4f735466cecf"
OSS_ELEMENT_KEY = "ELEMENT"


class Dialect(Enum):
    OSS = "oss"
    W3C = "w3c"

    @property
    def encoded_element_key(self) -> str:
        if self is Dialect.OSS:
            return OSS_ELEMENT_KEY
        return W3C_ELEMENT_KEY
