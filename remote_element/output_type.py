# remote_element/output_type.py
"""
@file output_type.py
@brief Screenshot decoders: base64 text, raw bytes, PNG file or PIL image.
"""

from __future__ import annotations
import base64
import io
import os
import time
from typing import Optional

from PIL import Image

from .interfaces import IOutputType


def _ts() -> str:
    """Generate timestamp string for file naming."""
    return time.strftime("%Y%m%d_%H%M%S")


def ensure_dir(path: str) -> None:
    """Ensure directory exists."""
    os.makedirs(path, exist_ok=True)


class Base64OutputType(IOutputType):
    """Returns the screenshot as base64 text."""

    def convert_from_base64_png(self, base64_png: str) -> str:
        return base64_png

    def convert_from_png_bytes(self, png: bytes) -> str:
        return base64.b64encode(png).decode("ascii")

    def __repr__(self) -> str:
        return "OutputType.BASE64"


class BytesOutputType(IOutputType):
    """Returns the raw PNG bytes."""

    def convert_from_base64_png(self, base64_png: str) -> bytes:
        return base64.b64decode(base64_png)

    def convert_from_png_bytes(self, png: bytes) -> bytes:
        return bytes(png)

    def __repr__(self) -> str:
        return "OutputType.BYTES"


class FileOutputType(IOutputType):
    """
    Writes the PNG to a timestamped file and returns its path.

    @param out_dir Directory the screenshots go to
    @param prefix File name prefix
    """

    def __init__(self, out_dir: Optional[str] = None, prefix: str = "element"):
        self.out_dir = out_dir or "artifacts"
        self.prefix = prefix
        self._counter = 0

    def convert_from_base64_png(self, base64_png: str) -> str:
        return self.convert_from_png_bytes(base64.b64decode(base64_png))

    def convert_from_png_bytes(self, png: bytes) -> str:
        ensure_dir(self.out_dir)
        self._counter += 1
        path = os.path.join(self.out_dir, f"{self.prefix}_{_ts()}_{self._counter}.png")
        with open(path, "wb") as f:
            f.write(png)
        return path

    def __repr__(self) -> str:
        return f"OutputType.FILE({self.out_dir!r})"


class ImageOutputType(IOutputType):
    """Returns a loaded PIL image."""

    def convert_from_base64_png(self, base64_png: str) -> Image.Image:
        return self.convert_from_png_bytes(base64.b64decode(base64_png))

    def convert_from_png_bytes(self, png: bytes) -> Image.Image:
        img = Image.open(io.BytesIO(png))
        img.load()
        return img

    def __repr__(self) -> str:
        return "OutputType.IMAGE"


BASE64 = Base64OutputType()
BYTES = BytesOutputType()
FILE = FileOutputType()
IMAGE = ImageOutputType()
