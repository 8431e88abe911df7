# remote_element/archive.py
"""
@file archive.py
@brief Packs a single local file into a base64 encoded zip container.
"""

from __future__ import annotations
import base64
import io
import os
import zipfile


def zip_file(path: str, compresslevel: int = 6) -> str:
    """
    Zip one file under its base name and return the archive as base64 text.

    @param path Local file to pack
    @param compresslevel Deflate level (0-9)
    @return ASCII base64 encoding of the zip archive
    @throws OSError if the file cannot be read
    """
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=compresslevel) as zf:
        zf.write(path, arcname=os.path.basename(path))
    return base64.b64encode(buf.getvalue()).decode("ascii")
