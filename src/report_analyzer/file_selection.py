"""File picker allow-list and upload encoding.

A file is accepted when its declared MIME type is allow-listed, or when its
name ends in one of the spreadsheet/CSV extensions. PDF is accepted by MIME
type only; there is no `.pdf` extension fallback.
"""
from __future__ import annotations

import base64
import logging
import mimetypes
from pathlib import Path
from typing import Any

from .errors import FileReadError, InvalidFileTypeError
from .models import SelectedFile

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES: tuple[str, ...] = (
    "application/pdf",
    "text/csv",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
)

ALLOWED_EXTENSIONS: tuple[str, ...] = (".csv", ".xls", ".xlsx")

# For the browser file chooser's accept attribute.
UPLOAD_EXTENSIONS: tuple[str, ...] = ("pdf", "csv", "xls", "xlsx")

_FALLBACK_MIME_TYPES = {
    ".pdf": "application/pdf",
    ".csv": "text/csv",
    ".xls": "application/vnd.ms-excel",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}


def is_allowed_file(name: str, mime_type: str | None) -> bool:
    if mime_type and mime_type in ALLOWED_MIME_TYPES:
        return True
    return name.endswith(ALLOWED_EXTENSIONS)


def validate_selection(name: str, mime_type: str | None) -> None:
    if not is_allowed_file(name, mime_type):
        logger.info("Rejected file %r with MIME type %r", name, mime_type)
        raise InvalidFileTypeError()


def guess_mime_type(name: str) -> str:
    suffix = Path(name).suffix.lower()
    if suffix in _FALLBACK_MIME_TYPES:
        return _FALLBACK_MIME_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(name)
    return guessed or "application/octet-stream"


def read_upload(upload: Any) -> SelectedFile:
    """
    Snapshot a browser upload into a SelectedFile.

    Args:
        upload: Streamlit UploadedFile, or any object exposing `name`,
            an optional `type`, and `getvalue()` or `read()`

    Raises:
        InvalidFileTypeError: the file is outside the allow-list
        FileReadError: the bytes could not be read
    """
    name = str(getattr(upload, "name", "") or "")
    mime_type = str(getattr(upload, "type", "") or "")
    validate_selection(name, mime_type)

    try:
        if hasattr(upload, "getvalue"):
            data = upload.getvalue()
        else:
            upload.seek(0)
            data = upload.read()
    except (OSError, ValueError) as e:
        logger.error("Failed to read upload %r: %s", name, e)
        raise FileReadError() from e

    if isinstance(data, str):
        data = data.encode("utf-8")
    return SelectedFile(name=name, mime_type=mime_type, data=bytes(data))


def load_local_file(path: Path) -> SelectedFile:
    """Read a file from disk, guessing its MIME type from the extension."""
    mime_type = guess_mime_type(path.name)
    validate_selection(path.name, mime_type)
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.error("Failed to read %s: %s", path, e)
        raise FileReadError() from e
    return SelectedFile(name=path.name, mime_type=mime_type, data=data)


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def to_data_url(selected: SelectedFile) -> str:
    mime_type = selected.mime_type or guess_mime_type(selected.name)
    return f"data:{mime_type};base64,{encode_base64(selected.data)}"
