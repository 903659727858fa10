"""Travel document metadata helpers."""

from collections.abc import Iterable
from pathlib import PurePath
from typing import Any

_SIZE_UNITS = ("B", "KB", "MB", "GB")


def file_extension(filename: str) -> str:
    return PurePath(filename).suffix.lstrip(".").lower()


def format_document_size(data: bytes | None) -> str:
    if not data:
        return "0 KB"

    size = float(len(data))
    unit_index = 0
    while size > 1024 and unit_index < len(_SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1
    return "%.1f %s" % (size, _SIZE_UNITS[unit_index])


def sort_documents(documents: Iterable[Any]) -> list[Any]:
    """Newest first."""
    return sorted(documents, key=lambda doc: doc.date_added, reverse=True)
