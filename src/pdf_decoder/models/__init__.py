"""Data models for decoded content."""

from .entities import (
    LINE_SEPARATOR,
    FileContent,
    FileSection,
    MimeTypes,
)

__all__ = [
    "LINE_SEPARATOR",
    "FileContent",
    "FileSection",
    "MimeTypes",
]
