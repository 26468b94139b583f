"""Data models for decoded document content."""

from dataclasses import dataclass, field
from typing import List


class MimeTypes:
    """Mime types understood by the decoders."""

    PDF = "application/pdf"
    PLAIN_TEXT = "text/plain"


# Lines of a page are joined with CRLF, verbatim
LINE_SEPARATOR = "\r\n"


@dataclass
class FileSection:
    """Text extracted from a single document page."""

    number: int  # 1-indexed page number
    content: str
    is_image: bool = False  # True if the section holds non-text content

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "number": self.number,
            "content": self.content,
            "is_image": self.is_image,
        }


@dataclass
class FileContent:
    """Result of decoding a document: an ordered list of page sections."""

    mime_type: str
    sections: List[FileSection] = field(default_factory=list)

    def add_section(self, number: int, content: str, is_image: bool = False) -> FileSection:
        section = FileSection(number=number, content=content, is_image=is_image)
        self.sections.append(section)
        return section

    @property
    def text(self) -> str:
        """All section contents joined in page order."""
        return LINE_SEPARATOR.join(s.content for s in self.sections)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "mime_type": self.mime_type,
            "sections": [s.to_dict() for s in self.sections],
            "summary": {
                "total_sections": len(self.sections),
            },
        }
