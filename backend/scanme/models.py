from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MediaType(str, Enum):
    PDF = "application/pdf"
    PLAIN_TEXT = "text/plain"
    OTHER = "other"


def media_type_for(content_type: Optional[str]) -> MediaType:
    base = (content_type or "").split(";", 1)[0].strip().lower()
    if base == MediaType.PDF.value:
        return MediaType.PDF
    if base == MediaType.PLAIN_TEXT.value:
        return MediaType.PLAIN_TEXT
    return MediaType.OTHER


@dataclass
class UploadedFile:
    data: bytes
    media_type: MediaType
    original_name: str = ""

    @property
    def size_bytes(self) -> int:
        return len(self.data)
