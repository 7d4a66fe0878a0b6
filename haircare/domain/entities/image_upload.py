from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path

DEFAULT_FILENAME = "image.jpg"
DEFAULT_CONTENT_TYPE = "image/*"


@dataclass(frozen=True)
class ImageUpload:
    filename: str
    content: bytes
    content_type: str = DEFAULT_CONTENT_TYPE

    @staticmethod
    def from_bytes(content: bytes, filename: str | None = None, content_type: str | None = None) -> "ImageUpload":
        return ImageUpload(
            filename=(filename or "").strip() or DEFAULT_FILENAME,
            content=content or b"",
            content_type=(content_type or "").strip() or DEFAULT_CONTENT_TYPE,
        )

    @staticmethod
    def from_path(path: str | Path) -> "ImageUpload":
        file_path = Path(path)
        guessed, _ = mimetypes.guess_type(file_path.name)
        return ImageUpload.from_bytes(file_path.read_bytes(), filename=file_path.name, content_type=guessed)

    @property
    def is_empty(self) -> bool:
        return len(self.content) == 0
