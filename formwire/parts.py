from __future__ import annotations

import os
from typing import BinaryIO, Union

FileSource = Union[str, "os.PathLike[str]", bytes, bytearray, memoryview, BinaryIO]


class Part:
    """A single named field of a multipart body."""

    __slots__ = ("field_name",)

    def __init__(self, field_name: str) -> None:
        if not field_name:
            raise ValueError("field_name must be a non-empty string")
        self.field_name = field_name


class TextPart(Part):
    """Plain form field carrying a string value."""

    __slots__ = ("value",)

    def __init__(self, field_name: str, value: str) -> None:
        super().__init__(field_name)
        self.value = value

    def content(self) -> bytes:
        return self.value.encode("utf-8")

    def __repr__(self) -> str:
        return f"<TextPart {self.field_name!r} {len(self.value)} chars>"


class FilePart(Part):
    """
    File attachment.

    `source` may be a path (read when the body is built), raw bytes (copied
    now), or a binary file object (read to EOF when the body is built and
    left open for the caller).
    """

    __slots__ = ("_source", "content_type", "filename")

    def __init__(
        self,
        field_name: str,
        source: FileSource,
        content_type: str | None = None,
        filename: str | None = None,
    ) -> None:
        super().__init__(field_name)
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = bytes(source)
        elif not isinstance(source, (str, os.PathLike)) and not hasattr(source, "read"):
            raise TypeError(f"Unsupported file source for {field_name!r}: {type(source).__name__}")
        self._source = source
        self.content_type = content_type
        self.filename = filename

    @property
    def source(self) -> FileSource:
        return self._source

    @property
    def display_name(self) -> str:
        src = self._source
        if isinstance(src, (str, os.PathLike)):
            return os.path.basename(os.fspath(src))
        name = getattr(src, "name", None)
        if isinstance(name, str) and name:
            return os.path.basename(name)
        return self.field_name

    def read(self) -> bytes:
        src = self._source
        if isinstance(src, bytes):
            return src
        if isinstance(src, (str, os.PathLike)):
            with open(src, "rb") as fh:
                return fh.read()
        data = src.read()
        if isinstance(data, str):
            raise TypeError(f"File object for {self.field_name!r} must be opened in binary mode")
        return bytes(data)

    def __repr__(self) -> str:
        return f"<FilePart {self.field_name!r} filename={self.filename!r}>"
