from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from io import BytesIO

from formwire import constants as C
from formwire.errors import (
    BodyAssemblyError,
    FileReadError,
    MultipartError,
    PartWriteError,
)
from formwire.parts import FilePart, FileSource, Part, TextPart

logger = logging.getLogger(__name__)

_CRLF = C.CRLF.encode("ascii")
_QUOTE_CRLF = C.QUOTE_CRLF.encode("ascii")
_CONTENT_TYPE_HEADER = C.CONTENT_TYPE_HEADER.encode("ascii")
_OCTET_STREAM_HEADER = C.OCTET_STREAM_HEADER.encode("ascii")


def generate_boundary() -> str:
    """Fresh boundary: fixed prefix plus a dashless random UUID."""
    return C.BOUNDARY_PREFIX + uuid.uuid4().hex


class EncodedBody:
    """
    Result of `MultipartBuilder.build()`.

    Holds the boundary and the finished request body; hand `content_type`
    and `body` to the transport unchanged.
    """

    __slots__ = ("_boundary", "_body")

    def __init__(self, boundary: str, body: bytes) -> None:
        self._boundary = boundary
        self._body = body

    @property
    def boundary(self) -> str:
        return self._boundary

    @property
    def body(self) -> bytes:
        return self._body

    @property
    def content_type(self) -> str:
        return C.CONTENT_TYPE_PREFIX + self._boundary

    @property
    def content_length(self) -> int:
        return len(self._body)

    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": self.content_type,
            "Content-Length": str(self.content_length),
        }

    def __repr__(self) -> str:
        return f"<EncodedBody boundary={self._boundary!r} {len(self._body)} bytes>"


class MultipartBuilder:
    """
    Accumulates form fields and file attachments, then encodes them as a
    multipart/form-data body.

    The boundary is chosen once per builder. File content is read during
    `build()`, not when the part is added.

    Example:
        body = (
            MultipartBuilder()
            .add_part("message", "Upload message")
            .add_part("file", Path("project.tml"), None, "project.tml")
            .build()
        )
    """

    def __init__(self) -> None:
        self._boundary = generate_boundary()
        self._parts: list[Part] = []

    @property
    def boundary(self) -> str:
        return self._boundary

    @property
    def parts(self) -> tuple[Part, ...]:
        return tuple(self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    def add_part(
        self,
        field_name: str,
        value: str | FileSource,
        content_type: str | None = None,
        filename: str | None = None,
    ) -> MultipartBuilder:
        """
        Append a text field when `value` is a str, otherwise a file part.

        Paths given as plain strings are ambiguous here; use `add_file` for them.
        """
        if isinstance(value, str):
            if content_type is not None or filename is not None:
                raise TypeError(
                    "content_type/filename only apply to file parts; "
                    "use add_file() for a path given as str"
                )
            self._parts.append(TextPart(field_name, value))
            return self
        return self.add_file(field_name, value, content_type, filename)

    def add_file(
        self,
        field_name: str,
        file: FileSource,
        content_type: str | None = None,
        filename: str | None = None,
    ) -> MultipartBuilder:
        self._parts.append(FilePart(field_name, file, content_type, filename))
        return self

    def build(self) -> EncodedBody:
        out = BytesIO()
        try:
            for part in self._parts:
                self._write_part(out, part)
            self._write_closing_boundary(out)
            body = out.getvalue()
        except MultipartError:
            raise
        except Exception as exc:
            logger.debug("Multipart body assembly failed: %s", exc)
            raise BodyAssemblyError(C.ERROR_BUILDING_MULTIPART_BODY) from exc
        logger.debug(
            "Built multipart body: %d parts, boundary=%s, %d bytes",
            len(self._parts),
            self._boundary,
            len(body),
        )
        return EncodedBody(self._boundary, body)

    def _write_part(self, out: BytesIO, part: Part) -> None:
        try:
            header = (
                C.BOUNDARY_START + self._boundary + C.CRLF
                + C.CONTENT_DISPOSITION_FORM_DATA + part.field_name
            )
            if isinstance(part, FilePart) and part.filename is not None:
                header += C.FILENAME_PARAM + part.filename
            out.write(header.encode("utf-8"))
            out.write(_QUOTE_CRLF)

            if isinstance(part, FilePart):
                self._write_file_content(out, part)
            else:
                self._write_text_content(out, part)

            out.write(_CRLF)
        except MultipartError:
            raise
        except Exception as exc:
            logger.debug("Failed to write part %r: %s", part.field_name, exc)
            raise PartWriteError(C.ERROR_WRITING_MULTIPART_PART + part.field_name) from exc

    def _write_file_content(self, out: BytesIO, part: FilePart) -> None:
        if part.content_type is not None:
            out.write(_CONTENT_TYPE_HEADER)
            out.write(part.content_type.encode("utf-8"))
            out.write(_CRLF)
            out.write(_CRLF)
        else:
            out.write(_OCTET_STREAM_HEADER)

        try:
            content = part.read()
        except OSError as exc:
            logger.debug("Failed to read %s for part %r: %s", part.display_name, part.field_name, exc)
            raise FileReadError(C.ERROR_COPYING_FILE_CONTENT + part.display_name) from exc
        logger.debug("Read %d bytes for part %r", len(content), part.field_name)
        # Raw bytes follow the blank line directly.
        out.write(content)

    def _write_text_content(self, out: BytesIO, part: TextPart) -> None:
        out.write(_CRLF)
        out.write(part.content())

    def _write_closing_boundary(self, out: BytesIO) -> None:
        out.write((C.BOUNDARY_START + self._boundary + C.BOUNDARY_END).encode("ascii"))


def build_multipart(
    data: Mapping[str, str] | None,
    files: Mapping[str, FileSource | tuple[str, FileSource, str | None]],
) -> tuple[str, bytes]:
    """
    Build a multipart/form-data body from mappings.
    `files` values can be a source or (filename, source, content_type|None);
    a bare source uses the field name as its filename.
    """
    builder = MultipartBuilder()
    if data:
        for name, value in data.items():
            builder.add_part(name, value)
    for field, val in files.items():
        if isinstance(val, tuple):
            filename, source, ctype = val
            builder.add_file(field, source, ctype, filename)
        else:
            builder.add_file(field, val, None, field)
    encoded = builder.build()
    return encoded.content_type, encoded.body
