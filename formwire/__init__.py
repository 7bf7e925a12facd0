from formwire.multipart import (
    EncodedBody,
    MultipartBuilder,
    build_multipart,
    generate_boundary,
)
from formwire.parts import Part, TextPart, FilePart
from formwire.errors import (
    FormwireError,
    MultipartError,
    FileReadError,
    PartWriteError,
    BodyAssemblyError,
)

__all__ = [
    "MultipartBuilder",
    "EncodedBody",
    "build_multipart",
    "generate_boundary",
    "Part",
    "TextPart",
    "FilePart",
    "FormwireError",
    "MultipartError",
    "FileReadError",
    "PartWriteError",
    "BodyAssemblyError",
]
