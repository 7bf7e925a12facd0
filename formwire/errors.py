class FormwireError(Exception):
    """Base error for formwire."""


class MultipartError(FormwireError, OSError):
    """Raised when a multipart body cannot be built."""


class FileReadError(MultipartError):
    """Raised when a file part's content cannot be read."""


class PartWriteError(MultipartError):
    """Raised when a single part cannot be written to the body."""


class BodyAssemblyError(MultipartError):
    """Raised for any other failure while assembling the body."""
