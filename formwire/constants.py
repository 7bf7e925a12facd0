from typing import Final

CRLF: Final[str] = "\r\n"
DOUBLE_CRLF: Final[str] = "\r\n\r\n"
# Closes the last quoted disposition value (name or filename).
QUOTE_CRLF: Final[str] = '"\r\n'

BOUNDARY_PREFIX: Final[str] = "Boundary"
BOUNDARY_START: Final[str] = "--"
BOUNDARY_END: Final[str] = "--"

CONTENT_TYPE_PREFIX: Final[str] = "multipart/form-data; boundary="
CONTENT_DISPOSITION_FORM_DATA: Final[str] = 'Content-Disposition: form-data; name="'
FILENAME_PARAM: Final[str] = '"; filename="'
CONTENT_TYPE_HEADER: Final[str] = "Content-Type: "

DEFAULT_MIMETYPE: Final[str] = "application/octet-stream"
OCTET_STREAM_HEADER: Final[str] = f"{CONTENT_TYPE_HEADER}{DEFAULT_MIMETYPE}{DOUBLE_CRLF}"

ERROR_BUILDING_MULTIPART_BODY: Final[str] = "Error building HTTP request multipart body"
ERROR_WRITING_MULTIPART_PART: Final[str] = "Error writing multipart part: "
ERROR_COPYING_FILE_CONTENT: Final[str] = "Error copying file content: "
