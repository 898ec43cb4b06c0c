"""multipart/form-data body construction for single-file uploads."""

import uuid

FILE_FIELD_NAME = "file"

# Percent-escapes used by browsers inside quoted form-data parameters.
_QUOTED_PARAM_ESCAPES = str.maketrans({'"': "%22", "\r": "%0D", "\n": "%0A"})


def new_boundary() -> str:
    """Return a fresh boundary token."""
    return f"Boundary-{str(uuid.uuid4()).upper()}"


def quote_param(value: str) -> str:
    """Escape a value for use inside a quoted header parameter."""
    return value.translate(_QUOTED_PARAM_ESCAPES)


def content_type_header(boundary: str) -> str:
    return f"multipart/form-data; boundary={boundary}"


def build_file_body(
    boundary: str,
    *,
    file_name: str,
    file_data: bytes,
    mime_type: str,
) -> bytes:
    """Build a multipart body holding one file part.

    The framing lines are UTF-8 text; the file bytes are copied in unchanged.

    Args:
        boundary: Boundary token, without the leading dashes.
        file_name: Value of the part's `filename` parameter, escaped so it
            cannot break out of the quoted string.
        file_data: Raw file contents.
        mime_type: Content type of the file part.

    Returns:
        The encoded body, ending with the closing boundary marker.
    """
    head = (
        f"--{boundary}\r\n"
        f'Content-Disposition: form-data; name="{FILE_FIELD_NAME}"; filename="{quote_param(file_name)}"\r\n'
        f"Content-Type: {mime_type}\r\n"
        "\r\n"
    )
    tail = f"\r\n--{boundary}--\r\n"
    return head.encode("utf-8") + file_data + tail.encode("utf-8")
