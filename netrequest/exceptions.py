"""Public exceptions for netrequest.

Every dispatch failure is an `APIError` subclass. The set is closed: the
`kind` attribute of an error is always one of `APIErrorKind`.
"""

from enum import StrEnum

from pydantic import BaseModel

from netrequest.models.errors import payload_message


class APIErrorKind(StrEnum):
    INVALID_URL = "invalid_url"
    REQUEST_FAILED = "request_failed"
    DECODING_ERROR = "decoding_error"
    INVALID_RESPONSE = "invalid_response"
    FAILURE_RESPONSE = "failure_response"
    NO_DATA = "no_data"
    UNKNOWN = "unknown"
    SERVER_ERROR = "server_error"


class NetRequestError(Exception):
    """Base exception for all netrequest errors."""


class APIError(NetRequestError):
    """Failure outcome of a dispatched request.

    Attributes:
        kind: Which failure this is.
        title: Short heading suitable for an alert.
        message: Human-readable description.
        status_code: HTTP status of the response, when one was received.
        cause: Underlying exception, when there is one.
    """

    kind: APIErrorKind
    title: str = "Error!"
    default_message: str = ""

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.message = message if message is not None else self.default_message
        self.status_code = status_code
        self.cause = cause
        super().__init__(self.message or self.title)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class InvalidURLError(APIError):
    """Endpoint could not be parsed as an absolute http(s) URL."""

    kind = APIErrorKind.INVALID_URL
    title = "URL Error!"
    default_message = "Invalid URL"

    def __init__(self, endpoint: str) -> None:
        super().__init__()
        self.endpoint = endpoint


class RequestFailedError(APIError):
    """Transport failed before a response was received."""

    kind = APIErrorKind.REQUEST_FAILED
    title = "Request Failure!"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause), cause=cause)


class DecodingError(APIError):
    """Response data could not be decoded."""

    kind = APIErrorKind.DECODING_ERROR
    default_message = "Failed to decode response data."

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__(cause=cause)


class InvalidResponseError(APIError):
    """Response was not a usable HTTP response."""

    kind = APIErrorKind.INVALID_RESPONSE
    default_message = "Invalid response received."

    def __init__(
        self,
        *,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(status_code=status_code, cause=cause)


class FailureResponseError(APIError):
    """Client error (4xx) with an optional structured payload."""

    kind = APIErrorKind.FAILURE_RESPONSE

    def __init__(self, payload: BaseModel | None = None, *, status_code: int | None = None) -> None:
        super().__init__(payload_message(payload), status_code=status_code)
        self.payload = payload


class NoDataError(APIError):
    """Response carried no data where some was required."""

    kind = APIErrorKind.NO_DATA
    title = "Data Error!"
    default_message = "No Data Found"

    def __init__(self, *, status_code: int | None = None) -> None:
        super().__init__(status_code=status_code)


class UnknownError(APIError):
    """Unexpected failure, typically a success body that failed to decode."""

    kind = APIErrorKind.UNKNOWN

    def __init__(self, cause: BaseException, *, status_code: int | None = None) -> None:
        super().__init__(str(cause), status_code=status_code, cause=cause)


class ServerError(APIError):
    """Server error (5xx)."""

    kind = APIErrorKind.SERVER_ERROR
    title = "Server Error!"
    default_message = "Internal server occurred. Please try again after sometime."

    def __init__(
        self,
        cause: BaseException | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(status_code=status_code, cause=cause)
