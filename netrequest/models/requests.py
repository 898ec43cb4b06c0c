"""Request descriptors consumed by `NetworkClient`.

Descriptors are immutable and carry the type their response body decodes
into. They perform no validation of the endpoint; a malformed URL is
reported by the client when the request is dispatched.
"""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RequestMethod(StrEnum):
    """HTTP methods supported by body requests."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class BaseRequest(BaseModel):
    """Fields shared by every request descriptor.

    Fields:
        endpoint: Absolute URL of the resource.
        headers: Header name to value, copied verbatim onto the request.
        response_type: Type the response body is decoded into, e.g. a
            pydantic model, `dict[str, Any]`, `bool` or `None`.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: str
    headers: dict[str, str] = Field(default_factory=dict)
    response_type: Any


class APIRequest(BaseRequest):
    """Request with an arbitrary method and an optional raw body."""

    method: RequestMethod
    body: bytes | None = None


class PostRequest(BaseRequest):
    """POST request with an optional raw body."""

    body: bytes | None = None

    @property
    def method(self) -> RequestMethod:
        return RequestMethod.POST


class GetRequest(BaseRequest):
    """GET request. Never carries a body."""

    @property
    def method(self) -> RequestMethod:
        return RequestMethod.GET

    @property
    def body(self) -> None:
        return None


class UploadFileRequest(BaseRequest):
    """Single-file multipart upload, always sent as POST.

    Headers given here are applied after the client's upload defaults, so
    they can replace `Authorization` or `Accept`.
    """

    file_data: bytes
    file_name: str
    mime_type: str

    @property
    def method(self) -> RequestMethod:
        return RequestMethod.POST
