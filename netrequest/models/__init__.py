"""Request descriptors and error payload models."""

from netrequest.models.errors import (
    ErrorDetail,
    ErrorListResponse,
    ErrorPayload,
    StatusErrorResponse,
)
from netrequest.models.requests import (
    APIRequest,
    BaseRequest,
    GetRequest,
    PostRequest,
    RequestMethod,
    UploadFileRequest,
)

__all__ = [
    "APIRequest",
    "BaseRequest",
    "GetRequest",
    "PostRequest",
    "RequestMethod",
    "UploadFileRequest",
    "ErrorDetail",
    "ErrorListResponse",
    "ErrorPayload",
    "StatusErrorResponse",
]
