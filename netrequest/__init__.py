"""netrequest: typed HTTP request dispatch.

Describe a call with a request descriptor, send it with `NetworkClient`, and
get back either the decoded response or an `APIError`.

Public API:
    NetworkClient - Dispatch engine (blocking, async and callback calls)
    APIRequest, PostRequest, GetRequest, UploadFileRequest - Descriptors
    Result - Outcome passed to callbacks
    APIError and subclasses - Failure taxonomy

Example:
    from netrequest import GetRequest, NetworkClient

    with NetworkClient() as client:
        user = client.fetch(GetRequest(endpoint="https://api.example.com/me", response_type=User))
"""

from netrequest._version import __version__
from netrequest.client import NetworkClient, get_network_client
from netrequest.exceptions import (
    APIError,
    APIErrorKind,
    DecodingError,
    FailureResponseError,
    InvalidResponseError,
    InvalidURLError,
    NetRequestError,
    NoDataError,
    RequestFailedError,
    ServerError,
    UnknownError,
)
from netrequest.models import (
    APIRequest,
    ErrorDetail,
    ErrorListResponse,
    ErrorPayload,
    GetRequest,
    PostRequest,
    RequestMethod,
    StatusErrorResponse,
    UploadFileRequest,
)
from netrequest.result import Result

__all__ = [
    "__version__",
    "NetworkClient",
    "get_network_client",
    "Result",
    "APIRequest",
    "GetRequest",
    "PostRequest",
    "UploadFileRequest",
    "RequestMethod",
    "ErrorDetail",
    "ErrorListResponse",
    "ErrorPayload",
    "StatusErrorResponse",
    "NetRequestError",
    "APIError",
    "APIErrorKind",
    "InvalidURLError",
    "RequestFailedError",
    "DecodingError",
    "InvalidResponseError",
    "FailureResponseError",
    "NoDataError",
    "UnknownError",
    "ServerError",
]
