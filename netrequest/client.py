"""Dispatch engine: builds, sends and classifies typed HTTP requests."""

import asyncio
import os
import sys
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from netrequest._internal import multipart
from netrequest._internal.http import (
    DEFAULT_TIMEOUT,
    create_async_http_client,
    create_http_client,
)
from netrequest._internal.metrics import ConsoleMetricsSink, MetricsSink
from netrequest._internal.redaction import redact_headers
from netrequest.exceptions import (
    APIError,
    FailureResponseError,
    InvalidResponseError,
    InvalidURLError,
    NoDataError,
    RequestFailedError,
    ServerError,
    UnknownError,
)
from netrequest.models.errors import StatusErrorResponse
from netrequest.models.requests import BaseRequest, UploadFileRequest
from netrequest.result import Result

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)
DEFAULT_UPLOAD_AUTHORIZATION = "Bearer token"
DEFAULT_ERROR_TYPE = StatusErrorResponse

ResultCallback = Callable[[Result], None]

# (method, url, headers, content)
PreparedRequest = tuple[str, httpx.URL, dict[str, str], bytes | None]


class NetworkClient:
    """Typed request dispatcher.

    The client holds configuration and a shared transport only; no state is
    kept between calls, so one instance can serve many threads and tasks.
    Each dispatch resolves exactly once, to a decoded value or an `APIError`.

    Entry points come in three flavours sharing one classification routine:

    - `fetch` / `upload` block and return the value or raise.
    - `fetch_async` / `upload_async` are coroutines that return or raise.
    - `fetch_with_callback` / `upload_with_callback` return immediately and
      call `on_result` with a `Result` from a worker thread.

    Use `NetworkClient.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        *,
        http_client: httpx.Client | None = None,
        async_http_client: httpx.AsyncClient | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        upload_authorization: str | None = DEFAULT_UPLOAD_AUTHORIZATION,
        metrics: MetricsSink | None = None,
        max_workers: int | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the network client.

        Args:
            http_client: Transport for blocking and callback calls. Created
                lazily when omitted; an injected client is never closed here.
            async_http_client: Transport for coroutine calls, same rules.
            timeout_ms: Timeout of lazily created transports, in milliseconds.
            upload_authorization: Authorization header sent with uploads.
                None omits the header.
            metrics: Sink receiving one record per HTTP response. Defaults to
                a console sink that only prints in debug mode.
            max_workers: Worker threads for callback calls.
            debug: Enable debug logging to stderr.
        """
        self._http_client = http_client
        self._async_http_client = async_http_client
        self._owns_http_client = http_client is None
        self._owns_async_http_client = async_http_client is None
        self._timeout_ms = timeout_ms
        self._upload_authorization = upload_authorization
        self._metrics = metrics if metrics is not None else ConsoleMetricsSink(enabled=debug)
        self._max_workers = max_workers
        self._debug = debug
        self._executor: ThreadPoolExecutor | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_env(cls) -> "NetworkClient":
        """Create a network client from environment variables.

        Optional environment variables:
            NETREQUEST_TIMEOUT_MS: Transport timeout in milliseconds.
            NETREQUEST_DEBUG: Set to "1" to enable debug logging.
            NETREQUEST_UPLOAD_AUTHORIZATION: Authorization header for uploads.

        Returns:
            A configured NetworkClient.

        Raises:
            ValueError: NETREQUEST_TIMEOUT_MS is not an integer.
        """
        debug = os.environ.get("NETREQUEST_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("NETREQUEST_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        upload_authorization = os.environ.get(
            "NETREQUEST_UPLOAD_AUTHORIZATION", DEFAULT_UPLOAD_AUTHORIZATION
        )

        return cls(
            timeout_ms=timeout_ms,
            upload_authorization=upload_authorization,
            debug=debug,
        )

    @property
    def debug(self) -> bool:
        return self._debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[netrequest] {message}", file=sys.stderr)

    # =========================================================================
    # Transport
    # =========================================================================

    def _get_http_client(self) -> httpx.Client:
        with self._lock:
            if self._http_client is None:
                self._http_client = create_http_client(timeout=self._timeout_ms / 1000)
            return self._http_client

    def _get_async_http_client(self) -> httpx.AsyncClient:
        with self._lock:
            if self._async_http_client is None:
                self._async_http_client = create_async_http_client(
                    timeout=self._timeout_ms / 1000
                )
            return self._async_http_client

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers,
                    thread_name_prefix="netrequest",
                )
            return self._executor

    def close(self) -> None:
        """Wait for pending callback calls and close owned transports."""
        with self._lock:
            executor, self._executor = self._executor, None
            http_client = self._http_client if self._owns_http_client else None
            if self._owns_http_client:
                self._http_client = None
        if executor is not None:
            executor.shutdown(wait=True)
        if http_client is not None:
            http_client.close()

    async def aclose(self) -> None:
        """Close the owned async transport and everything `close` releases.

        Waiting for pending callback calls happens off the event loop.
        """
        await asyncio.to_thread(self.close)
        with self._lock:
            async_client = self._async_http_client if self._owns_async_http_client else None
            if self._owns_async_http_client:
                self._async_http_client = None
        if async_client is not None:
            await async_client.aclose()

    def __enter__(self) -> "NetworkClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    async def __aenter__(self) -> "NetworkClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # =========================================================================
    # Request construction
    # =========================================================================

    @staticmethod
    def _parse_url(endpoint: str) -> httpx.URL:
        """Parse an endpoint into an absolute http(s) URL.

        Raises:
            InvalidURLError: The endpoint is not an absolute http(s) URL.
        """
        try:
            url = httpx.URL(endpoint)
        except (httpx.InvalidURL, TypeError) as e:
            raise InvalidURLError(endpoint) from e
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidURLError(endpoint)
        return url

    @staticmethod
    def _check_fetch_request(request: BaseRequest) -> None:
        if isinstance(request, UploadFileRequest):
            raise TypeError("upload requests must be sent with upload(), not fetch()")

    @staticmethod
    def _check_upload_request(request: BaseRequest) -> None:
        if not isinstance(request, UploadFileRequest):
            raise TypeError(f"upload() expects an UploadFileRequest, got {type(request).__name__}")

    def _prepare_fetch(self, request: BaseRequest) -> PreparedRequest:
        self._check_fetch_request(request)
        url = self._parse_url(request.endpoint)
        return str(request.method), url, dict(request.headers), request.body

    def _prepare_upload(self, request: UploadFileRequest) -> PreparedRequest:
        self._check_upload_request(request)
        url = self._parse_url(request.endpoint)

        boundary = multipart.new_boundary()
        headers = {
            "Content-Type": multipart.content_type_header(boundary),
            "Accept": "application/json",
        }
        if self._upload_authorization is not None:
            headers["Authorization"] = self._upload_authorization
        headers.update(request.headers)

        body = multipart.build_file_body(
            boundary,
            file_name=request.file_name,
            file_data=request.file_data,
            mime_type=request.mime_type,
        )
        return str(request.method), url, headers, body

    # =========================================================================
    # Execution
    # =========================================================================

    def _build_http_request(
        self, client: httpx.Client | httpx.AsyncClient, prepared: PreparedRequest
    ) -> httpx.Request:
        """Build the transport request.

        Raises:
            UnknownError: A header cannot be encoded for the wire.
        """
        method, url, headers, content = prepared
        self._log_debug(f"{method} {url} headers={redact_headers(headers)}")
        try:
            return client.build_request(method, url, headers=headers, content=content)
        except UnicodeError as e:
            self._log_debug(f"Cannot encode request to {url}: {e}")
            raise UnknownError(e) from e

    def _transport_error(self, url: httpx.URL, error: httpx.RequestError) -> APIError:
        """Map an httpx failure onto the error taxonomy.

        Only a peer that answered with something other than HTTP is an invalid
        response. A dropped connection or a request h11 refused to write is a
        failed request.
        """
        if isinstance(error, httpx.RemoteProtocolError) and "disconnected" not in str(error).lower():
            self._log_debug(f"Invalid response from {url}: {error}")
            return InvalidResponseError(cause=error)
        self._log_debug(f"Request to {url} failed: {error}")
        return RequestFailedError(error)

    def _send(self, prepared: PreparedRequest) -> httpx.Response:
        client = self._get_http_client()
        http_request = self._build_http_request(client, prepared)
        try:
            response = client.send(http_request)
        except httpx.RequestError as e:
            raise self._transport_error(http_request.url, e) from e
        self._record_metrics(response)
        return response

    async def _send_async(self, prepared: PreparedRequest) -> httpx.Response:
        client = self._get_async_http_client()
        http_request = self._build_http_request(client, prepared)
        try:
            response = await client.send(http_request)
        except httpx.RequestError as e:
            raise self._transport_error(http_request.url, e) from e
        self._record_metrics(response)
        return response

    def _record_metrics(self, response: httpx.Response) -> None:
        """Report a received response. Sink failures never reach the caller."""
        try:
            self._metrics.record(str(response.request.url), response.status_code)
        except Exception as e:
            self._log_debug(f"Metrics sink failed: {e}")

    # =========================================================================
    # Classification
    # =========================================================================

    def _classify(
        self,
        response: httpx.Response,
        response_type: Any,
        error_type: Any,
    ) -> Any:
        """Turn a received response into a decoded value or raise an APIError."""
        status = response.status_code
        content = response.content

        if 200 <= status <= 299:
            if content:
                return self._decode_body(content, response_type, status)
            return self._empty_success(response_type, status)

        if 400 <= status <= 499:
            if not content:
                self._log_debug(f"Client error {status} without body")
                raise NoDataError(status_code=status)
            payload = self._decode_error_payload(content, error_type)
            self._log_debug(f"Client error {status}, payload decoded: {payload is not None}")
            raise FailureResponseError(payload, status_code=status)

        if 500 <= status <= 599:
            self._log_debug(f"Server error {status}")
            raise ServerError(status_code=status)

        self._log_debug(f"Unhandled status {status}")
        raise InvalidResponseError(status_code=status)

    def _decode_body(self, content: bytes, response_type: Any, status: int) -> Any:
        try:
            return TypeAdapter(response_type).validate_json(content)
        except ValidationError as e:
            self._log_debug(f"Failed to decode {status} response: {e}")
            raise UnknownError(e, status_code=status) from e

    def _empty_success(self, response_type: Any, status: int) -> Any:
        """Resolve a success without body.

        `None` response types resolve to None. Otherwise `True` stands in for
        the missing value and must be accepted strictly by the response
        type, so only boolean-compatible types succeed.
        """
        if response_type is None or response_type is type(None):
            return None
        try:
            return TypeAdapter(response_type).validate_python(True, strict=True)
        except ValidationError:
            self._log_debug(f"Empty {status} response cannot produce {response_type!r}")
            raise NoDataError(status_code=status) from None

    @staticmethod
    def _decode_error_payload(content: bytes, error_type: Any) -> Any:
        """Best-effort decode of a client error body; None when it does not fit."""
        if error_type is None:
            return None
        try:
            return TypeAdapter(error_type).validate_json(content)
        except ValidationError:
            return None

    # =========================================================================
    # Fetch
    # =========================================================================

    def fetch(self, request: BaseRequest, *, error_type: Any = DEFAULT_ERROR_TYPE) -> Any:
        """Send a body or GET request and block until it resolves.

        Args:
            request: Descriptor to send.
            error_type: Type client error bodies are decoded into.

        Returns:
            The response body decoded as `request.response_type`.

        Raises:
            APIError: Any failure, see `netrequest.exceptions`.
        """
        prepared = self._prepare_fetch(request)
        response = self._send(prepared)
        return self._classify(response, request.response_type, error_type)

    async def fetch_async(
        self, request: BaseRequest, *, error_type: Any = DEFAULT_ERROR_TYPE
    ) -> Any:
        """Send a body or GET request, suspending until it resolves.

        Returns:
            The response body decoded as `request.response_type`.

        Raises:
            APIError: Any failure, see `netrequest.exceptions`.
        """
        prepared = self._prepare_fetch(request)
        response = await self._send_async(prepared)
        return self._classify(response, request.response_type, error_type)

    def fetch_with_callback(
        self,
        request: BaseRequest,
        on_result: ResultCallback,
        *,
        error_type: Any = DEFAULT_ERROR_TYPE,
    ) -> "Future[Result]":
        """Send a body or GET request without blocking.

        `on_result` is called exactly once, on a worker thread, with the
        `Result`. The returned future resolves to the same `Result` after the
        callback returns; an exception raised by the callback ends up in the
        future instead.

        Raises:
            TypeError: `request` is an upload descriptor.
        """
        self._check_fetch_request(request)
        return self._submit(lambda: self.fetch(request, error_type=error_type), on_result)

    # =========================================================================
    # Upload
    # =========================================================================

    def upload(self, request: UploadFileRequest, *, error_type: Any = DEFAULT_ERROR_TYPE) -> Any:
        """Upload a file as multipart/form-data and block until it resolves.

        Returns:
            The response body decoded as `request.response_type`.

        Raises:
            APIError: Any failure, see `netrequest.exceptions`.
        """
        prepared = self._prepare_upload(request)
        response = self._send(prepared)
        return self._classify(response, request.response_type, error_type)

    async def upload_async(
        self, request: UploadFileRequest, *, error_type: Any = DEFAULT_ERROR_TYPE
    ) -> Any:
        """Upload a file as multipart/form-data, suspending until it resolves."""
        prepared = self._prepare_upload(request)
        response = await self._send_async(prepared)
        return self._classify(response, request.response_type, error_type)

    def upload_with_callback(
        self,
        request: UploadFileRequest,
        on_result: ResultCallback,
        *,
        error_type: Any = DEFAULT_ERROR_TYPE,
    ) -> "Future[Result]":
        """Upload a file without blocking; see `fetch_with_callback`.

        Raises:
            TypeError: `request` is not an UploadFileRequest.
        """
        self._check_upload_request(request)
        return self._submit(lambda: self.upload(request, error_type=error_type), on_result)

    def _submit(self, call: Callable[[], Any], on_result: ResultCallback) -> "Future[Result]":
        def run() -> Result:
            try:
                result = Result.success(call())
            except APIError as e:
                result = Result.failure(e)
            except Exception as e:
                self._log_debug(f"Unexpected dispatch failure: {e!r}")
                result = Result.failure(UnknownError(e))
            on_result(result)
            return result

        return self._get_executor().submit(run)


def get_network_client() -> NetworkClient:
    """Get a network client configured from environment variables.

    Returns:
        A configured NetworkClient instance.
    """
    return NetworkClient.from_env()
