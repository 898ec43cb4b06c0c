"""Tests for request descriptors."""

from typing import Any

import pytest
from pydantic import BaseModel, ValidationError

from netrequest.models.requests import (
    APIRequest,
    GetRequest,
    PostRequest,
    RequestMethod,
    UploadFileRequest,
)


class Profile(BaseModel):
    name: str


class TestAPIRequest:
    def test_defaults(self):
        """Should default to no body and no headers."""
        request = APIRequest(
            endpoint="https://api.test/items", method=RequestMethod.PUT, response_type=Profile
        )
        assert request.method is RequestMethod.PUT
        assert request.body is None
        assert request.headers == {}
        assert request.response_type is Profile

    def test_all_fields(self):
        """Should keep every field and coerce the method string."""
        request = APIRequest(
            endpoint="https://api.test/items/1",
            method="PATCH",
            body=b'{"name":"x"}',
            headers={"Content-Type": "application/json"},
            response_type=dict[str, Any],
        )
        assert request.method is RequestMethod.PATCH
        assert request.body == b'{"name":"x"}'
        assert request.headers == {"Content-Type": "application/json"}

    def test_method_required(self):
        """Should not guess a method when none is given."""
        with pytest.raises(ValidationError):
            APIRequest(endpoint="https://api.test/items", response_type=bool)

    def test_accepts_malformed_endpoint(self):
        """URL validation is left to the client."""
        request = APIRequest(endpoint="", method="GET", response_type=bool)
        assert request.endpoint == ""

    def test_response_type_required(self):
        """Should reject a descriptor without response type."""
        with pytest.raises(ValidationError):
            APIRequest(endpoint="https://api.test", method="GET")

    def test_is_immutable(self):
        """Should reject assignment after construction."""
        request = APIRequest(endpoint="https://api.test", method="POST", response_type=bool)
        with pytest.raises(ValidationError):
            request.response_type = str
        with pytest.raises(ValidationError):
            request.method = RequestMethod.DELETE

    def test_rejects_unknown_method(self):
        """Should reject methods outside RequestMethod."""
        with pytest.raises(ValidationError):
            APIRequest(endpoint="https://api.test", method="TRACE", response_type=bool)


class TestPostRequest:
    def test_method_is_post(self):
        """Should fix the method to POST."""
        request = PostRequest(
            endpoint="https://api.test/items",
            body=b"{}",
            headers={"X-Trace": "1"},
            response_type=Profile,
        )
        assert request.method is RequestMethod.POST
        assert request.body == b"{}"


class TestGetRequest:
    def test_method_and_body(self):
        """Should always be a GET without body."""
        request = GetRequest(endpoint="https://api.test/me", response_type=Profile)
        assert request.method is RequestMethod.GET
        assert request.body is None
        assert request.headers == {}

    def test_headers(self):
        """Should keep caller headers."""
        request = GetRequest(
            endpoint="https://api.test/me",
            headers={"Authorization": "Bearer abc"},
            response_type=Profile,
        )
        assert request.headers["Authorization"] == "Bearer abc"


class TestUploadFileRequest:
    def test_fields(self):
        """Should be a POST carrying the file fields."""
        request = UploadFileRequest(
            endpoint="https://api.test/upload",
            file_data=b"\x89PNG\r\n",
            file_name="photo.png",
            mime_type="image/png",
            response_type=Profile,
        )
        assert request.method is RequestMethod.POST
        assert request.file_data == b"\x89PNG\r\n"
        assert request.file_name == "photo.png"
        assert request.mime_type == "image/png"
        assert request.headers == {}

    def test_file_fields_required(self):
        """Should reject an upload without file fields."""
        with pytest.raises(ValidationError):
            UploadFileRequest(endpoint="https://api.test/upload", response_type=Profile)
