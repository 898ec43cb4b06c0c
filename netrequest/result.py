"""Outcome of a callback-style dispatch."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from netrequest.exceptions import APIError


class Result(BaseModel):
    """Either a decoded value or an `APIError`, never both.

    A successful result may legitimately hold `None` as its value, so
    success is decided by the absence of an error.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = None
    error: APIError | None = None

    @classmethod
    def success(cls, value: Any) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: APIError) -> "Result":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, or raise the error of a failed result."""
        if self.error is not None:
            raise self.error
        return self.value
