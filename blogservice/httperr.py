"""HTTP error classification and response envelopes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .db import RecordNotFoundError
from .model import ResponseMeta

_OK = 200
_BAD_REQUEST = 400
_NOT_FOUND = 404
_INTERNAL_SERVER_ERROR = 500


class HTTPError(Exception):
    """An error paired with the HTTP status code it maps to."""

    def __init__(self, err: BaseException, code: int) -> None:
        super().__init__(str(err))
        self.err = err
        self.code = code

    def __str__(self) -> str:
        return str(self.err)


def _caused_by_not_found(err: BaseException) -> bool:
    seen: set[int] = set()
    current: BaseException | None = err
    while current is not None and id(current) not in seen:
        if isinstance(current, RecordNotFoundError):
            return True
        seen.add(id(current))
        current = current.__cause__
    return False


def http_error(err: Any) -> HTTPError:
    """Map any value to an HTTPError: 404 for missing records, 500 otherwise."""
    if isinstance(err, HTTPError):
        return err
    if isinstance(err, BaseException):
        code = _NOT_FOUND if _caused_by_not_found(err) else _INTERNAL_SERVER_ERROR
        return HTTPError(err, code)
    return HTTPError(Exception("Unknown error"), _INTERNAL_SERVER_ERROR)


def _jsonable(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    return value


@dataclass(frozen=True)
class Response:
    """Success envelope: a status block and optional data."""

    status: Any
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form; ``data`` is left out when None."""
        result: dict[str, Any] = {"status": _jsonable(self.status)}
        if self.data is not None:
            result["data"] = _jsonable(self.data)
        return result


@dataclass(frozen=True)
class ErrResponse:
    """Error envelope with the HTTP status to send it with."""

    http_status_code: int
    status: ResponseMeta
    app_code: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form; the HTTP status is not part of it."""
        result: dict[str, Any] = {"status": self.status.to_dict()}
        if self.app_code:
            result["code"] = self.app_code
        return result


def new_success_response(status: int, data: Any) -> Response:
    """Wrap ``data`` in a SUCCESS envelope carrying ``status``."""
    return Response(status=ResponseMeta(app_status_code=status, message="SUCCESS"), data=data)


def err_invalid_request(err: BaseException, message: str) -> ErrResponse:
    """Envelope for a bad request; sent with HTTP 200 and application code 400."""
    return ErrResponse(
        http_status_code=_OK,
        status=ResponseMeta(
            app_status_code=_BAD_REQUEST,
            message="ERROR",
            error_message="Invalid Request",
            error_detail=message,
            dev_message=str(err),
        ),
    )


def err_not_found_request(err: BaseException, message: str) -> ErrResponse:
    """Envelope for a missing resource; sent with HTTP 404."""
    return ErrResponse(
        http_status_code=_NOT_FOUND,
        status=ResponseMeta(
            app_status_code=_NOT_FOUND,
            message="ERROR",
            error_detail=message,
            error_message=str(err),
        ),
    )


ERR_NOT_FOUND = ErrResponse(
    http_status_code=_NOT_FOUND,
    status=ResponseMeta(
        app_status_code=_NOT_FOUND,
        message="ERROR",
        error_detail="Resource not found",
        error_message="The endpoint you were seeking burned down",
    ),
)