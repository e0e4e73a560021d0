"""Mapping of gRPC status codes to HTTP status expressions for REST retries."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import Union


class StatusCode(enum.IntEnum):
    """Canonical gRPC status codes, numbered as in google.rpc.Code."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


_GRPC_TO_HTTP: dict[StatusCode, str] = {
    StatusCode.OK: "http.StatusOK",
    # There is no Go constant for "client closed connection".
    StatusCode.CANCELLED: "499",
    StatusCode.UNKNOWN: "http.StatusInternalServerError",
    StatusCode.INVALID_ARGUMENT: "http.StatusBadRequest",
    StatusCode.DEADLINE_EXCEEDED: "http.StatusGatewayTimeout",
    StatusCode.NOT_FOUND: "http.StatusNotFound",
    StatusCode.ALREADY_EXISTS: "http.StatusConflict",
    StatusCode.PERMISSION_DENIED: "http.StatusForbidden",
    StatusCode.UNAUTHENTICATED: "http.StatusUnauthorized",
    StatusCode.RESOURCE_EXHAUSTED: "http.StatusTooManyRequests",
    StatusCode.FAILED_PRECONDITION: "http.StatusBadRequest",
    StatusCode.ABORTED: "http.StatusConflict",
    StatusCode.OUT_OF_RANGE: "http.StatusBadRequest",
    StatusCode.UNIMPLEMENTED: "http.StatusNotImplemented",
    StatusCode.INTERNAL: "http.StatusInternalServerError",
    StatusCode.UNAVAILABLE: "http.StatusServiceUnavailable",
    StatusCode.DATA_LOSS: "http.StatusInternalServerError",
}


def http_status_for_code(code: Union[StatusCode, int]) -> str:
    """Return the Go expression for the HTTP status matching a gRPC code.

    Raises ValueError if ``code`` is not a known gRPC status code.
    """
    return _GRPC_TO_HTTP[StatusCode(code)]


def retry_codes_expression(codes: Iterable[Union[StatusCode, int]]) -> list[str]:
    """Lines listing the HTTP statuses to retry on, closing the call on the last.

    Every line but the last ends with a comma; the last ends with ``)``.
    """
    lines = [f"{http_status_for_code(code)}," for code in codes]
    if lines:
        lines[-1] = lines[-1].replace(",", ")")
    return lines