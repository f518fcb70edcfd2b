"""Unified error taxonomy for transport and decoding failures."""

from __future__ import annotations

import http.client
import socket
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

import requests
from pydantic import ValidationError
from urllib3.exceptions import MaxRetryError, NameResolutionError


class AtollError(Exception):
    """Root of every error raised by this client."""


class HttpErrorKind(str, Enum):
    INVALID_UTF8_IN_BODY = "invalid_utf8_in_body"
    EMPTY_BODY = "empty_body"
    TLS_CONNECTION = "tls_connection"
    CONNECTION = "connection"
    TIMEOUT = "timeout"
    MALFORMED_CHUNK = "malformed_chunk"
    MALFORMED_CONTENT = "malformed_content"
    HEADERS_OVERFLOW = "headers_overflow"
    STATUS_LINE_OVERFLOW = "status_line_overflow"
    ADDRESS_NOT_FOUND = "address_not_found"
    TOO_MANY_REDIRECTS = "too_many_redirects"
    INVALID_HEADER = "invalid_header"
    INVALID_URL = "invalid_url"
    DOMAIN_ENCODING = "domain_encoding"
    BAD_PROXY = "bad_proxy"
    PROXY_CONNECT = "proxy_connect"
    PROXY_AUTH_REJECTED = "proxy_auth_rejected"
    OTHER = "other"


@dataclass
class HttpError(AtollError):
    """Transport failure: no usable response body was obtained."""

    kind: HttpErrorKind
    detail: Optional[str] = None
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        if self.detail:
            return f"http error ({self.kind.value}): {self.detail}"
        return f"http error ({self.kind.value})"


@dataclass
class JsonDecodeError(AtollError):
    """A response body matched neither the success nor the error envelope."""

    message: str
    path: str = "."

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "JsonDecodeError":
        first = error.errors(include_url=False)[0]
        loc = first.get("loc") or ()
        path = ".".join(str(part) for part in loc) or "."
        return cls(message=first.get("msg", str(error)), path=path)


@dataclass
class UnsupportedRpcMethodError(AtollError):
    """A method is unknown or has no decode target. File a bug if it should exist."""

    method: str

    def __str__(self) -> str:
        return f"unsupported Solana RPC method: {self.method}"


def _iter_causes(exc: BaseException) -> Iterator[BaseException]:
    seen = set()
    stack = [exc]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        nested = [arg for arg in current.args if isinstance(arg, BaseException)]
        if isinstance(current, MaxRetryError) and current.reason is not None:
            nested.append(current.reason)
        for linked in (current.__cause__, current.__context__):
            if linked is not None:
                nested.append(linked)
        stack.extend(reversed(nested))


def _classify_nested(exc: BaseException, default: HttpErrorKind) -> HttpErrorKind:
    for inner in _iter_causes(exc):
        if isinstance(inner, (NameResolutionError, socket.gaierror)):
            return HttpErrorKind.ADDRESS_NOT_FOUND
        if isinstance(inner, http.client.LineTooLong):
            if "status line" in str(inner):
                return HttpErrorKind.STATUS_LINE_OVERFLOW
            return HttpErrorKind.HEADERS_OVERFLOW
        if isinstance(inner, http.client.HTTPException) and "headers" in str(inner):
            return HttpErrorKind.HEADERS_OVERFLOW
    return default


def _classify_proxy_error(exc: requests.exceptions.ProxyError) -> HttpErrorKind:
    for inner in _iter_causes(exc):
        if "407" in str(inner):
            return HttpErrorKind.PROXY_AUTH_REJECTED
    return HttpErrorKind.PROXY_CONNECT


def from_transport_exception(exc: BaseException) -> HttpError:
    """Map a requests/urllib3 failure onto exactly one HttpErrorKind."""
    # subclasses are checked before their bases
    if isinstance(exc, requests.exceptions.ProxyError):
        kind = _classify_proxy_error(exc)
    elif isinstance(exc, requests.exceptions.InvalidProxyURL):
        kind = HttpErrorKind.BAD_PROXY
    elif isinstance(exc, requests.exceptions.SSLError):
        kind = HttpErrorKind.TLS_CONNECTION
    elif isinstance(exc, requests.exceptions.Timeout):
        kind = HttpErrorKind.TIMEOUT
    elif isinstance(exc, requests.exceptions.ConnectionError):
        kind = _classify_nested(exc, HttpErrorKind.CONNECTION)
    elif isinstance(exc, requests.exceptions.ChunkedEncodingError):
        kind = HttpErrorKind.MALFORMED_CHUNK
    elif isinstance(exc, requests.exceptions.ContentDecodingError):
        kind = HttpErrorKind.MALFORMED_CONTENT
    elif isinstance(exc, requests.exceptions.TooManyRedirects):
        kind = HttpErrorKind.TOO_MANY_REDIRECTS
    elif isinstance(exc, requests.exceptions.InvalidHeader):
        kind = HttpErrorKind.INVALID_HEADER
    elif isinstance(exc, requests.exceptions.InvalidURL):
        # requests reports failed IDNA encoding of the host as an invalid label
        if "invalid label" in str(exc):
            kind = HttpErrorKind.DOMAIN_ENCODING
        else:
            kind = HttpErrorKind.INVALID_URL
    elif isinstance(exc, (requests.exceptions.MissingSchema, requests.exceptions.InvalidSchema)):
        kind = HttpErrorKind.INVALID_URL
    elif isinstance(exc, UnicodeDecodeError):
        kind = HttpErrorKind.INVALID_UTF8_IN_BODY
    else:
        kind = _classify_nested(exc, HttpErrorKind.OTHER)
    return HttpError(kind=kind, detail=str(exc) or type(exc).__name__, cause=exc)
