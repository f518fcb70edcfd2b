import http.client
import logging
import time
from dataclasses import dataclass
from typing import Dict, Optional

import requests
import urllib3

from .errors import HttpError, HttpErrorKind, from_transport_exception

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    headers: Dict[str, str]
    reason_phrase: str
    content: bytes

    def text(self) -> str:
        """Body as UTF-8. Empty or undecodable bodies are transport failures."""
        if not self.content:
            raise HttpError(HttpErrorKind.EMPTY_BODY, detail=f"status {self.status_code} with empty body")
        try:
            return self.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise HttpError(HttpErrorKind.INVALID_UTF8_IN_BODY, detail=str(exc), cause=exc) from exc


class HttpClient:
    """One POST per call on a fresh connection. No retries, no pooling.

    ``requests`` applies ``timeout`` to the connect and to each socket read, not
    to the exchange as a whole. The total is checked once the body is in: an
    exchange that took longer than ``timeout`` is reported as a TIMEOUT and its
    response is discarded.
    """

    def __init__(self, timeout: float, user_agent: Optional[str] = None) -> None:
        self.timeout = timeout
        self.user_agent = user_agent

    def send(self, url: str, body: str) -> RawResponse:
        headers = {"Content-Type": "application/json"}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        started = time.monotonic()
        try:
            response = requests.post(
                url,
                data=body.encode("utf-8"),
                headers=headers,
                timeout=self.timeout,
            )
        except (requests.RequestException, urllib3.exceptions.HTTPError, http.client.HTTPException) as exc:
            error = from_transport_exception(exc)
            log.debug("POST %s failed: %s", url, error)
            raise error from exc

        elapsed = time.monotonic() - started
        if elapsed > self.timeout:
            raise HttpError(
                HttpErrorKind.TIMEOUT,
                detail=f"exchange took {elapsed:.1f}s, limit is {self.timeout}s",
            )

        log.debug("POST %s -> %s %s", url, response.status_code, response.reason)
        return RawResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            reason_phrase=response.reason or "",
            content=response.content,
        )
