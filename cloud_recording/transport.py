"""HTTP transport used by the recording client, replaceable in tests."""
from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Tuple

import requests

from .errors import TransportError, TransportTimeout


@dataclass
class TransportResponse:
    status_code: int
    content: bytes


class Transport(Protocol):
    def send(
        self,
        method: str,
        url: str,
        body: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
        auth: Optional[Tuple[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        ...


class RequestsTransport:
    """Transport over an owned requests.Session."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()

    def send(self, method, url, body=None, headers=None, auth=None, timeout=None):
        try:
            response = self.session.request(
                method,
                url,
                data=body,
                headers=headers,
                auth=auth,
                timeout=timeout,
            )
        except requests.exceptions.Timeout as exc:
            raise TransportTimeout(f"{method} {url} timed out") from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        return TransportResponse(status_code=response.status_code, content=response.content)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
