import logging
import requests
from dataclasses import dataclass
from typing import Optional, Protocol
from ..config import settings
from ..exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderRequest:
    method: str
    url: str
    body: bytes = b""


class GeocodeProvider(Protocol):
    """Anything that can carry a request to the provider and hand back the raw body.

    Implementations raise TransportError for connection failures, unreadable
    bodies and non-2xx responses.
    """

    def send(self, request: ProviderRequest) -> bytes:
        ...


class RequestsProvider:
    def __init__(self, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.timeout: float = timeout if timeout is not None else settings.GEOCODING_TIMEOUT
        self.session: requests.Session = session if session is not None else requests.Session()

    def send(self, request: ProviderRequest) -> bytes:
        url = self._redact(request.url)
        logger.debug("%s %s", request.method, url)
        try:
            response = self.session.request(request.method, request.url, data=request.body, timeout=self.timeout)
            body = response.content
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise TransportError(
                f"Received status code {response.status_code} from {url}",
                status_code=response.status_code,
                body=body,
            )
        return body

    def close(self) -> None:
        self.session.close()

    @staticmethod
    def _redact(url: str) -> str:
        head, sep, _ = url.partition("key=")
        return f"{head}{sep}***" if sep else url
