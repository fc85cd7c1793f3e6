import logging
from dataclasses import dataclass
from typing import Optional

from requests import Session
from requests.exceptions import ChunkedEncodingError, ContentDecodingError, RequestException

from headlines.news.exceptions import AsyncRequestFailed, RequestFailed, ResponseReadFailed


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    body: bytes

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class RequestsTransport:
    """Blocking GET over a ``requests`` session."""

    def __init__(self, session: Optional[Session] = None, timeout: Optional[float] = None) -> None:
        self.session = session
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

    def get(self, url: str, api_key: str) -> RawResponse:
        # the provider expects the bare key, no "Bearer" prefix
        headers = {'Authorization': api_key}

        try:
            if self.session is not None:
                response = self.session.get(url, headers=headers, timeout=self.timeout)
            else:
                with Session() as session:
                    response = session.get(url, headers=headers, timeout=self.timeout)
        except (ChunkedEncodingError, ContentDecodingError) as ex:
            raise ResponseReadFailed('Failed converting response to string') from ex
        except RequestException as ex:
            raise RequestFailed() from ex

        self.logger.debug('GET %s -> %s', url, response.status_code)
        return RawResponse(status_code=response.status_code, body=response.content)


class HttpxTransport:
    """Non-blocking GET over ``httpx.AsyncClient``."""

    def __init__(self, client=None, timeout: Optional[float] = None) -> None:
        try:
            import httpx
        except ImportError as ex:
            raise RuntimeError(
                'httpx package is required for async fetching. Install with `pip install headlines[async]`.'
            ) from ex

        self._httpx = httpx
        self.client = client
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

    async def get(self, url: str, api_key: str) -> RawResponse:
        headers = {
            'Authorization': api_key,
            'Content-Type': 'application/json',
        }

        try:
            if self.client is not None:
                response = await self.client.get(url, headers=headers)
            else:
                async with self._httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url, headers=headers)
        except self._httpx.HTTPError as ex:
            raise AsyncRequestFailed() from ex

        self.logger.debug('GET %s -> %s', url, response.status_code)
        return RawResponse(status_code=response.status_code, body=response.content)
