import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from headlines.config import Config
from headlines.news.exceptions import (
    ArticleParseFailed, AsyncRequestFailed, RequestFailed, ResponseReadFailed, map_response_error
)
from headlines.news.models import NewsapiResponse, parse_response
from headlines.news.transport import HttpxTransport, RawResponse, RequestsTransport
from headlines.news.types import Country, Endpoint
from headlines.news.url_builder import BASE_URL, prepare_url


@dataclass(frozen=True)
class ClientConfig:
    api_key: str = field(repr=False)
    endpoint: Endpoint = Endpoint.TOP_HEADLINES
    country: Country = Country.CA
    base_url: str = BASE_URL


class NewsapiClient:
    """
    Facade over the provider's top headlines endpoint.

    ``fetch`` and ``fetch_async`` share URL building, parsing and error
    mapping; only the transport differs. The configuration is immutable, so
    ``with_endpoint``/``with_country`` hand back a new client.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[RequestsTransport] = None,
        async_transport: Optional[HttpxTransport] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.config = config
        self.timeout = timeout
        self.transport = transport
        self.async_transport = async_transport
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, api_key: str, config: Config) -> 'NewsapiClient':
        client_config = ClientConfig(
            api_key=api_key,
            endpoint=Endpoint.from_code(config.endpoint),
            country=Country.from_code(config.country),
            base_url=config.base_url,
        )
        return cls(client_config, timeout=config.timeout)

    def with_endpoint(self, endpoint: Endpoint) -> 'NewsapiClient':
        return self._replace(endpoint=endpoint)

    def with_country(self, country: Country) -> 'NewsapiClient':
        return self._replace(country=country)

    def _replace(self, **changes) -> 'NewsapiClient':
        return NewsapiClient(
            replace(self.config, **changes),
            transport=self.transport,
            async_transport=self.async_transport,
            timeout=self.timeout,
        )

    def prepare_url(self) -> str:
        return prepare_url(self.config.base_url, self.config.endpoint, self.config.country)

    def fetch(self) -> NewsapiResponse:
        url = self.prepare_url()
        transport = self.transport or RequestsTransport(timeout=self.timeout)

        raw_response = transport.get(url, self.config.api_key)
        return self._handle_response(raw_response, RequestFailed)

    async def fetch_async(self) -> NewsapiResponse:
        url = self.prepare_url()
        transport = self.async_transport or HttpxTransport(timeout=self.timeout)

        raw_response = await transport.get(url, self.config.api_key)
        return self._handle_response(raw_response, AsyncRequestFailed)

    def _handle_response(self, raw_response: RawResponse, request_failed: type) -> NewsapiResponse:
        try:
            response = parse_response(raw_response.body)
        except (ArticleParseFailed, ResponseReadFailed) as ex:
            if not raw_response.is_success:
                raise request_failed(
                    f'Failed fetching articles: HTTP {raw_response.status_code}',
                    raw_response.status_code,
                ) from ex
            raise

        if not response.is_ok:
            self.logger.info('Provider returned status %r with code %r', response.status, response.code)
            raise map_response_error(response.code)

        if not raw_response.is_success:
            raise request_failed(
                f'Failed fetching articles: HTTP {raw_response.status_code}',
                raw_response.status_code,
            )

        self.logger.info('Fetched %d articles', len(response.articles))
        return response
