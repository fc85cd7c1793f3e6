import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from headlines.config import Config
from headlines.news.newsapi_client import ClientConfig, NewsapiClient
from headlines.news.transport import RawResponse


@pytest.fixture
def fake_config():
    return Config()


@pytest.fixture
def fake_client_config():
    return ClientConfig(api_key='secret-key')


@pytest.fixture
def fake_transport():
    return MagicMock()


@pytest.fixture
def fake_async_transport():
    transport = MagicMock()
    transport.get = AsyncMock()
    return transport


@pytest.fixture
def fake_newsapi_client(
    fake_client_config: ClientConfig, fake_transport, fake_async_transport
):
    return NewsapiClient(
        fake_client_config, transport=fake_transport, async_transport=fake_async_transport
    )


@pytest.fixture
def mock_response(fake_transport, fake_async_transport):

    def inner(payload, status_code: int = 200):
        if isinstance(payload, bytes):
            body = payload
        else:
            body = json.dumps(payload).encode('utf-8')

        raw_response = RawResponse(status_code=status_code, body=body)
        fake_transport.get.return_value = raw_response
        fake_async_transport.get.return_value = raw_response
        return raw_response

    return inner
