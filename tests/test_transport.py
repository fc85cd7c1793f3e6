import json
from unittest.mock import MagicMock

import httpx
import pytest
from requests.exceptions import ChunkedEncodingError, ConnectionError, Timeout, TooManyRedirects

from headlines.news.exceptions import AsyncRequestFailed, RequestFailed, ResponseReadFailed
from headlines.news.transport import HttpxTransport, RawResponse, RequestsTransport

URL = 'https://newsapi.org/v2/top-headlines?country=ca'


@pytest.fixture
def fake_session():
    session = MagicMock()
    session.get.return_value = MagicMock(status_code=200, content=b'{"status": "ok", "articles": []}')
    return session


class TestRequestsTransport:

    def test_get(self, fake_session):
        transport = RequestsTransport(session=fake_session, timeout=5.0)

        raw_response = transport.get(URL, 'secret-key')

        assert raw_response == RawResponse(status_code=200, body=b'{"status": "ok", "articles": []}')
        assert raw_response.is_success
        fake_session.get.assert_called_once_with(URL, headers={'Authorization': 'secret-key'}, timeout=5.0)

    def test_get_keeps_error_status(self, fake_session):
        fake_session.get.return_value = MagicMock(status_code=401, content=b'{}')

        raw_response = RequestsTransport(session=fake_session).get(URL, 'secret-key')

        assert raw_response.status_code == 401
        assert not raw_response.is_success

    @pytest.mark.parametrize('error', [ConnectionError(), Timeout(), TooManyRedirects()])
    def test_request_failed(self, fake_session, error):
        fake_session.get.side_effect = error

        with pytest.raises(RequestFailed) as exc_info:
            RequestsTransport(session=fake_session).get(URL, 'secret-key')

        assert exc_info.value.__cause__ is error

    def test_owned_session_is_closed(self, mocker, fake_session):
        session_cls = mocker.patch('headlines.news.transport.Session')
        session_cls.return_value.__enter__.return_value = fake_session

        raw_response = RequestsTransport(timeout=5.0).get(URL, 'secret-key')

        assert raw_response.status_code == 200
        fake_session.get.assert_called_once_with(URL, headers={'Authorization': 'secret-key'}, timeout=5.0)
        session_cls.return_value.__exit__.assert_called_once()

    def test_body_read_failed(self, fake_session):
        fake_session.get.side_effect = ChunkedEncodingError()

        with pytest.raises(ResponseReadFailed):
            RequestsTransport(session=fake_session).get(URL, 'secret-key')


class TestHttpxTransport:

    async def test_get(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"status": "ok", "articles": []})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            raw_response = await HttpxTransport(client=client).get(URL, 'secret-key')

        assert raw_response.status_code == 200
        assert json.loads(raw_response.body) == {"status": "ok", "articles": []}
        assert str(requests[0].url) == URL
        assert requests[0].headers['Authorization'] == 'secret-key'
        assert requests[0].headers['Content-Type'] == 'application/json'

    async def test_request_failed(self):

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError('connection refused', request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(AsyncRequestFailed):
                await HttpxTransport(client=client).get(URL, 'secret-key')

    async def test_decoding_error_is_request_failure(self):

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.DecodingError('malformed gzip body', request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(AsyncRequestFailed) as exc_info:
                await HttpxTransport(client=client).get(URL, 'secret-key')

        assert isinstance(exc_info.value.__cause__, httpx.DecodingError)
