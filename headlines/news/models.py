import json
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from headlines.news.exceptions import ArticleParseFailed, ResponseReadFailed

STATUS_OK = 'ok'


@dataclass(frozen=True)
class Article:
    title: str
    url: str

    @classmethod
    def from_dict(cls, data) -> 'Article':
        if not isinstance(data, dict):
            raise ArticleParseFailed('Article parsing failed: article is not an object')

        title = data.get('title')
        url = data.get('url')
        if not isinstance(title, str) or not isinstance(url, str):
            raise ArticleParseFailed('Article parsing failed: title and url must be strings')

        return cls(title=title, url=url)


@dataclass(frozen=True)
class NewsapiResponse:
    """
    Envelope returned by the provider.

    When ``status`` is "ok" the articles are the result and ``code`` is
    ignored. Any other status means the articles are meaningless and ``code``
    (if present) describes the failure.
    """
    status: str
    articles: Tuple[Article, ...] = field(default_factory=tuple)
    code: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.status == STATUS_OK

    @classmethod
    def from_dict(cls, data) -> 'NewsapiResponse':
        if not isinstance(data, dict):
            raise ArticleParseFailed('Article parsing failed: response is not an object')

        status = data.get('status')
        if not isinstance(status, str):
            raise ArticleParseFailed('Article parsing failed: missing status')

        code = data.get('code')
        if code is not None and not isinstance(code, str):
            raise ArticleParseFailed('Article parsing failed: code must be a string')

        raw_articles = data.get('articles')
        if status == STATUS_OK:
            if not isinstance(raw_articles, list):
                raise ArticleParseFailed('Article parsing failed: missing articles')
            articles = tuple(Article.from_dict(item) for item in raw_articles)
        else:
            # error envelopes carry no articles
            articles = ()

        return cls(status=status, articles=articles, code=code)


def decode_body(body: bytes) -> str:
    try:
        return body.decode('utf-8')
    except UnicodeDecodeError as ex:
        raise ResponseReadFailed('Failed converting response to string') from ex


def parse_response(body: Union[bytes, str]) -> NewsapiResponse:
    text = decode_body(body) if isinstance(body, bytes) else body
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as ex:
        raise ArticleParseFailed('Article parsing failed: invalid JSON') from ex

    return NewsapiResponse.from_dict(data)
