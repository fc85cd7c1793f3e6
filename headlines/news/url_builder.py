import logging
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from headlines.news.exceptions import UrlParsingFailed
from headlines.news.types import Country, Endpoint

BASE_URL = 'https://newsapi.org/v2'

logger = logging.getLogger(__name__)


def prepare_url(base_url: str, endpoint: Endpoint, country: Country) -> str:
    """
    Build ``<base_url>/<endpoint>?country=<code>``.

    The endpoint is appended as one escaped path segment and the query string
    is replaced by exactly one ``country`` pair.
    """
    try:
        parts = urlsplit(base_url)
    except ValueError as ex:
        raise UrlParsingFailed(f'Url parsing failed: {base_url!r}') from ex

    if parts.scheme not in ('http', 'https') or not parts.netloc:
        raise UrlParsingFailed(f'Url parsing failed: {base_url!r}')

    path = parts.path.rstrip('/') + '/' + quote(str(endpoint), safe='')
    query = urlencode({'country': str(country)})

    url = urlunsplit((parts.scheme, parts.netloc, path, query, ''))
    logger.debug('Prepared url %s', url)
    return url
