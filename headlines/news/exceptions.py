from typing import Optional


class NewsapiException(Exception):
    pass


class RequestFailed(NewsapiException):

    def __init__(self, message: str = 'Failed fetching articles', status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AsyncRequestFailed(RequestFailed):

    def __init__(self, message: str = 'Async request failed', status_code: Optional[int] = None) -> None:
        super().__init__(message, status_code)


class ResponseReadFailed(NewsapiException):
    pass


class ArticleParseFailed(NewsapiException):
    pass


class UrlParsingFailed(NewsapiException):
    pass


class BadRequest(NewsapiException):

    def __init__(self, reason: str, code: Optional[str] = None) -> None:
        super().__init__(f'Request failed: {reason}')
        self.reason = reason
        # provider code as received, kept for diagnostics
        self.code = code


UNKNOWN_ERROR_MESSAGE = 'Unknown error'

RESPONSE_ERROR_MESSAGES = {
    'apiKeyDisabled': 'Your API key is disabled',
}


def map_response_error(code: Optional[str]) -> BadRequest:
    reason = RESPONSE_ERROR_MESSAGES.get(code, UNKNOWN_ERROR_MESSAGE) if code else UNKNOWN_ERROR_MESSAGE
    return BadRequest(reason, code)
