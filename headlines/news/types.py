from enum import Enum


class Endpoint(Enum):
    TOP_HEADLINES = 'top-headlines'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> 'Endpoint':
        for endpoint in cls:
            if endpoint.value == code.strip().lower():
                return endpoint
        supported = ', '.join(endpoint.value for endpoint in cls)
        raise ValueError(f'Unsupported endpoint {code!r}, expected one of: {supported}')


class Country(Enum):
    US = 'us'
    CA = 'ca'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> 'Country':
        for country in cls:
            if country.value == code.strip().lower():
                return country
        supported = ', '.join(country.value for country in cls)
        raise ValueError(f'Unsupported country {code!r}, expected one of: {supported}')
