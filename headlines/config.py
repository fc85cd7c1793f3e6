import configparser
from pathlib import Path

DEFAULT_CONFIG_PATH = str(Path(__file__).with_name('config.ini'))


class ConfigException(Exception):
    pass


class ConfigParameterNotFound(ConfigException):
    pass


class Config:

    def __init__(self, path: str = DEFAULT_CONFIG_PATH) -> None:
        self.config = configparser.RawConfigParser()
        self.config.read(path)

        self.parameter_list = [
            'base_url',
            'endpoint',
            'country',
            'request_timeout',
            'sentry_traces_sample_rate',
            'sentry_profiles_sample_rate',
        ]

        self.base_url = self.config.get(
            'newsapi', 'base_url', fallback='https://newsapi.org/v2'
        )
        self.endpoint = self.config.get(
            'newsapi', 'endpoint', fallback='top-headlines'
        )
        self.country = self.config.get(
            'newsapi', 'country', fallback='ca'
        )

        self.request_timeout = self.config.getfloat(
            'transport', 'request_timeout', fallback=0.0
        )

        self.sentry_traces_sample_rate = self.config.getfloat(
            'sentry', 'traces_sample_rate', fallback=1.0
        )
        self.sentry_profiles_sample_rate = self.config.getfloat(
            'sentry', 'profiles_sample_rate', fallback=1.0
        )

    @property
    def timeout(self):
        # 0 disables the timeout
        return self.request_timeout or None

    def change_value(self, name: str, value) -> None:
        if name not in self.parameter_list:
            raise ConfigParameterNotFound(f'Config parameter {name} not found')

        parameter = getattr(self, name)
        parameter_type = type(parameter)
        setattr(self, name, parameter_type(value))
