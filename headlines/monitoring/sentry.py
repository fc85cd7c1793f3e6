from typing import Optional

import sentry_sdk

from headlines.config import Config


class SentryClient:

    def __init__(self, dsn: Optional[str], config: Config) -> None:
        self.enabled = bool(dsn)
        sentry_sdk.init(
            dsn=dsn,
            traces_sample_rate=config.sentry_traces_sample_rate,
            profiles_sample_rate=config.sentry_profiles_sample_rate,
        )

    def capture_exception(self, exception: BaseException):
        if self.enabled:
            sentry_sdk.capture_exception(error=exception)
