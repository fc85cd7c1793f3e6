import os
import sys
import asyncio
import logging
import argparse

from dotenv import load_dotenv

from headlines.config import DEFAULT_CONFIG_PATH, Config
from headlines.monitoring.sentry import SentryClient
from headlines.news.exceptions import NewsapiException
from headlines.news.newsapi_client import NewsapiClient
from headlines.news.types import Country, Endpoint
from headlines.rendering import render_articles


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the current top headlines")
    parser.add_argument("--country", choices=[country.value for country in Country], help="Country code")
    parser.add_argument("--endpoint", choices=[endpoint.value for endpoint in Endpoint], help="API endpoint")
    parser.add_argument("--async", dest="use_async", action="store_true", help="Fetch with the async transport")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to config.ini")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    load_dotenv()

    if os.getenv('TURN_ON_LOGS', 'False').lower() in ('true', '1', 'yes'):
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[
                logging.StreamHandler()
            ]
        )

    args = parse_args(argv)

    api_key = os.getenv('NEWS_API_KEY') or os.getenv('API_KEY')
    if not api_key:
        print("Error: NEWS_API_KEY is not set", file=sys.stderr)
        return 2

    try:
        config = Config(args.config)
        if args.country:
            config.change_value('country', args.country)
        if args.endpoint:
            config.change_value('endpoint', args.endpoint)
        newsapi_client = NewsapiClient.from_config(api_key, config)
    except ValueError as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 2

    sentry_client = SentryClient(os.getenv('SENTRY_DSN'), config)
    try:
        if args.use_async:
            response = asyncio.run(newsapi_client.fetch_async())
        else:
            response = newsapi_client.fetch()
    except NewsapiException as ex:
        sentry_client.capture_exception(ex)
        print(f"Error: {ex}", file=sys.stderr)
        return 1

    render_articles(response.articles)
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
