from typing import Iterable, Optional, TextIO

from headlines.news.models import Article


def render_articles(articles: Iterable[Article], stream: Optional[TextIO] = None) -> None:
    # None resolves to the current sys.stdout at print time
    print('# Top headlines\n', file=stream)
    for article in articles:
        print(f'`{article.title}`', file=stream)
        print(f'> *{article.url}*', file=stream)
        print('---', file=stream)
