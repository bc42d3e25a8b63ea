from typing import Callable, Optional

import requests
from bs4 import BeautifulSoup

from .config import DEFAULT_ALLOW_REDIRECTS, DEFAULT_TIMEOUT, HTML_PARSER
from .content_extractor import extract_content
from .errors import ParseError
from .http_client import build_session, fetch_html
from .models import Article
from .utils import title_from_url


def _noop_log(_msg: str) -> None:
    pass


def parse_html(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, HTML_PARSER)
    except Exception as exc:  # noqa: BLE001
        raise ParseError(f"failed to parse HTML: {exc}") from exc


def fetch_article(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    allow_redirects: bool = DEFAULT_ALLOW_REDIRECTS,
    log_fn: Callable[[str], None] = _noop_log,
) -> Article:
    """Download `url` once and build an Article from it.

    The title is the URL's last path segment (see title_from_url), not the
    page headline.
    """
    session = session or build_session()
    html, _ = fetch_html(session, url, log_fn, timeout=timeout, allow_redirects=allow_redirects)
    soup = parse_html(html)
    title = title_from_url(url)
    content = extract_content(soup)
    log_fn(f"Extracted {len(content)} characters of content for {title!r}")
    return Article(title=title, content=content)
