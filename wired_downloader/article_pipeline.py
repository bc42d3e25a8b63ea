import os
from typing import Callable, Optional

from .article_fetcher import fetch_article
from .config import DEFAULT_ALLOW_REDIRECTS, DEFAULT_RETRIES, DEFAULT_TIMEOUT, SITE_DOMAIN
from .errors import ValidationError
from .http_client import build_session
from .utils import output_filename, resolve_output_dir
from .writer import save_article_to_file


def _noop_log(_msg: str) -> None:
    pass


def validate_url(url: str) -> None:
    if SITE_DOMAIN not in url:
        raise ValidationError("Please provide a valid Wired.com article URL")


def download_article(
    url: str,
    output_dir: Optional[str] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    retries: int = DEFAULT_RETRIES,
    allow_redirects: bool = DEFAULT_ALLOW_REDIRECTS,
    user_agent: Optional[str] = None,
    log_fn: Callable[[str], None] = _noop_log,
    session=None,
) -> str:
    """Fetch one article and save it as text; return the absolute file path.

    The output directory is only created once the article has been fetched,
    so a failed download leaves the filesystem untouched.
    """
    validate_url(url)
    session = session or build_session(retries=retries, user_agent=user_agent)
    article = fetch_article(url, session=session, timeout=timeout, allow_redirects=allow_redirects, log_fn=log_fn)

    target_dir = resolve_output_dir(output_dir)
    path = os.path.abspath(os.path.join(target_dir, output_filename(article.title)))
    log_fn(f"Writing {path}")
    save_article_to_file(article, path)
    return path
