from typing import Callable, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import DEFAULT_ALLOW_REDIRECTS, DEFAULT_RETRIES, DEFAULT_TIMEOUT
from .errors import FetchError


def build_session(retries: int = DEFAULT_RETRIES, user_agent: Optional[str] = None) -> requests.Session:
    """Create a requests session; retries and User-Agent are opt-in."""
    sess = requests.Session()
    retry = Retry(
        total=max(0, retries),
        backoff_factor=0.5,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods={"GET", "HEAD"},
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    sess.mount("http://", adapter)
    sess.mount("https://", adapter)
    if user_agent:
        sess.headers.update({"User-Agent": user_agent})
    return sess


def fetch_html(
    session: requests.Session,
    url: str,
    log_fn: Callable[[str], None],
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    allow_redirects: bool = DEFAULT_ALLOW_REDIRECTS,
) -> Tuple[str, str]:
    log_fn(f"Requesting {url}")
    try:
        resp = session.get(url, timeout=timeout, allow_redirects=allow_redirects)
    except requests.RequestException as exc:
        log_fn(f"Request failed for {url}: {exc}")
        raise FetchError(f"failed to fetch URL: {exc}") from exc
    if resp.status_code != 200:
        log_fn(f"Unexpected status {resp.status_code} for {url}")
        raise FetchError(f"HTTP error: {resp.status_code} {resp.reason or ''}".rstrip())
    content_type = resp.headers.get("content-type", "")
    html_content = resp.content.decode("utf-8", errors="replace")
    log_fn(f"Received {len(html_content)} characters ({content_type or 'unknown type'})")
    return html_content, content_type
