import argparse
import sys
from datetime import datetime
from typing import List, Optional

from .article_pipeline import download_article
from .config import DEFAULT_RETRIES, DEFAULT_TIMEOUT, USAGE
from .errors import DownloaderError, UsageError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wired-downloader",
        description="Save a Wired.com article as a plain text file",
    )
    parser.add_argument("url", nargs="?", help="Wired.com article URL")
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Output directory (default: ~/Documents/Wired)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds (default: none)",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=DEFAULT_RETRIES,
        help=f"Retries for failed requests (default: {DEFAULT_RETRIES})",
    )
    parser.add_argument(
        "--no-redirects",
        action="store_true",
        help="Do not follow HTTP redirects.",
    )
    parser.add_argument("--user-agent", default=None, help="User-Agent header to send")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress to stderr")
    return parser


def cli_main(argv: Optional[List[str]] = None) -> int:
    """
    Download one article and print where it was saved.

    Examples:
      wired-downloader https://www.wired.com/story/some-article/
      python -m wired_downloader https://www.wired.com/story/some-article/ --timeout 30
    """
    # Arguments after the URL are ignored.
    args, _extra = _build_parser().parse_known_args(argv)

    def log_fn(msg: str) -> None:
        if args.verbose:
            ts = datetime.now().strftime("%H:%M:%S")
            print(f"[{ts}] {msg}", file=sys.stderr)

    try:
        if not args.url:
            raise UsageError(USAGE)
        path = download_article(
            args.url,
            output_dir=args.output_dir,
            timeout=args.timeout,
            retries=args.retries,
            allow_redirects=not args.no_redirects,
            user_agent=args.user_agent,
            log_fn=log_fn,
        )
    except UsageError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except DownloaderError as exc:
        print(f"Error {exc.stage}: {exc}", file=sys.stderr)
        return 1

    print(f"Article saved to: {path}")
    return 0


def main() -> None:
    sys.exit(cli_main())
