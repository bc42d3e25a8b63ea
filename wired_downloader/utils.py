import os
from typing import Optional

from .config import (
    FORBIDDEN_FILENAME_CHARS_RE,
    MAX_FILENAME_LENGTH,
    OUTPUT_EXTENSION,
    SITE_FOLDER,
    WHITESPACE_RUN_RE,
)
from .errors import DirectoryError, ValidationError


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def sanitize_filename(name: str) -> str:
    """Turn an arbitrary title into a filesystem-safe name.

    Forbidden characters are dropped, whitespace runs become a single
    underscore, and the result is cut to MAX_FILENAME_LENGTH characters
    without regard for word boundaries.
    """
    cleaned = FORBIDDEN_FILENAME_CHARS_RE.sub("", name)
    cleaned = WHITESPACE_RUN_RE.sub("_", cleaned)
    if len(cleaned) > MAX_FILENAME_LENGTH:
        cleaned = cleaned[:MAX_FILENAME_LENGTH]
    return cleaned.strip()


def output_filename(title: str) -> str:
    return sanitize_filename(title) + OUTPUT_EXTENSION


def title_from_url(url: str) -> str:
    """Last non-empty path segment of the URL, taken verbatim.

    Query strings, fragments and extensions are kept and nothing is
    percent-decoded, e.g. ".../a/b/c.html?x=1" gives "c.html?x=1".
    """
    segments = [part for part in url.split("/") if part]
    if not segments:
        raise ValidationError(f"cannot derive a title from URL {url!r}")
    return segments[-1]


def default_output_dir() -> str:
    home = os.path.expanduser("~")
    if not home or home == "~":
        raise DirectoryError("failed to get home directory")
    return os.path.join(home, "Documents", SITE_FOLDER)


def resolve_output_dir(base: Optional[str] = None) -> str:
    """Return the absolute output directory, creating it if needed."""
    path = os.path.abspath(os.path.expanduser(base)) if base else default_output_dir()
    try:
        ensure_dir(path)
    except OSError as exc:
        raise DirectoryError(f"failed to create directory {path}: {exc}") from exc
    return path
