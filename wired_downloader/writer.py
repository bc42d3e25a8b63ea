from .errors import WriteError
from .models import Article


def save_article_to_file(article: Article, path: str) -> None:
    """Write "<title>\\n\\n<content>" to `path`, truncating any existing file.

    The write is not atomic: a failure part-way can leave a partial file.
    """
    try:
        f = open(path, "w", encoding="utf-8", newline="")
    except OSError as exc:
        raise WriteError(f"failed to create file: {exc}") from exc
    try:
        with f:
            try:
                f.write(article.title + "\n\n")
            except OSError as exc:
                raise WriteError(f"failed to write title: {exc}") from exc
            try:
                f.write(article.content)
            except OSError as exc:
                raise WriteError(f"failed to write content: {exc}") from exc
    except OSError as exc:
        # buffered data is flushed on close
        raise WriteError(f"failed to write content: {exc}") from exc
