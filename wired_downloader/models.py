from dataclasses import dataclass


@dataclass(frozen=True)
class Article:
    # URL slug, not the headline shown on the page
    title: str
    content: str
