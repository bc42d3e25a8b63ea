from typing import List

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

from .config import BLOCK_TAGS, CONTENT_CLASS_MARKERS


def _is_text(node) -> bool:
    # Comments, doctypes, CDATA and the like carry no article text
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def get_attr(node: Tag, name: str) -> str:
    """Attribute value as a plain string ("" when missing).

    bs4 stores multi-valued attributes such as class as lists; they are
    joined back with single spaces.
    """
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def get_text_content(node) -> str:
    """Concatenate every text node under `node` in document order, then trim.

    Internal whitespace, including newlines from the page source, is kept.
    """
    if _is_text(node):
        return str(node).strip()
    if not isinstance(node, Tag):
        return ""
    return "".join(str(child) for child in node.descendants if _is_text(child)).strip()


def is_content_container(node: Tag) -> bool:
    if node.name != "div":
        return False
    classes = get_attr(node, "class")
    return bool(classes) and any(marker in classes for marker in CONTENT_CLASS_MARKERS)


def extract_content(root) -> str:
    """Walk the tree and collect heading and paragraph text as plain text.

    Every element is visited in pre-order. Headings and paragraphs add
    their trimmed text followed by a blank line. A content container
    (a div whose class mentions article-body, content or post-body) visits
    its children once more before the normal descent, so blocks inside
    such containers are emitted twice: ``<div class="article-body"><p>X</p></div>``
    yields ``"X\\n\\nX"``.
    """
    blocks: List[str] = []
    # Explicit stack: page depth can exceed the recursion limit.
    stack = [root]
    while stack:
        node = stack.pop()
        if not isinstance(node, Tag):
            continue
        children = list(node.children)
        if node.name in BLOCK_TAGS:
            text = get_text_content(node)
            if text:
                blocks.append(text)
                blocks.append("\n\n")
        # Pushed first so it runs after the container pass below.
        stack.extend(reversed(children))
        if is_content_container(node):
            stack.extend(reversed(children))
    return "".join(blocks).strip()
