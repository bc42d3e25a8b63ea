import re

# Literal that every accepted article URL must contain
SITE_DOMAIN = "wired.com"

# Folder under ~/Documents where articles are saved
SITE_FOLDER = "Wired"

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
BLOCK_TAGS = HEADING_TAGS + ("p",)

# Substrings of a div's class that mark it as article body
CONTENT_CLASS_MARKERS = ("article-body", "content", "post-body")

# Characters that are not allowed in filenames on common filesystems
FORBIDDEN_FILENAME_CHARS_RE = re.compile(r"[<>:\"/\\|?*]")

# ASCII whitespace only; a non-breaking space is kept in filenames
WHITESPACE_RUN_RE = re.compile(r"[\t\n\f\r ]+")

MAX_FILENAME_LENGTH = 100

OUTPUT_EXTENSION = ".txt"

# No timeout and no retries unless asked for on the command line
DEFAULT_TIMEOUT = None
DEFAULT_RETRIES = 0
DEFAULT_ALLOW_REDIRECTS = True

USAGE = "Usage: wired-downloader <wired-article-url>"

# bs4 tree builder; html5lib applies the HTML5 rules for implied end tags
HTML_PARSER = "html5lib"
