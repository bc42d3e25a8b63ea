class DownloaderError(Exception):
    """Base class for every failure that aborts a download."""

    stage = "downloading article"


class UsageError(DownloaderError):
    stage = "usage"


class ValidationError(DownloaderError):
    stage = "validating URL"


class FetchError(DownloaderError):
    stage = "fetching article"


class ParseError(DownloaderError):
    stage = "parsing HTML"


class DirectoryError(DownloaderError):
    stage = "creating Wired folder"


class WriteError(DownloaderError):
    stage = "saving article"
