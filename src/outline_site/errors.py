"""Error types raised by the Outline site."""


class OutlineSiteError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(OutlineSiteError):
    """Required configuration is missing or invalid. Fatal at startup."""


class UpstreamFetchError(OutlineSiteError):
    """A call to the Outline API failed or returned an unusable body."""

    def __init__(self, message: str, *, path: str, status: int | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.status = status


class MalformedDocumentError(OutlineSiteError):
    """An API payload is missing a field the site depends on."""
