class SzDelaysError(Exception):
    """Base class for errors raised by the delay statistics pipeline."""


class NetworkError(SzDelaysError):
    """The upstream map service could not be reached or returned an unusable body."""


class FormatError(SzDelaysError):
    """A snapshot timestamp does not have the DD.MM.YYYY HH:MM:SS token structure."""
