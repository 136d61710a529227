"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class UpstreamError(AdapterError):
    """External content source unreachable or returned malformed data."""

    pass
