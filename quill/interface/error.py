"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class UnauthorizedError(InterfaceError):
    """Missing or invalid shared API key."""

    pass


class APIError(InterfaceError):
    """Error rendered to the client as a JSON ``{"error", "details"}`` body.

    Routes raise this instead of ``HTTPException`` so every failure response
    shares one shape.
    """

    def __init__(
        self, status_code: int, error: str, details: str | None = None
    ) -> None:
        self.status_code = status_code
        self.error = error
        self.details = details
        super().__init__(error)
