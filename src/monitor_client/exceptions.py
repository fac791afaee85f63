"""Custom exceptions for monitor_client.

Every failure of a client operation surfaces as a subclass of
MonitorClientError whose message is a human-readable description, ready to
be logged without further formatting.
"""


class MonitorClientError(Exception):
    """Base exception for all monitor client errors."""

    pass


class TransportError(MonitorClientError):
    """Raised when a request could not be sent or no response was received."""

    pass


class ResponseError(MonitorClientError):
    """Base exception for failures tied to a received HTTP response.

    The message has the form ``"{status}: {detail}"``.
    """

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")


class ResponseStatusError(ResponseError):
    """Raised when the server answers with a status other than 200."""

    pass


class ResponseDecodeError(ResponseError):
    """Raised when a 200 response body cannot be decoded into the expected type."""

    pass


class LoginError(MonitorClientError):
    """Raised when the initial login during client construction fails."""

    pass


class BuilderConsumedError(MonitorClientError):
    """Raised when a DeploymentBuilder is used after build() was called."""

    def __init__(self, message: str | None = None):
        if message is None:
            message = "DeploymentBuilder has already been consumed by build()"
        super().__init__(message)
