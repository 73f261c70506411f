"""Exception hierarchy raised by the LinkedIn client."""


class LinkedInError(RuntimeError):
    """Represents failures when communicating with the LinkedIn API."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class GeneralError(LinkedInError):
    """Raised for client-side misconfiguration such as missing credentials."""


class InvalidRequest(LinkedInError):
    pass


class UnauthorizedError(LinkedInError):
    pass


class AccessDeniedError(LinkedInError):
    pass


class NotFoundError(LinkedInError):
    pass


class InformLinkedInError(LinkedInError):
    pass


class UnavailableError(LinkedInError):
    pass


_STATUS_ERRORS: dict[int, type[LinkedInError]] = {
    400: InvalidRequest,
    401: UnauthorizedError,
    403: AccessDeniedError,
    404: NotFoundError,
    500: InformLinkedInError,
    502: UnavailableError,
    503: UnavailableError,
}


def error_for_status(status_code: int) -> type[LinkedInError]:
    """Pick the exception class matching an HTTP failure status."""
    return _STATUS_ERRORS.get(status_code, LinkedInError)
