from http import HTTPStatus

import httpx


class WhoopError(Exception):
    pass


class ConfigurationError(WhoopError):
    pass


class TransportError(WhoopError):
    """The request never produced an HTTP response (connection, DNS, read failure)."""


class SerializationError(WhoopError):
    """A response body could not be decoded into the expected shape."""


class ApiError(WhoopError):
    """An HTTP exchange completed with a status the caller must handle."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthenticationError(ApiError):
    pass


class BadRequestError(ApiError):
    pass


class NotFoundError(ApiError):
    def __init__(self, status_code: int | None = HTTPStatus.NOT_FOUND) -> None:
        super().__init__("resource not found", status_code)


class RateLimitExceededError(ApiError):
    def __init__(self, status_code: int | None = HTTPStatus.TOO_MANY_REQUESTS) -> None:
        super().__init__("rate limit exceeded", status_code)


class ServerError(ApiError):
    pass


class UnknownApiError(ApiError):
    pass


def reason_for_status(status_code: int) -> str:
    phrase = httpx.codes.get_reason_phrase(status_code)
    return f"{status_code} {phrase}" if phrase else str(status_code)


def error_from_status(status_code: int, body: str | None = None) -> ApiError:
    """Map a non-success HTTP status to the matching ``ApiError``.

    ``body`` is the best-effort response text. When it is missing or empty the
    status line (e.g. ``"503 Service Unavailable"``) is used as the message.
    404 and 429 discard the body entirely.
    """
    message = body or reason_for_status(status_code)

    match status_code:
        case 400:
            return BadRequestError(message, status_code)
        case 401:
            return AuthenticationError(message, status_code)
        case 404:
            return NotFoundError(status_code)
        case 429:
            return RateLimitExceededError(status_code)
        case code if 500 <= code <= 599:  # noqa: PLR2004
            return ServerError(message, status_code)
        case _:
            return UnknownApiError(message, status_code)
