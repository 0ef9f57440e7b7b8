"""Custom exception classes for the ServerPilot client."""

from typing import Any


DEFAULT_ERROR_MESSAGES: dict[int, str] = {
    400: "We couldn't understand your request. Typically missing a parameter or header.",
    401: "Either no authentication credentials were provided or they are invalid.",
    402: "Method is restricted to users on the Coach or Business plan.",
    403: "Forbidden.",
    404: "You requested a resource that does not exist.",
    409: "Typically when trying creating a resource that already exists.",
    500: "Something unexpected happened on ServerPilot's end.",
}

UNKNOWN_ERROR_MESSAGE = "Unknown error."


class ServerPilotError(Exception):
    """Base exception for all ServerPilot client errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ServerPilotError):
    """Exception raised when the client is constructed with invalid configuration."""

    pass


class ServiceError(ServerPilotError):
    """Exception raised when the API answers with a status other than 200."""

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: Any = None,
    ) -> None:
        super().__init__(message, details={"status_code": status_code, "response": response_body})
        self.status_code = status_code
        self.response_body = response_body

    @property
    def code(self) -> int:
        return self.status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.status_code}, message={self.message!r})"


class BadRequestError(ServiceError):
    """Exception raised when the request could not be understood (400)."""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGES[400], response_body: Any = None) -> None:
        super().__init__(message, status_code=400, response_body=response_body)


class AuthenticationError(ServiceError):
    """Exception raised when credentials are missing or invalid (401)."""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGES[401], response_body: Any = None) -> None:
        super().__init__(message, status_code=401, response_body=response_body)


class PaymentRequiredError(ServiceError):
    """Exception raised when the method requires a higher plan (402)."""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGES[402], response_body: Any = None) -> None:
        super().__init__(message, status_code=402, response_body=response_body)


class ForbiddenError(ServiceError):
    """Exception raised when access is forbidden (403)."""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGES[403], response_body: Any = None) -> None:
        super().__init__(message, status_code=403, response_body=response_body)


class NotFoundError(ServiceError):
    """Exception raised when a resource is not found (404)."""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGES[404], response_body: Any = None) -> None:
        super().__init__(message, status_code=404, response_body=response_body)


class ConflictError(ServiceError):
    """Exception raised when the resource being created already exists (409)."""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGES[409], response_body: Any = None) -> None:
        super().__init__(message, status_code=409, response_body=response_body)


class InternalServerError(ServiceError):
    """Exception raised when ServerPilot fails on its end (500)."""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGES[500], response_body: Any = None) -> None:
        super().__init__(message, status_code=500, response_body=response_body)


class TransportError(ServerPilotError):
    """Exception raised when no HTTP response could be obtained."""

    pass


class RequestTimeoutError(TransportError):
    """Exception raised when a request times out."""

    pass


_STATUS_ERRORS: dict[int, type[ServiceError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    402: PaymentRequiredError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    500: InternalServerError,
}


def _service_message(body: Any) -> str | None:
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict) and error.get("message") is not None:
        return str(error["message"])
    return None


def error_from_response(status_code: int, body: Any = None) -> ServiceError:
    """Build the typed error for a non-200 response.

    The message comes from ``body["error"]["message"]`` when the service
    supplied one, otherwise from :data:`DEFAULT_ERROR_MESSAGES`.

    Args:
        status_code: HTTP status of the response.
        body: Decoded JSON body, or ``None`` if the body was not JSON.

    Returns:
        A :class:`ServiceError` subclass matching *status_code*, or a plain
        :class:`ServiceError` for unlisted codes.
    """
    message = _service_message(body)
    if message is None:
        message = DEFAULT_ERROR_MESSAGES.get(status_code, UNKNOWN_ERROR_MESSAGE)

    error_class = _STATUS_ERRORS.get(status_code)
    if error_class is None:
        return ServiceError(message, status_code, body)
    return error_class(message, body)
