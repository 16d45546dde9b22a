"""Client errors.

Every failed request surfaces as a ClientError. Rejections carry the HTTP
status and the server's ``detail`` message.
"""

import httpx


class ClientError(Exception):
    """Base client error."""

    pass


class RequestRejected(ClientError):
    """The server answered with a 4xx status."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")


class ValidationRejected(RequestRejected):
    """400/422: missing or invalid fields."""

    pass


class AuthenticationRequired(RequestRejected):
    """401: not logged in, or bad credentials."""

    pass


class PermissionDenied(RequestRejected):
    """403: e.g. editing someone else's comment."""

    pass


class ItemNotFound(RequestRejected):
    """404: the item or comment no longer exists."""

    pass


class TransientError(ClientError):
    """Transport failure or 5xx; the request may succeed if repeated."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


_REJECTIONS: dict[int, type[RequestRejected]] = {
    400: ValidationRejected,
    401: AuthenticationRequired,
    403: PermissionDenied,
    404: ItemNotFound,
    422: ValidationRejected,
}


def error_for_response(response: httpx.Response) -> ClientError:
    """Map an error response to the matching ClientError."""
    try:
        detail = str(response.json().get("detail", response.reason_phrase))
    except (ValueError, AttributeError):
        detail = response.text or response.reason_phrase

    if response.status_code >= 500:
        return TransientError(detail, status_code=response.status_code)

    error_class = _REJECTIONS.get(response.status_code, RequestRejected)
    return error_class(response.status_code, detail)
