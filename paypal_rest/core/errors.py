from typing import Any, List, Optional


class PayPalError(Exception):
    """Base class for every failure reported by the client.

    Instances are normally returned inside ``Err`` rather than raised;
    ``Err.unwrap()`` raises them for callers who prefer exceptions.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code!r})"


class ConfigError(PayPalError):
    """Missing or invalid credentials. Raised before any network call."""


class AuthError(PayPalError):
    """The OAuth token endpoint refused or failed the client-credentials grant."""


class TransportError(PayPalError):
    """DNS, connection or timeout failure; no HTTP response was received."""

    def __init__(self, message: str, original: Optional[BaseException] = None):
        super().__init__(message)
        self.original = original


class ApiError(PayPalError):
    """Non-2xx response from a resource endpoint.

    ``name``, ``debug_id`` and ``details`` mirror PayPal's error payload
    when the body could be decoded.
    """

    def __init__(self,
                 message: str,
                 status_code: int,
                 body: Any = None,
                 name: Optional[str] = None,
                 debug_id: Optional[str] = None,
                 details: Optional[List[Any]] = None):
        super().__init__(message, status_code=status_code, body=body)
        self.name = name
        self.debug_id = debug_id
        self.details = details or []


class UnauthorizedError(ApiError):
    """401 from a resource endpoint (token rejected or revoked)."""


class DecodeError(PayPalError):
    """A 2xx response whose body is not valid JSON."""

    def __init__(self, message: str, raw_body: str, status_code: Optional[int] = None):
        super().__init__(message, status_code=status_code, body=raw_body)
        self.raw_body = raw_body
