"""
Exceptions raised by the JW Platform management client.
"""

from requests import RequestException

# Transport failures surface unwrapped; the alias lets callers catch them
# without importing requests themselves.
TransportError = RequestException


class ManagementError(Exception):
    """Base exception for management client errors."""
    pass


class ConfigurationError(ManagementError):
    """Raised when client configuration is invalid."""
    pass


class SigningInputError(ManagementError, TypeError):
    """Raised when a request parameter cannot be canonically encoded."""
    pass


class DecodeError(ManagementError, ValueError):
    """Raised when a response body is not a JSON object."""

    def __init__(self, message, status_code=None, body=None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __reduce__(self):
        """Keep status code and body when pickled or copied."""
        return (type(self), (str(self), self.status_code, self.body))


class ApiError(ManagementError):
    """
    Raised when the API answers with ``"status": "error"``.

    The decoded body is kept untouched on ``response``; the usual
    ``code``, ``title`` and ``message`` fields are exposed as attributes.
    """

    def __init__(self, response):
        self.response = dict(response)
        self.code = self.response.get("code")
        self.title = self.response.get("title")
        self.message = self.response.get("message")
        super().__init__(self.message or self.title or self.code or "API error")

    @classmethod
    def from_response(cls, response):
        """Build the error from a decoded error response."""
        return cls(response)

    def __reduce__(self):
        """Rebuild from the response body when pickled or copied."""
        return (type(self), (self.response,))

    def __repr__(self):
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"
