"""Error types raised by the Hue client.

Every failure surfaces as a subclass of HueError:
- TransportError: the HTTP exchange itself failed
- MalformedResponseError: the body could not be decoded
- ApiError: the hub reported a failure for one suboperation
- AggregateError: the hub reported several failures in one response
"""

# Error type the hub returns when the link button has not been pressed
LINK_BUTTON_NOT_PRESSED = 101


class HueError(Exception):
    """Base class for all errors raised while talking to a Hue hub."""


class TransportError(HueError):
    """Connection failure, non-200 status, or failure reading the body."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class MalformedResponseError(HueError):
    """Response body matched neither the error envelope nor the expected payload."""

    def __init__(self, body: bytes, cause: Exception):
        super().__init__(f"Failed to parse response body: {cause}")
        self.body = body
        self.cause = cause


class ApiError(HueError):
    """A single failure reported by the hub."""

    def __init__(self, type: int, address: str = '', description: str = ''):
        self.type = type
        self.address = address
        self.description = description
        super().__init__(str(self))

    def __str__(self):
        return f"Hue Error {self.type}: {self.address} {self.description}"

    def __eq__(self, other):
        if not isinstance(other, ApiError):
            return NotImplemented
        return (self.type, self.address, self.description) == \
            (other.type, other.address, other.description)

    def __hash__(self):
        return hash((self.type, self.address, self.description))

    @property
    def link_button_required(self) -> bool:
        """True when the hub wants its link button pressed before registering."""
        return self.type == LINK_BUTTON_NOT_PRESSED


class AggregateError(HueError):
    """Several hub failures from one request, in the order the hub listed them."""

    def __init__(self, errors: list[ApiError]):
        self.errors = list(errors)
        super().__init__(str(self))

    def __str__(self):
        return '\n'.join(str(error) for error in self.errors)

    def __iter__(self):
        return iter(self.errors)

    def __len__(self):
        return len(self.errors)
