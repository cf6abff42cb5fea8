"""Custom exceptions for Habitify API operations.

This module defines the exception hierarchy for Habitify API errors. Every
failed call surfaces exactly one of three kinds:

- ``HabitifyInvalidArgumentError``: rejected locally before any network call
- ``HabitifyTransportError``: the exchange itself failed (network, timeout,
  unparseable response)
- ``HabitifyAPIError``: the server answered with an envelope whose ``status``
  flag is false
"""

_UNKNOWN_API_ERROR = "Unknown API error"


class HabitifyError(Exception):
    """Base exception for all Habitify client errors.

    Messages must never contain the API key.
    """


class HabitifyInvalidArgumentError(HabitifyError, ValueError):
    """Raised when a required argument is missing or malformed."""

    def __init__(self, message: str = "Invalid argument") -> None:
        """Initialize invalid argument error.

        Args:
            message: Error message describing the offending argument
        """
        super().__init__(message)

    @classmethod
    def empty_identifier(cls, name: str) -> "HabitifyInvalidArgumentError":
        """Create an error for an empty or whitespace-only identifier.

        Args:
            name: Parameter name of the identifier (e.g. ``habit_id``)

        Returns:
            HabitifyInvalidArgumentError for the empty identifier
        """
        return cls(f"{name} cannot be empty")

    @classmethod
    def empty_api_key(cls) -> "HabitifyInvalidArgumentError":
        """Create an error for a missing API key.

        Returns:
            HabitifyInvalidArgumentError for the missing API key
        """
        return cls("API key is required")

    @classmethod
    def invalid_date(cls, value: object) -> "HabitifyInvalidArgumentError":
        """Create an error for a date value that cannot be interpreted.

        Args:
            value: The rejected date input

        Returns:
            HabitifyInvalidArgumentError for the unparseable date
        """
        return cls(f"Invalid date value: {value!r}")


class HabitifyTransportError(HabitifyError):
    """Raised when the HTTP exchange fails or yields no usable envelope."""

    def __init__(
        self,
        message: str = "Transport error occurred",
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        """Initialize transport error.

        Args:
            message: Error message describing the failure
            status_code: HTTP status code when a response was received
            body: Raw response body when a response was received
        """
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    @classmethod
    def create_unparseable_error(
        cls, status_code: int, body: str | None
    ) -> "HabitifyTransportError":
        """Create an error for a response that carries no readable envelope.

        Args:
            status_code: HTTP status code of the response
            body: Raw response body

        Returns:
            HabitifyTransportError with the status code in its message
        """
        return cls(f"Unparseable response (status={status_code})", status_code, body)

    @classmethod
    def create_network_error(cls, method: str, endpoint: str) -> "HabitifyTransportError":
        """Create an error for connection level failures with safe context.

        Args:
            method: HTTP method used
            endpoint: API endpoint called

        Returns:
            HabitifyTransportError with contextual message
        """
        return cls(f"Network error (method={method}, endpoint={endpoint})")


class HabitifyTimeoutError(HabitifyTransportError):
    """Raised when a request exceeds the configured timeout."""

    def __init__(self, message: str = "Request timeout") -> None:
        """Initialize timeout error.

        Args:
            message: Error message about the timeout
        """
        super().__init__(message)


class HabitifyAPIError(HabitifyError):
    """Raised when the server reports failure through the response envelope."""

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        """Initialize Habitify API error.

        Args:
            message: Server supplied message; falls back to a generic message when empty
            status_code: HTTP status code if applicable
            body: Raw response body if available
        """
        self.message = message or _UNKNOWN_API_ERROR
        self.status_code = status_code
        self.body = body
        super().__init__(self.message)

    @classmethod
    def create_parse_error(cls, endpoint: str, **context: str | int) -> "HabitifyAPIError":
        """Create an error for response payloads that do not match the expected model.

        Args:
            endpoint: API endpoint that failed
            **context: Additional safe context information

        Returns:
            HabitifyAPIError with contextual message
        """
        context_parts = [f"endpoint={endpoint}"]
        context_parts.extend(f"{key}={value}" for key, value in context.items())
        safe_context = ", ".join(context_parts)
        return cls(f"Failed to parse response ({safe_context})")
