"""Standardized API error responses."""

from fastapi import HTTPException, status


class APIError:
    """Helper class for standardized API error responses.

    Details are rendered as ``{"error": detail}`` by the application's
    exception handler.
    """

    @staticmethod
    def not_found(message: str = "Not found") -> HTTPException:
        """Return a 404 Not Found error."""
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=message,
        )

    @staticmethod
    def bad_request(message: str) -> HTTPException:
        """Return a 400 Bad Request error."""
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
        )

    @staticmethod
    def payload_too_large(max_bytes: int) -> HTTPException:
        """Return a 413 Payload Too Large error."""
        return HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Content too large. Max {max_bytes} bytes.",
        )

    @staticmethod
    def too_many_requests(max_requests: int, window_seconds: int) -> HTTPException:
        """Return a 429 Too Many Requests error."""
        return HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=(
                f"Rate limit exceeded. Max {max_requests} requests "
                f"per {window_seconds} seconds."
            ),
        )
