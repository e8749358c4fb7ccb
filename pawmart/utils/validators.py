"""
Input validation and sanitization utilities.
"""

from typing import Optional

from ..exceptions import UnauthorizedError


def sanitize_string(value: str, max_length: int = 1000) -> str:
    """
    Sanitize free-text input before it is stored.

    Args:
        value: Input string
        max_length: Maximum allowed length

    Returns:
        Sanitized string
    """
    if not isinstance(value, str):
        return str(value)

    # Remove null bytes
    value = value.replace("\x00", "")

    # Truncate to max length
    value = value[:max_length]

    # Strip leading/trailing whitespace
    return value.strip()


def sanitize_optional(value: Optional[str], max_length: int = 1000) -> Optional[str]:
    """Sanitize an optional string; blank input becomes None."""
    if value is None:
        return None
    value = sanitize_string(value, max_length)
    return value or None


def require_user_id(user_id: Optional[str]) -> str:
    """
    Validate the caller identity supplied with a request.

    Raises:
        UnauthorizedError: If no identity was supplied
    """
    if user_id is None or not user_id.strip():
        raise UnauthorizedError("Unauthorized: Missing user identity")
    return user_id.strip()
