"""Custom exceptions used throughout the hanoi package."""

from typing import Any, Optional


class HanoiError(Exception):
    """Base exception for all hanoi engine errors.

    All engine-specific exceptions should inherit from this class.
    This allows catching all engine errors with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(HanoiError):
    """Raised when there's an error in configuration.

    This includes:
    - Unreadable or malformed YAML
    - Missing required configuration
    - Configuration validation failures
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class InvalidRingsCount(HanoiError):
    """Raised when an engine is constructed with an unsupported ring count.

    The ring count must lie within [min_rings, max_rings]; the upper bound
    never exceeds 63 so that 2**rings_count - 1 fits in 63 bits.
    """

    def __init__(
        self,
        rings_count: Any,
        min_rings: int,
        max_rings: int,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details.update(
            {
                "rings_count": rings_count,
                "min_rings": min_rings,
                "max_rings": max_rings,
            }
        )
        message = (
            f"Invalid rings count {rings_count!r}: "
            f"expected an integer in [{min_rings}, {max_rings}]"
        )
        super().__init__(message=message, details=details)
        self.rings_count = rings_count
        self.min_rings = min_rings
        self.max_rings = max_rings
