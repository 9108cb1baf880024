from __future__ import annotations

"""Exception types for configuration handling."""


class ConfigurationError(RuntimeError):
    """Raised when configuration values are missing or malformed."""

    @classmethod
    def invalid_value(cls, param_name: str, received_value: object, context: str = "") -> "ConfigurationError":
        """Create error for a value outside the accepted set."""
        msg = f"Invalid value for {param_name}: {received_value}"
        if context:
            msg += f". {context}"
        return cls(msg)
