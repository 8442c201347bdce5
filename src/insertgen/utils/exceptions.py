"""Custom exception hierarchy."""

from typing import Optional


class InsertGenError(Exception):
    """Base exception for insertgen-specific failures."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        """Initialize exception with message, optional suggestion, and context.

        Args:
            message: Error message
            suggestion: Optional suggestion for fixing the error
            context: Optional dictionary with additional context
        """
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message with suggestion if available."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            msg += f"\n\nContext: {context_str}"
        return msg


class ConfigError(InsertGenError):
    """Raised when serializer configuration is invalid."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        """Initialize configuration error.

        Common suggestions:
        - Identifier delimiters must be one or two characters
        - Dialect names must exist in the dialect catalogue
        """
        if suggestion is None:
            lowered = message.lower()
            if "delimiter" in lowered:
                suggestion = (
                    "Use a single character such as '\"' or '`', or an open/close "
                    "pair such as '[]'."
                )
            elif "unknown dialect" in lowered:
                suggestion = (
                    "Use one of the names in insertgen.DIALECTS, or pass a "
                    "DialectSpec instance."
                )
            elif "unknown option" in lowered:
                suggestion = "Check the option name against the SerializerBuilder setters."
        super().__init__(message, suggestion, context)


class SchemaError(InsertGenError):
    """Raised when a field or schema definition is invalid."""
