"""
Error types for swatchbook color parsing and configuration.
"""

from dataclasses import dataclass


class SwatchbookError(Exception):
    """Base exception for all swatchbook errors."""

    def __init__(self, message: str, context: "NotationContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseFailure(SwatchbookError):
    """
    Raised when a color string cannot be interpreted.

    Examples:
    - Unknown color name or malformed hex
    - Rendered notation that is neither oklch() nor rgb()
    - Missing components or stray characters in a notation
    """

    def __init__(
        self,
        message: str,
        context: "NotationContext | None" = None,
        value: str | None = None,
    ):
        self.value = value
        super().__init__(message, context)


class ConfigError(SwatchbookError):
    """
    Raised when swatchbook.yaml cannot be loaded.

    Examples:
    - File missing and defaults disabled
    - Invalid YAML
    - Schema violations (empty seed name, wrong types)
    """

    pass


@dataclass
class NotationContext:
    """
    Location of a failure inside a color notation string.

    Attributes:
        text: The full notation being parsed
        position: 0-based offset of the offending character
    """

    text: str
    position: int

    def format(self) -> str:
        """
        Format the notation with a marker under the failing character.

        Returns:
            Two lines: the notation, then "^" at the error column
        """
        position = max(0, min(self.position, len(self.text)))
        return f"  {self.text}\n  {' ' * position}^"


def make_parse_failure(message: str, text: str, position: int) -> ParseFailure:
    """
    Helper to create a ParseFailure with notation context.

    Args:
        message: Error description
        text: Notation being parsed
        position: 0-based offset of the error

    Returns:
        ParseFailure with context attached
    """
    return ParseFailure(message, NotationContext(text=text, position=position), value=text)
