"""Error handling utilities for LUT generation."""

import sys
from typing import Optional


class SkyLutError(Exception):
    """Base exception for skylut-specific errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        """Initialize with message and optional suggestions.

        Args:
            message: Error description
            suggestions: Optional list of actionable suggestions
        """
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with suggestions."""
        formatted = f"{self.message}"
        if self.suggestions:
            formatted += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                formatted += f"\n  - {suggestion}"
        return formatted


class ImageWriteError(SkyLutError):
    """Raised when an output image cannot be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        message = f"Could not write image to '{path}': {reason}"
        suggestions = [
            "Check that the output directory exists or can be created",
            "Check that you have write permission for the output directory",
            "Check that enough disk space is available",
        ]
        super().__init__(message, suggestions)


class AtmosphereProfileError(SkyLutError):
    """Raised when an atmosphere preset is not available."""

    def __init__(self, name: str, available: list[str]):
        message = f"Unknown atmosphere preset: '{name}'"
        suggestions = [
            f"Available presets: {', '.join(sorted(available))}",
            "Check spelling (preset names are case-insensitive)",
        ]
        super().__init__(message, suggestions)


def print_error(error: Exception) -> None:
    """Print error to stderr with formatted output.

    Args:
        error: Exception to print
    """
    print(f"Error: {error}", file=sys.stderr)

    if isinstance(error, SkyLutError):
        if error.suggestions:
            print(file=sys.stderr)


def handle_error(error: Exception, context: Optional[str] = None) -> int:
    """Handle an error with optional context and return exit code.

    Args:
        error: Exception that occurred
        context: Optional description of what was being attempted

    Returns:
        Exit code (1 for error)
    """
    if context:
        print(f"Error while {context}:", file=sys.stderr)

    print_error(error)

    import traceback

    if not isinstance(error, SkyLutError):
        traceback.print_exc()

    return 1
