"""Exceptions raised by cleanfile."""


class CleanfileError(Exception):
    """Base class for all cleanfile errors."""


class FormatMismatchError(CleanfileError):
    """Requested strip format does not match the detected document format."""

    def __init__(self, requested: str, detected: str):
        self.requested = requested
        self.detected = detected
        label = "Markdown" if requested == "markdown" else requested.upper()
        super().__init__(f"file does not appear to be {label} (detected: {detected})")


class EncodingError(CleanfileError):
    """Input bytes could not be decoded as text."""

    def __init__(self, encoding: str, reason: str):
        self.encoding = encoding
        self.reason = reason
        super().__init__(f"input is not valid {encoding} text: {reason}")


class ConfigError(CleanfileError):
    """Invalid configuration file or option value."""


class FileAccessError(CleanfileError):
    """An input, output or backup file could not be read or written."""
