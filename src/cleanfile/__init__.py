"""cleanfile - strip invisible characters and markup from text files."""

from .classifier import Category, Classification, Verdict, classify_char
from .detector import FormatDetector, FormatScores, detect_format
from .errors import (
    CleanfileError,
    ConfigError,
    EncodingError,
    FileAccessError,
    FormatMismatchError,
)
from .line_endings import normalize_line_ending, split_lines
from .options import CleaningOptions, DocumentFormat, LineEnding, StripFormat
from .pipeline import CleaningResult, SanitizationPipeline, clean_bytes, clean_text
from .sanitizer import LineResult, sanitize_line
from .stats import CleaningStats
from .strippers import HTMLStripper, MarkdownStripper, strip_html, strip_markdown

__all__ = [
    "Category",
    "Classification",
    "Verdict",
    "classify_char",
    "FormatDetector",
    "FormatScores",
    "detect_format",
    "CleanfileError",
    "ConfigError",
    "EncodingError",
    "FileAccessError",
    "FormatMismatchError",
    "normalize_line_ending",
    "split_lines",
    "CleaningOptions",
    "DocumentFormat",
    "LineEnding",
    "StripFormat",
    "CleaningResult",
    "SanitizationPipeline",
    "clean_bytes",
    "clean_text",
    "LineResult",
    "sanitize_line",
    "CleaningStats",
    "HTMLStripper",
    "MarkdownStripper",
    "strip_html",
    "strip_markdown",
]
