"""Sanitization pipeline: optional markup stripping, then per-line cleaning."""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .detector import FormatDetector
from .errors import EncodingError, FormatMismatchError
from .line_endings import normalize_line_ending, split_lines
from .options import CleaningOptions, StripFormat
from .sanitizer import sanitize_line
from .stats import CleaningStats
from .strippers import get_stripper


@dataclass
class CleaningResult:
    """Cleaned document text and the statistics for the whole run."""
    text: str
    stats: CleaningStats


class SanitizationPipeline:
    """Clean whole documents with a fixed set of options.

    Stages run in order: format check and markup stripping (only when a
    strip format is requested), then classification and line-ending
    normalization of every line. A format mismatch is raised before any
    line is processed, so no partial result is ever produced.
    """

    def __init__(self, options: CleaningOptions, detector: Optional[FormatDetector] = None):
        self.options = options
        self._detector = detector or FormatDetector()

    def _strip_markup(self, text: str, stats: CleaningStats) -> str:
        requested = self.options.strip_format
        stripper = get_stripper(requested)

        detected = self._detector.detect(text)
        stats.format_detected = detected.value
        logger.debug("Detected format: {}", detected.value)

        if not stripper.accepts(detected):
            raise FormatMismatchError(requested.value, detected.value)

        logger.debug("Stripping {} formatting with {}", requested.value, stripper.name)
        result = stripper.strip(text)
        if requested is StripFormat.MARKDOWN:
            stats.markdown_stripped = True
        elif requested is StripFormat.HTML:
            stats.html_stripped = True
            stats.html_entities_decoded = result.entities_decoded
        return result.text

    def run(self, text: str) -> CleaningResult:
        stats = CleaningStats()
        if self.options.strip_format is not StripFormat.NONE:
            text = self._strip_markup(text, stats)

        target = self.options.target_line_ending.terminator
        cleaned = []
        for line_num, line in enumerate(split_lines(text), start=1):
            line_result = sanitize_line(line, self.options)
            line_text, converted = normalize_line_ending(line_result.text, target)
            stats.add_line(line_result.stats, converted)

            if line_result.had_issues:
                s = line_result.stats
                logger.debug(
                    "Line {}: Removed {} invalid character(s) [ZW:{}, Ctrl:{}, Non-ASCII:{}]",
                    line_num, s.removed_chars,
                    s.zero_width_removed, s.control_chars_removed, s.non_ascii_removed,
                )
            cleaned.append(line_text)

        return CleaningResult(text="".join(cleaned), stats=stats)


def clean_text(text: str, options: Optional[CleaningOptions] = None) -> CleaningResult:
    """Clean ``text`` with ``options`` (defaults if omitted)."""
    return SanitizationPipeline(options or CleaningOptions()).run(text)


def decode_content(data: bytes, encoding: str = "utf-8") -> str:
    """Decode raw bytes strictly, raising EncodingError on invalid input."""
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise EncodingError(encoding, str(e)) from e


def clean_bytes(
    data: bytes,
    options: Optional[CleaningOptions] = None,
    encoding: str = "utf-8",
) -> CleaningResult:
    return clean_text(decode_content(data, encoding), options)
