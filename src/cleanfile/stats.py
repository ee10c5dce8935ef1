"""Statistics collected while cleaning a document."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from .classifier import Category


@dataclass
class CleaningStats:
    """Additive counters for one line or one whole run.

    Line-level instances are filled by the line sanitizer and folded into
    the run-level instance with ``add_line``. Every removal goes through
    ``record_removal`` so that ``removed_chars`` always equals the sum of
    the three category counters.
    """
    total_chars: int = 0
    removed_chars: int = 0
    non_ascii_removed: int = 0
    control_chars_removed: int = 0
    zero_width_removed: int = 0
    lines_processed: int = 0
    lines_with_issues: int = 0
    line_endings_converted: int = 0
    html_entities_decoded: int = 0
    removed_char_details: Counter = field(default_factory=Counter)
    markdown_stripped: bool = False
    html_stripped: bool = False
    format_detected: Optional[str] = None

    def record_removal(self, char: str, category: Category) -> None:
        if category is Category.ZERO_WIDTH:
            self.zero_width_removed += 1
        elif category is Category.CONTROL:
            self.control_chars_removed += 1
        elif category is Category.NON_ASCII:
            self.non_ascii_removed += 1
        else:
            raise ValueError(f"{category.value!r} is not a removal category")
        self.removed_chars += 1
        self.removed_char_details[char] += 1

    def merge(self, other: "CleaningStats") -> None:
        """Add another instance's counters into this one."""
        self.total_chars += other.total_chars
        self.removed_chars += other.removed_chars
        self.non_ascii_removed += other.non_ascii_removed
        self.control_chars_removed += other.control_chars_removed
        self.zero_width_removed += other.zero_width_removed
        self.lines_processed += other.lines_processed
        self.lines_with_issues += other.lines_with_issues
        self.line_endings_converted += other.line_endings_converted
        self.html_entities_decoded += other.html_entities_decoded
        self.removed_char_details.update(other.removed_char_details)

    def add_line(self, line_stats: "CleaningStats", ending_converted: bool) -> None:
        """Fold the statistics of one processed line."""
        self.merge(line_stats)
        self.lines_processed += 1
        if line_stats.removed_chars > 0:
            self.lines_with_issues += 1
        if ending_converted:
            self.line_endings_converted += 1

    @property
    def removal_rate(self) -> float:
        """Removed characters as a percentage of all characters examined."""
        if self.total_chars == 0:
            return 0.0
        return self.removed_chars / self.total_chars * 100

    @property
    def changed(self) -> bool:
        return bool(
            self.removed_chars
            or self.line_endings_converted
            or self.markdown_stripped
            or self.html_stripped
        )

    def to_dict(self) -> dict:
        """JSON-ready representation; removed characters keyed as ``U+XXXX``."""
        return {
            "total_chars": self.total_chars,
            "removed_chars": self.removed_chars,
            "non_ascii_removed": self.non_ascii_removed,
            "control_chars_removed": self.control_chars_removed,
            "zero_width_removed": self.zero_width_removed,
            "lines_processed": self.lines_processed,
            "lines_with_issues": self.lines_with_issues,
            "line_endings_converted": self.line_endings_converted,
            "html_entities_decoded": self.html_entities_decoded,
            "removed_char_details": {
                f"U+{ord(char):04X}": count
                for char, count in self.removed_char_details.most_common()
            },
            "markdown_stripped": self.markdown_stripped,
            "html_stripped": self.html_stripped,
            "format_detected": self.format_detected,
            "removal_rate": round(self.removal_rate, 2),
        }
