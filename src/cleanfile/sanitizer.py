"""Apply the character classifier across a line."""

from dataclasses import dataclass

from .charsets import BOM
from .classifier import Category, classify_char
from .options import CleaningOptions
from .stats import CleaningStats


@dataclass
class LineResult:
    """Cleaned text of one line and the statistics for that line alone."""
    text: str
    stats: CleaningStats

    @property
    def had_issues(self) -> bool:
        return self.stats.removed_chars > 0


def sanitize_line(line: str, options: CleaningOptions) -> LineResult:
    """Clean one line, including its terminator if present.

    A byte order mark at offset 0 is consumed by the BOM rule before the
    classifier runs, so it is counted once even when zero-width removal
    is also enabled.
    """
    stats = CleaningStats()
    if not line:
        return LineResult(text=line, stats=stats)

    start = 0
    if options.remove_bom and line[0] == BOM:
        stats.total_chars += 1
        stats.record_removal(BOM, Category.ZERO_WIDTH)
        start = 1

    out = []
    for char in line[start:]:
        stats.total_chars += 1
        result = classify_char(char, options)
        if result.is_removal:
            stats.record_removal(char, result.category)
            continue
        out.append(result.apply(char))

    return LineResult(text="".join(out), stats=stats)
