"""Per-character keep/drop decisions."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .charsets import is_control, is_space, is_zero_width
from .options import CleaningOptions


class Verdict(Enum):
    """What happens to a character."""
    KEEP = "keep"
    TRANSFORM = "transform"
    DROP = "drop"


class Category(Enum):
    """Why a character was dropped or transformed."""
    NONE = "none"
    ZERO_WIDTH = "zero-width"
    CONTROL = "control"
    NON_ASCII = "non-ascii"
    WHITESPACE = "whitespace-collapsed"


# Categories that count towards removed_chars; whitespace collapsing does not
REMOVAL_CATEGORIES = frozenset([Category.ZERO_WIDTH, Category.CONTROL, Category.NON_ASCII])

_LINE_BREAKS = frozenset('\n\r')
_ALWAYS_KEPT_CONTROLS = frozenset('\n\r\t')


@dataclass(frozen=True)
class Classification:
    """Result of classifying one character."""
    verdict: Verdict
    category: Category = Category.NONE
    replacement: Optional[str] = None

    @property
    def is_removal(self) -> bool:
        """True when the drop must be counted in the statistics."""
        return self.verdict is Verdict.DROP and self.category in REMOVAL_CATEGORIES

    def apply(self, char: str) -> str:
        """Return the output text for ``char`` under this verdict."""
        if self.verdict is Verdict.KEEP:
            return char
        if self.verdict is Verdict.TRANSFORM:
            return self.replacement
        return ""


KEEP = Classification(Verdict.KEEP)
DROP_ZERO_WIDTH = Classification(Verdict.DROP, Category.ZERO_WIDTH)
DROP_NON_ASCII = Classification(Verdict.DROP, Category.NON_ASCII)
DROP_CONTROL = Classification(Verdict.DROP, Category.CONTROL)
DROP_LINE_BREAK = Classification(Verdict.DROP, Category.WHITESPACE)
TO_SPACE = Classification(Verdict.TRANSFORM, Category.WHITESPACE, " ")


def classify_char(char: str, options: CleaningOptions) -> Classification:
    """Decide what to do with a single code point.

    Rules are checked in order and the first match wins:
    zero-width, non-ASCII, control, whitespace normalization.
    CR and LF are never dropped by the non-ASCII or control rules;
    tab is never dropped by the control rule.
    """
    if options.remove_zero_width and is_zero_width(char):
        return DROP_ZERO_WIDTH

    if options.remove_non_ascii and ord(char) > 127:
        if char in _LINE_BREAKS:
            return KEEP
        return DROP_NON_ASCII

    if options.remove_control_chars and is_control(char):
        if char in _ALWAYS_KEPT_CONTROLS:
            return KEEP
        return DROP_CONTROL

    if options.normalize_whitespace and is_space(char):
        if char in _LINE_BREAKS:
            return KEEP if options.preserve_newlines else DROP_LINE_BREAK
        if char != " ":
            return TO_SPACE

    return KEEP
