"""Heuristic Markdown/HTML detection from raw document content."""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .options import DocumentFormat

# (pattern, weight); each pattern scores at most once per line
HTML_INDICATORS: Dict[str, Tuple[str, int]] = {
    'doctype': (r'(?i)<!DOCTYPE\s+html', 15),
    'tag': (r'<[a-zA-Z][^>]*>', 3),
    'entity': (r'&[a-zA-Z]+;|&#\d+;|&#x[0-9a-fA-F]+;', 2),
}

MARKDOWN_BLOCK_INDICATORS: Dict[str, Tuple[str, int]] = {
    'header': (r'^#{1,6}\s+.+', 4),
    'bullet_list': (r'^\s*[-*+]\s+.+', 3),
    'ordered_list': (r'^\s*\d+\.\s+.+', 3),
    'code_fence': (r'^```', 4),
}

# Not scored inside fenced code blocks
MARKDOWN_INLINE_INDICATORS: Dict[str, Tuple[str, int]] = {
    'link': (r'\[.+?\]\(.+?\)', 3),
    'bold': (r'\*\*.+?\*\*|__.+?__', 2),
    'italic': (r'\*.+?\*|_.+?_', 1),
    'inline_code': (r'`[^`]+`', 1),
}

# Non-blank lines per required point of score
THRESHOLD_DIVISOR = 7


@dataclass
class FormatScores:
    """Accumulated indicator scores for one document."""
    markdown: int = 0
    html: int = 0
    non_blank_lines: int = 0
    hits: Dict[str, int] = field(default_factory=dict)

    @property
    def threshold(self) -> int:
        return self.non_blank_lines // THRESHOLD_DIVISOR

    @property
    def verdict(self) -> DocumentFormat:
        if self.non_blank_lines == 0:
            return DocumentFormat.UNKNOWN
        if self.html > self.markdown and self.html >= self.threshold:
            return DocumentFormat.HTML
        if self.markdown > self.html and self.markdown >= self.threshold:
            return DocumentFormat.MARKDOWN
        return DocumentFormat.UNKNOWN


class FormatDetector:
    """Score a whole document against Markdown and HTML indicators.

    Detection needs the global count of non-blank lines, so the whole
    document must be scanned before a verdict is available.
    """

    def __init__(self):
        self._html = self._compile(HTML_INDICATORS)
        self._md_block = self._compile(MARKDOWN_BLOCK_INDICATORS)
        self._md_inline = self._compile(MARKDOWN_INLINE_INDICATORS)
        self._fence = re.compile(MARKDOWN_BLOCK_INDICATORS['code_fence'][0])

    @staticmethod
    def _compile(indicators: Dict[str, Tuple[str, int]]) -> List[Tuple[str, re.Pattern, int]]:
        return [
            (name, re.compile(pattern), weight)
            for name, (pattern, weight) in indicators.items()
        ]

    @staticmethod
    def _score_line(
        line: str,
        indicators: List[Tuple[str, re.Pattern, int]],
        hits: Dict[str, int],
    ) -> int:
        score = 0
        for name, pattern, weight in indicators:
            if pattern.search(line):
                score += weight
                hits[name] = hits.get(name, 0) + 1
        return score

    def score(self, text: str) -> FormatScores:
        """Scan every non-blank line and accumulate indicator scores."""
        scores = FormatScores()
        in_code_block = False

        for raw_line in text.split('\n'):
            line = raw_line.strip()
            if not line:
                continue
            scores.non_blank_lines += 1

            if self._fence.search(line):
                in_code_block = not in_code_block

            scores.html += self._score_line(line, self._html, scores.hits)
            scores.markdown += self._score_line(line, self._md_block, scores.hits)
            if not in_code_block:
                scores.markdown += self._score_line(line, self._md_inline, scores.hits)

        return scores

    def detect(self, text: str) -> DocumentFormat:
        return self.score(text).verdict


def detect_format(text: str) -> DocumentFormat:
    """Convenience wrapper around FormatDetector().detect()."""
    return FormatDetector().detect(text)
