"""Tests for Markdown/HTML format detection."""

import pytest
from cleanfile.detector import FormatDetector, FormatScores, detect_format
from cleanfile.options import DocumentFormat


MARKDOWN_DOC = """# Title

- one
- two
- three

```python
print("hi")
```
"""

HTML_DOC = """<!DOCTYPE html>
<html>
<body>
<p>text</p>
</body>
</html>
"""

PROSE_LINE = "The quick brown fox jumps over the lazy dog, again and again."


class TestDetectFormat:
    def test_markdown_document(self):
        assert detect_format(MARKDOWN_DOC) is DocumentFormat.MARKDOWN

    def test_markdown_document_repeated(self):
        assert detect_format(MARKDOWN_DOC * 3) is DocumentFormat.MARKDOWN

    def test_html_document(self):
        assert detect_format(HTML_DOC) is DocumentFormat.HTML

    @pytest.mark.parametrize("repeat", [1, 7, 50])
    def test_plain_prose_is_unknown(self, repeat):
        text = "\n".join([PROSE_LINE] * repeat)
        assert detect_format(text) is DocumentFormat.UNKNOWN

    @pytest.mark.parametrize("text", ["", "\n\n", "   \n\t\n"])
    def test_empty_or_blank_is_unknown(self, text):
        assert detect_format(text) is DocumentFormat.UNKNOWN

    def test_tie_is_unknown(self):
        text = "<b>x</b> and [a](b)"
        scores = FormatDetector().score(text)

        assert scores.html == scores.markdown == 3
        assert scores.verdict is DocumentFormat.UNKNOWN

    def test_crlf_document(self):
        assert detect_format(HTML_DOC.replace("\n", "\r\n")) is DocumentFormat.HTML


class TestScoring:
    def test_markdown_scores(self):
        scores = FormatDetector().score(MARKDOWN_DOC)

        # header 4 + three bullets 9 + two fences 8
        assert scores.markdown == 21
        assert scores.html == 0
        assert scores.non_blank_lines == 7
        assert scores.threshold == 1

    def test_html_scores(self):
        scores = FormatDetector().score(HTML_DOC)

        # doctype 15 + <html>, <body>, <p> lines 3 each; closing tags do not match
        assert scores.html == 24
        assert scores.hits["doctype"] == 1
        assert scores.hits["tag"] == 3

    def test_entity_scores(self):
        scores = FormatDetector().score("Fish &amp; chips")
        assert scores.html == 2

    def test_patterns_score_once_per_line(self):
        scores = FormatDetector().score("<a><b><c>")
        assert scores.html == 3

    def test_inline_scoring_suppressed_in_code_block(self):
        text = "```\n[link](http://x) **b**\n```\n"
        scores = FormatDetector().score(text)

        assert scores.markdown == 8
        assert "link" not in scores.hits
        assert "bold" not in scores.hits

    def test_headers_scored_inside_code_block(self):
        text = "```\n# comment\n```\n"
        assert FormatDetector().score(text).markdown == 12

    def test_blank_lines_not_counted(self):
        scores = FormatDetector().score("a\n\n   \nb\n")
        assert scores.non_blank_lines == 2


class TestThreshold:
    def test_weak_signal_below_threshold(self):
        # 14 non-blank lines -> threshold 2; a lone italic scores 1
        lines = [PROSE_LINE] * 13 + ["a *word* here"]
        scores = FormatDetector().score("\n".join(lines))

        assert scores.threshold == 2
        assert scores.markdown == 1
        assert scores.verdict is DocumentFormat.UNKNOWN

    def test_signal_at_threshold(self):
        # bold also matches the italic pattern: 2 + 1
        lines = [PROSE_LINE] * 13 + ["some **bold** text"]
        scores = FormatDetector().score("\n".join(lines))

        assert scores.markdown == 3
        assert scores.verdict is DocumentFormat.MARKDOWN

    def test_verdict_from_raw_scores(self):
        assert FormatScores(markdown=0, html=2, non_blank_lines=14).verdict is DocumentFormat.HTML
        assert FormatScores(markdown=0, html=1, non_blank_lines=14).verdict is DocumentFormat.UNKNOWN
        assert FormatScores(markdown=5, html=5, non_blank_lines=1).verdict is DocumentFormat.UNKNOWN
