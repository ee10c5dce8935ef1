"""Regex-based removal of Markdown and HTML markup.

These are text-to-text transforms, not parsers: they remove the common
syntax while keeping the visible text, and make no attempt to validate
the markup.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Type

from .charsets import HTML_ENTITIES
from .options import DocumentFormat, StripFormat

MAX_CODE_POINT = 0x10FFFF

_BLANK_RUN_RE = re.compile(r"(\r?\n)(?:\r?\n){2,}")


def collapse_blank_lines(text: str) -> str:
    """Collapse three or more consecutive line breaks into one blank line."""
    return _BLANK_RUN_RE.sub(r"\1\1", text)


@dataclass
class StripResult:
    """Stripped text plus counters the pipeline copies into its stats."""
    text: str
    entities_decoded: int = 0


class FormatStripper(ABC):
    """Base class for markup strippers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable stripper name."""
        pass

    @property
    @abstractmethod
    def format(self) -> StripFormat:
        """The strip format this stripper handles."""
        pass

    def accepts(self, detected: DocumentFormat) -> bool:
        """Return True if a document detected as ``detected`` may be stripped."""
        return detected.value == self.format.value

    @abstractmethod
    def strip(self, text: str) -> StripResult:
        """Remove markup from ``text``."""
        pass


# Order matters: bold before italic, images before links, task items before bullets
_FENCED_CODE_RE = re.compile(r"```[\w+-]*[ \t]*\r?\n(.*?)```", re.DOTALL)
_INLINE_CODE_RE = re.compile(r"`([^`]+)`")
_HEADER_RE = re.compile(r"^#{1,6}[ \t]+(.+)$", re.MULTILINE)
_BOLD_RES = [
    re.compile(r"\*\*(?=\S)(.+?)\*\*"),
    re.compile(r"(?<!\w)__(?=\S)(.+?)__(?!\w)"),
]
_ITALIC_RES = [
    re.compile(r"\*(?=[^\s*])(.+?)\*"),
    re.compile(r"(?<!\w)_(?=[^\s_])(.+?)_(?!\w)"),
]
_STRIKE_RE = re.compile(r"~~(.+?)~~")
_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\([^)]+\)")
_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
_REF_LINK_RE = re.compile(r"\[([^\]]+)\]\[[^\]]*\]")
_LINK_DEF_RE = re.compile(r"^[ \t]*\[[^\]]+\]:[ \t]+\S.*$", re.MULTILINE)
_HR_RE = re.compile(r"^[ \t]*([-*_])(?:[ \t]*\1){2,}[ \t]*$", re.MULTILINE)
_BLOCKQUOTE_RE = re.compile(r"^[ \t]*(?:>[ \t]?)+", re.MULTILINE)
_TASK_ITEM_RE = re.compile(r"^[ \t]*[-*+][ \t]+\[[ xX]\][ \t]+", re.MULTILINE)
_BULLET_RE = re.compile(r"^[ \t]*[-*+][ \t]+(?=\S)", re.MULTILINE)
_ORDERED_RE = re.compile(r"^[ \t]*\d+\.[ \t]+(?=\S)", re.MULTILINE)
_HTML_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)


class MarkdownStripper(FormatStripper):
    """Remove Markdown syntax, keeping the readable text."""

    @property
    def name(self) -> str:
        return "MarkdownStripper"

    @property
    def format(self) -> StripFormat:
        return StripFormat.MARKDOWN

    def strip(self, text: str) -> StripResult:
        text = _FENCED_CODE_RE.sub(r"\1", text)
        text = _INLINE_CODE_RE.sub(r"\1", text)
        text = _HEADER_RE.sub(r"\1", text)

        for pattern in _BOLD_RES:
            text = pattern.sub(r"\1", text)
        for pattern in _ITALIC_RES:
            text = pattern.sub(r"\1", text)
        text = _STRIKE_RE.sub(r"\1", text)

        text = _IMAGE_RE.sub(r"\1", text)
        text = _LINK_RE.sub(r"\1", text)
        text = _REF_LINK_RE.sub(r"\1", text)
        text = _LINK_DEF_RE.sub("", text)

        text = _HR_RE.sub("", text)
        text = _BLOCKQUOTE_RE.sub("", text)
        text = _TASK_ITEM_RE.sub("", text)
        text = _BULLET_RE.sub("", text)
        text = _ORDERED_RE.sub("", text)

        text = text.replace("|", " ")
        text = _HTML_COMMENT_RE.sub("", text)

        return StripResult(text=collapse_blank_lines(text))


_SCRIPT_RE = re.compile(r"<script\b[^>]*>.*?</script\s*>", re.IGNORECASE | re.DOTALL)
_STYLE_RE = re.compile(r"<style\b[^>]*>.*?</style\s*>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")
_ENTITY_RE = re.compile(r"&(?:#[xX]([0-9a-fA-F]+)|#([0-9]+)|([a-zA-Z][a-zA-Z0-9]*));")
_HSPACE_RE = re.compile(r"[ \t]+")


def _code_point_to_char(code: int) -> str | None:
    """Return the character for a numeric entity, or None if out of range."""
    if code <= 0 or code > MAX_CODE_POINT:
        return None
    if 0xD800 <= code <= 0xDFFF:
        return None
    return chr(code)


def decode_entities(text: str) -> tuple[str, int]:
    """Decode named, decimal and hex entities in a single pass.

    Unknown names and out-of-range numbers are left as literal text.
    Returns the decoded text and the number of entities decoded.
    """
    decoded = 0

    def replace(match: re.Match) -> str:
        nonlocal decoded
        hex_digits, dec_digits, name = match.groups()
        if name is not None:
            char = HTML_ENTITIES.get(match.group(0))
        elif dec_digits is not None:
            char = _code_point_to_char(int(dec_digits))
        else:
            char = _code_point_to_char(int(hex_digits, 16))
        if char is None:
            return match.group(0)
        decoded += 1
        return char

    return _ENTITY_RE.sub(replace, text), decoded


class HTMLStripper(FormatStripper):
    """Remove HTML tags, scripts and styles, and decode entities."""

    @property
    def name(self) -> str:
        return "HTMLStripper"

    @property
    def format(self) -> StripFormat:
        return StripFormat.HTML

    def strip(self, text: str) -> StripResult:
        text = _HTML_COMMENT_RE.sub("", text)
        text = _SCRIPT_RE.sub("", text)
        text = _STYLE_RE.sub("", text)
        text = _TAG_RE.sub("", text)

        text, decoded = decode_entities(text)

        text = _HSPACE_RE.sub(" ", text)
        return StripResult(text=collapse_blank_lines(text), entities_decoded=decoded)


STRIPPERS: Dict[StripFormat, Type[FormatStripper]] = {
    StripFormat.MARKDOWN: MarkdownStripper,
    StripFormat.HTML: HTMLStripper,
}


def get_stripper(strip_format: StripFormat) -> FormatStripper:
    """Instantiate the stripper registered for ``strip_format``."""
    try:
        return STRIPPERS[strip_format]()
    except KeyError:
        raise ValueError(f"No stripper registered for {strip_format.value!r}") from None


def strip_markdown(text: str) -> str:
    return MarkdownStripper().strip(text).text


def strip_html(text: str) -> tuple[str, int]:
    result = HTMLStripper().strip(text)
    return result.text, result.entities_decoded
