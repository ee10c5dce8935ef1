"""Cleaning options and the enumerations they are built from."""

import sys
from dataclasses import dataclass, replace
from enum import Enum


class LineEnding(Enum):
    """Target line-ending convention."""
    WINDOWS = "windows"
    UNIX = "unix"
    MAC9 = "mac9"

    @property
    def terminator(self) -> str:
        return _TERMINATORS[self]

    @property
    def label(self) -> str:
        """Human-readable terminator name, e.g. ``CRLF (\\r\\n)``."""
        return _LABELS[self]

    @property
    def os_name(self) -> str:
        return _OS_NAMES[self]

    @classmethod
    def from_name(cls, name: str | None) -> "LineEnding":
        """Resolve a target OS name or alias.

        An empty name or ``auto`` picks the convention of the running platform.
        Raises ValueError for unrecognized names.
        """
        key = (name or "").strip().lower()
        if key in ("", "auto"):
            return cls.WINDOWS if sys.platform.startswith("win") else cls.UNIX
        try:
            return cls(_ALIASES[key])
        except KeyError:
            raise ValueError(
                f"Invalid target OS '{name}'. Valid options: windows, unix, mac, mac9, auto"
            ) from None


_TERMINATORS = {
    LineEnding.WINDOWS: "\r\n",
    LineEnding.UNIX: "\n",
    LineEnding.MAC9: "\r",
}

_LABELS = {
    LineEnding.WINDOWS: "CRLF (\\r\\n)",
    LineEnding.UNIX: "LF (\\n)",
    LineEnding.MAC9: "CR (\\r)",
}

_OS_NAMES = {
    LineEnding.WINDOWS: "Windows",
    LineEnding.UNIX: "Unix/Linux/macOS",
    LineEnding.MAC9: "Classic Mac OS",
}

# Modern macOS uses LF, so "mac" maps to unix; only "mac9" means bare CR.
_ALIASES = {
    "windows": "windows", "win": "windows", "dos": "windows",
    "unix": "unix", "linux": "unix",
    "mac": "unix", "macos": "unix", "darwin": "unix",
    "mac9": "mac9", "macos9": "mac9", "classic": "mac9",
}


class StripFormat(Enum):
    """Markup format to strip before character cleaning."""
    NONE = "none"
    MARKDOWN = "markdown"
    HTML = "html"

    @classmethod
    def from_name(cls, name: str | None) -> "StripFormat":
        key = (name or "").strip().lower()
        if key in ("", "none"):
            return cls.NONE
        try:
            return cls(key)
        except ValueError:
            raise ValueError(
                f"Invalid strip format '{name}'. Valid options: markdown, html"
            ) from None


class DocumentFormat(Enum):
    """Verdict of the format detector."""
    MARKDOWN = "markdown"
    HTML = "html"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CleaningOptions:
    """What to remove and how to rewrite line endings.

    Built once per run and never mutated; use ``with_changes`` to derive
    a variant.
    """
    remove_non_ascii: bool = True
    remove_control_chars: bool = True
    remove_zero_width: bool = True
    remove_bom: bool = True
    normalize_whitespace: bool = False
    preserve_newlines: bool = True
    target_line_ending: LineEnding = LineEnding.UNIX
    strip_format: StripFormat = StripFormat.NONE

    def with_changes(self, **kwargs) -> "CleaningOptions":
        return replace(self, **kwargs)

    @classmethod
    def passthrough(cls, **kwargs) -> "CleaningOptions":
        """Options that remove nothing; only line endings are rewritten."""
        base = cls(
            remove_non_ascii=False,
            remove_control_chars=False,
            remove_zero_width=False,
            remove_bom=False,
            normalize_whitespace=False,
        )
        return replace(base, **kwargs)
