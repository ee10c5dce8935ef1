"""Line splitting and line-ending conversion."""

from typing import List, Tuple

CRLF = "\r\n"
LF = "\n"
CR = "\r"


def split_lines(text: str) -> List[str]:
    """Split after every LF, keeping terminators.

    A trailing LF does not produce an extra empty line, and empty text
    yields no lines. CR alone does not split, so a classic Mac file is a
    single line.
    """
    if not text:
        return []
    lines = [line + LF for line in text.split(LF)]
    last = lines.pop()[:-1]
    if last:
        lines.append(last)
    return lines


def detect_line_ending(line: str) -> str | None:
    """Return the terminator variant present in ``line``, CRLF taking precedence."""
    if CRLF in line:
        return CRLF
    if LF in line:
        return LF
    if CR in line:
        return CR
    return None


def normalize_line_ending(line: str, target: str) -> Tuple[str, bool]:
    """Rewrite the detected terminator variant to ``target``.

    Returns the rewritten line and whether anything changed. Lines without
    a terminator, or already using ``target``, are returned unchanged.
    """
    current = detect_line_ending(line)
    if current is None or current == target:
        return line, False
    converted = line.replace(current, target)
    return converted, converted != line
