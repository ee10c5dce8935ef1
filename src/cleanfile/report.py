"""Render cleaning statistics for humans or as JSON."""

import json
from pathlib import Path

from .charsets import describe_char
from .options import LineEnding
from .stats import CleaningStats

RULE = "=" * 70
THIN_RULE = "-" * 70


def format_report(
    input_path: Path,
    output_path: Path,
    stats: CleaningStats,
    target: LineEnding,
    show_details: bool = False,
) -> str:
    lines = ["", RULE, "FILE CLEANING REPORT", RULE]

    lines += ["", "Files:", f"   Input:  {input_path}", f"   Output: {output_path}"]

    lines += [
        "",
        "Configuration:",
        f"   Target OS:              {target.os_name}",
        f"   Line ending format:     {target.label}",
    ]
    if stats.format_detected:
        lines.append(f"   Detected format:        {stats.format_detected}")
    if stats.markdown_stripped:
        lines.append("   Markdown stripped:      Yes")
    if stats.html_stripped:
        lines.append("   HTML stripped:          Yes")
        if stats.html_entities_decoded > 0:
            lines.append(f"   HTML entities decoded:  {stats.html_entities_decoded}")

    lines += ["", "Processing Statistics:", f"   Lines processed:        {stats.lines_processed}"]
    if stats.lines_with_issues > 0:
        lines.append(f"   Lines with issues:      {stats.lines_with_issues}")
    if stats.line_endings_converted > 0:
        lines.append(f"   Line endings converted: {stats.line_endings_converted}")
    lines.append(f"   Total characters:       {stats.total_chars}")

    lines += ["", "Character Removal Summary:"]
    if stats.removed_chars == 0:
        lines.append("   No invalid characters found - file is clean!")
    else:
        lines.append(f"   Total removed:        {stats.removed_chars} characters")
        if stats.zero_width_removed > 0:
            lines.append(f"   Zero-width chars:     {stats.zero_width_removed}")
        if stats.control_chars_removed > 0:
            lines.append(f"   Control chars:        {stats.control_chars_removed}")
        if stats.non_ascii_removed > 0:
            lines.append(f"   Non-ASCII chars:      {stats.non_ascii_removed}")
        if stats.total_chars > 0:
            lines += ["", f"   Removal rate: {stats.removal_rate:.2f}% of total characters"]

    if show_details and stats.removed_char_details:
        lines += ["", "Detailed Character Breakdown:", THIN_RULE]
        for char, count in stats.removed_char_details.most_common():
            lines.append(f"   U+{ord(char):04X}  {describe_char(char):<40}  {count} occurrence(s)")
        lines.append(THIN_RULE)

    lines += ["", RULE]
    if stats.changed:
        lines.append("File cleaned successfully!")
    else:
        lines.append("File processed - no changes needed!")
    lines.append(RULE)
    return "\n".join(lines)


def format_json_report(
    input_path: Path,
    output_path: Path,
    stats: CleaningStats,
    target: LineEnding,
) -> str:
    data = {
        "input": str(input_path),
        "output": str(output_path),
        "target_os": target.value,
        "stats": stats.to_dict(),
    }
    return json.dumps(data, indent=2)
