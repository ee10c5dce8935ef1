"""CLI entry point for cleanfile."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import CleanfileConfig, load_config
from .errors import CleanfileError, FileAccessError
from .files import clean_file, create_backup, default_output_path
from .log import setup_logging
from .report import format_json_report, format_report

# CLI flag -> config field for the on/off switches
BOOLEAN_FLAGS = {
    "ascii": "Remove non-ASCII characters",
    "control": "Remove control characters (except newlines/tabs)",
    "zerowidth": "Remove zero-width characters",
    "bom": "Remove Byte Order Mark (BOM)",
    "normalize": "Normalize whitespace",
    "preserve_newlines": "Preserve newlines when normalizing",
    "backup": "Create backup of original file",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cleanfile",
        description=(
            "Remove invisible, control and non-ASCII characters from a text file, "
            "normalize line endings, and optionally strip Markdown or HTML."
        ),
        epilog=(
            "Defaults can be set in ~/.config/cleanfile/config.yaml or "
            "./.cleanfile.yaml; flags override config files."
        ),
    )
    parser.add_argument("input", type=Path, help="Input file path")
    parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Output file path (defaults to <input>_cleaned.<ext>)",
    )
    for name, help_text in BOOLEAN_FLAGS.items():
        parser.add_argument(
            f"--{name.replace('_', '-')}",
            dest=name,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=help_text,
        )
    parser.add_argument(
        "--os", dest="os", default=None, metavar="NAME",
        help="Target OS for line endings (windows, unix, mac, mac9, auto). Default: auto",
    )
    parser.add_argument(
        "--strip", dest="strip", default=None, metavar="FORMAT",
        help="Strip formatting: 'markdown' or 'html'",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=None, help="Verbose output")
    parser.add_argument(
        "--details", action="store_true", default=None,
        help="Show detailed list of removed characters",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--config", type=Path, default=None, help="Read defaults from this YAML file")
    return parser


def merge_cli_args(config: CleanfileConfig, args: argparse.Namespace) -> CleanfileConfig:
    """Override config values with any flags given on the command line."""
    for name in list(BOOLEAN_FLAGS) + ["os", "strip", "verbose", "details"]:
        value = getattr(args, name)
        if value is not None:
            setattr(config, name, value)
    return config


def run(args: Optional[list[str]] = None) -> int:
    """Run cleanfile with the given arguments. Returns exit code."""
    if args is None:
        args = sys.argv[1:]

    parsed = build_parser().parse_args(args)
    setup_logging(bool(parsed.verbose))

    try:
        config = merge_cli_args(load_config(parsed.config), parsed)
        options = config.to_options()
    except CleanfileError as e:
        print(f"cleanfile: {e}", file=sys.stderr)
        return 1
    setup_logging(config.verbose)

    input_path: Path = parsed.input
    if not input_path.exists():
        print(f"cleanfile: input file '{input_path}' does not exist", file=sys.stderr)
        return 1
    output_path = parsed.output or default_output_path(input_path)
    if input_path.resolve() == output_path.resolve():
        print("cleanfile: output file cannot be the same as input file", file=sys.stderr)
        return 1

    if config.backup:
        try:
            backup_path = create_backup(input_path)
            logger.info("Backup created: {}", backup_path)
        except FileAccessError as e:
            logger.warning("Could not create backup: {}", e)

    try:
        result = clean_file(input_path, output_path, options)
    except CleanfileError as e:
        print(f"cleanfile: {e}", file=sys.stderr)
        return 1

    if parsed.json:
        print(format_json_report(input_path, output_path, result.stats, options.target_line_ending))
    else:
        print(format_report(
            input_path, output_path, result.stats,
            options.target_line_ending, show_details=config.details,
        ))
    return 0


def main() -> None:
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
