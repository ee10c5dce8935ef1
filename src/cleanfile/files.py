"""File handling around the cleaning pipeline: paths, backups, read/write."""

import os
import shutil
from pathlib import Path
from typing import Optional

from loguru import logger

from .errors import FileAccessError
from .options import CleaningOptions
from .pipeline import CleaningResult, SanitizationPipeline, decode_content

BACKUP_SUFFIX = ".bak"


def default_output_path(input_path: Path) -> Path:
    """``notes.txt`` -> ``notes_cleaned.txt``; ``README`` -> ``README_cleaned``."""
    input_path = Path(input_path)
    return input_path.with_name(f"{input_path.stem}_cleaned{input_path.suffix}")


def create_backup(path: Path) -> Path:
    """Copy ``path`` to ``<path>.bak`` and verify the copy."""
    path = Path(path)
    backup_path = path.with_name(path.name + BACKUP_SUFFIX)

    if not path.exists():
        raise FileAccessError(f"source file does not exist: {path}")
    if not path.is_file():
        raise FileAccessError(f"source is not a regular file: {path}")

    try:
        shutil.copyfile(path, backup_path)
    except OSError as e:
        raise FileAccessError(f"could not create backup {backup_path}: {e}") from e

    expected = path.stat().st_size
    written = backup_path.stat().st_size
    if written != expected:
        raise FileAccessError(f"incomplete copy: wrote {written} bytes, expected {expected}")
    return backup_path


def read_input(path: Path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FileAccessError(f"could not read input file: {e}") from e


def write_output(path: Path, text: str) -> None:
    """Write text as UTF-8 without newline translation."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
    except OSError as e:
        raise FileAccessError(f"could not write output file: {e}") from e


def clean_file(
    input_path: Path,
    output_path: Optional[Path] = None,
    options: Optional[CleaningOptions] = None,
) -> CleaningResult:
    """Clean ``input_path`` into ``output_path``.

    Nothing is written unless the whole pipeline succeeds.
    """
    input_path = Path(input_path)
    output_path = Path(output_path) if output_path else default_output_path(input_path)

    if input_path.resolve() == output_path.resolve():
        raise FileAccessError("output file cannot be the same as input file")

    text = decode_content(read_input(input_path))
    result = SanitizationPipeline(options or CleaningOptions()).run(text)
    write_output(output_path, result.text)
    logger.debug("Wrote {} characters to {}", len(result.text), output_path)
    return result
