"""
CSV Report Writer

Writes a header and pre-formatted rows to a flat file.

Values are joined with commas as-is; nothing is quoted or escaped, so a
value containing a comma produces a malformed row. Files are overwritten,
never appended.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

from utils.errors import WriteError

logger = logging.getLogger(__name__)


def format_row(*values: object) -> str:
    """Join values with commas; None renders as an empty field."""
    return ",".join("" if value is None else str(value) for value in values)


def render_report(header: str, rows: Iterable[str]) -> str:
    """
    Render report text.

    The header is always followed by a newline; rows are newline-separated
    with no newline after the last one.
    """
    return header + "\n" + "\n".join(rows)


def write_report(path: Union[str, Path], header: str, rows: Iterable[str]) -> Path:
    """
    Write a report file, replacing any previous content.

    Args:
        path: Destination file
        header: Header line without trailing newline
        rows: Formatted rows

    Returns:
        Path of the written file

    Raises:
        WriteError: If the file cannot be written
    """
    report_path = Path(path)
    content = render_report(header, rows)

    try:
        # newline="" keeps "\n" as-is on every platform
        with open(report_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        error_msg = f"{e.strerror or e}"
        logger.error(
            "Failed to write report",
            extra={"file_path": str(report_path), "error": error_msg},
        )
        raise WriteError(str(report_path), error_msg) from e

    return report_path
