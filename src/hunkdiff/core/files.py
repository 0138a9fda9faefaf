"""File access for the diff pipeline: line reading, mtime stamps, and `---`/`+++` headers"""

from datetime import datetime
from pathlib import Path

from loguru import logger


def read_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    """Return the lines of path without terminators (`\\n` or `\\r\\n`)."""
    with path.open(encoding=encoding, newline="") as f:
        text = f.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    logger.debug(f"Read {len(lines)} lines from {path}")
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def timestamp(path: Path) -> str:
    """Return the local modification time, e.g. '2024-05-01 09:30:00.123456789 +0200'."""
    mtime_ns = path.stat().st_mtime_ns
    seconds, nanos = divmod(mtime_ns, 1_000_000_000)
    modified = datetime.fromtimestamp(seconds).astimezone()
    return f"{modified:%Y-%m-%d %H:%M:%S}.{nanos:09d} {modified:%z}"


def file_header(path: str, stamp: str, marker: str) -> str:
    """Render one unified-diff file header line; marker is '---' or '+++'."""
    return f"{marker} {path}\t{stamp}"
