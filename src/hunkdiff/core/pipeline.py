"""Pipeline step functions: read two files and produce diff output or change stats"""

from pathlib import Path

from hunkdiff.core.files import file_header, read_lines, timestamp
from hunkdiff.core.unidiff import diff_summary, unidiff


def _load(path: str, encoding: str) -> tuple[list[str], str]:
    """Read path into lines plus its header timestamp."""
    p = Path(path)
    try:
        return read_lines(p, encoding), timestamp(p)
    except (OSError, UnicodeDecodeError) as e:
        raise RuntimeError(f"Failed to read {path}: {e}") from e


def run_diff(
    path_1: str,
    path_2: str,
    context_radius: int = 3,
    encoding: str = "utf-8",
    ) -> list[str]:
    """Return unified diff lines for path_1 -> path_2: both file headers, then every hunk.

    Headers are emitted even when the files are identical.
    """
    old, old_stamp = _load(path_1, encoding)
    new, new_stamp = _load(path_2, encoding)
    return [
        file_header(path_1, old_stamp, "---"),
        file_header(path_2, new_stamp, "+++"),
        *unidiff(old, new, context_radius),
    ]


def run_stat(path_1: str, path_2: str, encoding: str = "utf-8") -> dict[str, int]:
    """Return added/deleted/unchanged line counts for path_1 -> path_2."""
    old, _ = _load(path_1, encoding)
    new, _ = _load(path_2, encoding)
    return diff_summary(old, new)
