"""Public diff entry points: rendered hunks, structured hunks, and change counts"""

from collections.abc import Sequence

from hunkdiff.core.edit_script import edit_script, replay
from hunkdiff.core.hunks import HunkAccumulator
from hunkdiff.core.models import Delete, Equal, Hunk, Insert, Replace


def _accumulate(a: Sequence[str], b: Sequence[str], context_radius: int) -> HunkAccumulator:
    accumulator = HunkAccumulator(a, b, context_radius)
    replay(edit_script(a, b), accumulator)
    return accumulator


def unidiff(a: Sequence[str], b: Sequence[str], context_radius: int = 3) -> list[str]:
    """Return the hunk lines of a unified diff from a to b. Empty list if identical.

    Lines carry no terminators and no `---`/`+++` file headers; callers prepend those.
    """
    return _accumulate(a, b, context_radius).result()


def diff_hunks(a: Sequence[str], b: Sequence[str], context_radius: int = 3) -> list[Hunk]:
    """Return the structured hunks of a unified diff from a to b."""
    return _accumulate(a, b, context_radius).hunks()


def diff_summary(a: Sequence[str], b: Sequence[str]) -> dict[str, int]:
    """Return added/deleted/unchanged line counts. Useful for compact change stats."""
    added = deleted = unchanged = 0

    for run in edit_script(a, b):
        if isinstance(run, Equal):
            unchanged += run.length
        elif isinstance(run, Replace):
            deleted += run.old_length
            added += run.new_length
        elif isinstance(run, Insert):
            added += run.new_length
        elif isinstance(run, Delete):
            deleted += run.length

    return {"added": added, "deleted": deleted, "unchanged": unchanged}
