"""Edit-script source: difflib opcodes as ordered runs, replayed into a consumer"""

import difflib
from collections.abc import Iterable, Sequence
from typing import Protocol

from hunkdiff.core.models import Delete, EditRun, Equal, Insert, Replace


class EditScriptConsumer(Protocol):
    """Receives one callback per run, in index order, then finish()."""

    def equal(self, old_index: int, new_index: int, length: int) -> None: ...

    def replace(self, old_index: int, old_length: int, new_index: int, new_length: int) -> None: ...

    def insert(self, old_index: int, new_index: int, new_length: int) -> None: ...

    def delete(self, old_index: int, length: int) -> None: ...

    def finish(self) -> None: ...


def edit_script(a: Sequence[str], b: Sequence[str]) -> list[EditRun]:
    """Return the runs turning a into b. Equal runs alternate with changed runs."""
    matcher = difflib.SequenceMatcher(None, a, b, autojunk=False)
    runs: list[EditRun] = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            runs.append(Equal(i1, j1, i2 - i1))
        elif tag == "replace":
            runs.append(Replace(i1, i2 - i1, j1, j2 - j1))
        elif tag == "insert":
            runs.append(Insert(i1, j1, j2 - j1))
        elif tag == "delete":
            runs.append(Delete(i1, i2 - i1))

    return runs


def replay(runs: Iterable[EditRun], consumer: EditScriptConsumer) -> None:
    """Drive consumer with one callback per run, then signal completion."""
    for run in runs:
        if isinstance(run, Equal):
            consumer.equal(run.old_index, run.new_index, run.length)
        elif isinstance(run, Replace):
            consumer.replace(run.old_index, run.old_length, run.new_index, run.new_length)
        elif isinstance(run, Insert):
            consumer.insert(run.old_index, run.new_index, run.new_length)
        elif isinstance(run, Delete):
            consumer.delete(run.old_index, run.length)
        else:
            raise TypeError(f"Unknown edit run: {run!r}")
    consumer.finish()
