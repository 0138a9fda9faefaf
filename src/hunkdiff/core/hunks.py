"""Hunk accumulator: groups a streamed edit script into unified-diff hunks"""

from collections import deque
from collections.abc import Sequence
from enum import Enum
from typing import Optional

from loguru import logger

from hunkdiff.core.errors import MalformedEditScript
from hunkdiff.core.models import BodyLine, Hunk, HunkHeader, LineKind


class HunkState(str, Enum):
    idle    = "idle"        # nothing seen yet
    context = "context"     # leading context only
    change  = "change"      # holds at least one removed/added line


class HunkInProgress:
    """Mutable state of the single hunk currently being built."""

    def __init__(self, radius: int):
        self.state = HunkState.idle
        self.anchor: Optional[int] = None           # 1-based old line where the hunk starts
        self.window: deque[int] = deque(maxlen=radius)  # old indices of leading context
        self.body: list[BodyLine] = []
        self.window_count = 0    # equal lines seen before the first change, trailing lines after
        self.context_equal_count = 0
        self.removed_count = 0
        self.added_count = 0

    @property
    def has_change(self) -> bool:
        return self.state == HunkState.change

    def slide(self, old_indices: range) -> None:
        """Push leading context through the window, moving the anchor past every evicted line."""
        for i in old_indices:
            if self.anchor is None:
                self.anchor = i + 1
            if len(self.window) == self.window.maxlen:
                self.anchor += 1
            self.window.append(i)
            self.window_count += 1
            self.state = HunkState.context


class HunkAccumulator:
    """Consumes equal/replace/insert/delete runs and renders the hunks they imply.

    Only the last `context_radius` equal lines before a change are kept as
    leading context, and at most `context_radius` after it. An equal run
    longer than twice the radius closes the current hunk and opens a new one.
    Call finish() once the script ends, then read result() or hunks().
    """

    def __init__(self, a: Sequence[str], b: Sequence[str], context_radius: int = 3):
        if context_radius < 0:
            raise ValueError(f"context_radius must be >= 0, got {context_radius}")
        self._a = a
        self._b = b
        self._radius = context_radius

        self._hunk = HunkInProgress(context_radius)
        self._hunks: list[Hunk] = []
        self._removed_carry = 0
        self._added_carry = 0

        self._old_pos = 0
        self._new_pos = 0
        self._finished = False

    # --- consumer callbacks ---

    def equal(self, old_index: int, new_index: int, length: int) -> None:
        self._advance(old_index, length, new_index, length)
        hunk = self._hunk

        if not hunk.has_change:
            hunk.slide(range(old_index, old_index + length))
            return

        if length > 2 * self._radius:
            self._append_context(old_index, self._radius)
            self._split(old_index, length)
        else:
            self._append_context(old_index, length)

    def replace(self, old_index: int, old_length: int, new_index: int, new_length: int) -> None:
        self._advance(old_index, old_length, new_index, new_length)
        self._change(old_index, old_length, new_index, new_length)

    def insert(self, old_index: int, new_index: int, new_length: int) -> None:
        self._advance(old_index, 0, new_index, new_length)
        self._change(old_index, 0, new_index, new_length)

    def delete(self, old_index: int, length: int) -> None:
        self._advance(old_index, length, self._new_pos, 0)
        self._change(old_index, length, self._new_pos, 0)

    def finish(self) -> None:
        self._check_open()
        if self._old_pos != len(self._a) or self._new_pos != len(self._b):
            raise MalformedEditScript(
                f"Edit script ended at ({self._old_pos}, {self._new_pos}), "
                f"expected ({len(self._a)}, {len(self._b)})"
            )

        hunk = self._hunk
        excess = hunk.window_count - self._radius
        if hunk.has_change and excess > 0:
            # input ended inside the window that would have bridged to another change
            del hunk.body[-excess:]
            hunk.context_equal_count -= excess
            hunk.window_count = self._radius

        self._flush()
        self._finished = True

    # --- results ---

    def hunks(self) -> list[Hunk]:
        if not self._finished:
            raise RuntimeError("Hunks are not available before finish()")
        return list(self._hunks)

    def result(self) -> list[str]:
        """Return the rendered hunk lines (headers and bodies) in order."""
        return [line for hunk in self.hunks() for line in hunk.render()]

    # --- internals ---

    def _check_open(self) -> None:
        if self._finished:
            raise MalformedEditScript("Edit script continued after finish()")

    def _advance(self, old_index: int, old_length: int, new_index: int, new_length: int) -> None:
        """Check a run starts where the previous one ended and stays in bounds."""
        self._check_open()
        if min(old_index, old_length, new_index, new_length) < 0:
            raise MalformedEditScript(
                f"Negative index or length in run at ({old_index}, {new_index})"
            )
        if old_index != self._old_pos or new_index != self._new_pos:
            raise MalformedEditScript(
                f"Run starts at ({old_index}, {new_index}), expected ({self._old_pos}, {self._new_pos})"
            )
        if old_index + old_length > len(self._a) or new_index + new_length > len(self._b):
            raise MalformedEditScript(
                f"Run at ({old_index}, {new_index}) overruns sequences of length "
                f"({len(self._a)}, {len(self._b)})"
            )
        self._old_pos += old_length
        self._new_pos += new_length

    def _append_context(self, old_index: int, count: int) -> None:
        hunk = self._hunk
        for i in range(old_index, old_index + count):
            hunk.body.append(BodyLine(kind=LineKind.context, text=self._a[i]))
        hunk.context_equal_count += count
        hunk.window_count += count

    def _change(self, old_index: int, old_length: int, new_index: int, new_length: int) -> None:
        if old_length == 0 and new_length == 0:
            return

        hunk = self._hunk
        if not hunk.has_change:
            if hunk.anchor is None:
                hunk.anchor = old_index + 1
            hunk.body = [BodyLine(kind=LineKind.context, text=self._a[i]) for i in hunk.window]
            hunk.context_equal_count = len(hunk.window)
            hunk.window.clear()
            hunk.state = HunkState.change

        for i in range(old_index, old_index + old_length):
            hunk.body.append(BodyLine(kind=LineKind.removed, text=self._a[i]))
        for j in range(new_index, new_index + new_length):
            hunk.body.append(BodyLine(kind=LineKind.added, text=self._b[j]))

        hunk.removed_count += old_length
        hunk.added_count += new_length
        hunk.window_count = 0

    def _split(self, old_index: int, length: int) -> None:
        """Close the current hunk and open the next one inside the same equal run."""
        logger.debug(f"Splitting hunk at old line {old_index + self._radius + 1}")
        self._flush()
        # seeded with the lines just shown as trailing context; the rest of the run slides past them
        self._hunk.slide(range(old_index, old_index + length))

    def _header(self, hunk: HunkInProgress) -> HunkHeader:
        anchor = max(hunk.anchor or 1, 1)
        old_count = hunk.context_equal_count + hunk.removed_count
        new_count = hunk.context_equal_count + hunk.added_count
        old_start = anchor
        new_start = anchor + self._added_carry - self._removed_carry
        # an empty side names the line before it
        if old_count == 0:
            old_start -= 1
        if new_count == 0:
            new_start -= 1
        return HunkHeader(old_start=old_start, old_count=old_count, new_start=new_start, new_count=new_count)

    def _flush(self) -> None:
        hunk = self._hunk
        if hunk.has_change:
            header = self._header(hunk)
            self._hunks.append(Hunk(header=header, body=hunk.body))
            logger.debug(f"Flushed hunk {header.render()} with {len(hunk.body)} body lines")
        self._removed_carry += hunk.removed_count
        self._added_carry += hunk.added_count
        self._hunk = HunkInProgress(self._radius)
