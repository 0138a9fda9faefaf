"""Edit-script runs and rendered hunk data models"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from pydantic import BaseModel


@dataclass(frozen=True)
class Equal:
    """`length` identical elements starting at old_index in A and new_index in B."""
    old_index: int
    new_index: int
    length:    int


@dataclass(frozen=True)
class Replace:
    """old_length elements of A replaced by new_length elements of B."""
    old_index:  int
    old_length: int
    new_index:  int
    new_length: int


@dataclass(frozen=True)
class Insert:
    """new_length elements of B inserted at old_index (A's index space)."""
    old_index:  int
    new_index:  int
    new_length: int


@dataclass(frozen=True)
class Delete:
    """length elements of A removed with no corresponding insertion."""
    old_index: int
    length:    int


EditRun = Union[Equal, Replace, Insert, Delete]


class LineKind(str, Enum):
    context = " "
    removed = "-"
    added   = "+"


class BodyLine(BaseModel):
    """A single hunk body line tagged with its kind."""
    kind: LineKind
    text: str

    def render(self) -> str:
        return f"{self.kind.value}{self.text}"


class HunkHeader(BaseModel):
    old_start: int
    old_count: int
    new_start: int
    new_count: int

    def render(self) -> str:
        return f"@@ -{self.old_start},{self.old_count} +{self.new_start},{self.new_count} @@"


class Hunk(BaseModel):
    """A finalized hunk: header plus ordered body lines."""
    header: HunkHeader
    body:   list[BodyLine]

    def render(self) -> list[str]:
        return [self.header.render(), *(line.render() for line in self.body)]
