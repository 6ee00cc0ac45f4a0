"""Shared types for line formats and parse sessions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, List, Optional

from sparselabel.core.config import ParserOptions
from sparselabel.core.types import SparseVector


class ParserState(Enum):
    """Lifecycle of a single parse."""
    INIT = "init"
    READING_LINES = "reading_lines"
    FINALIZE = "finalize"
    DONE = "done"
    FAILED = "failed"


@dataclass
class ParseSession:
    """
    Mutable state of one top-level parse.

    A fresh session is created for every parse so the running maximum
    never carries over between independent inputs.

    Attributes:
        max_index: Largest dimension index seen so far (-1 before any)
        line_number: 1-based number of the line being processed
        state: Current lifecycle state
    """
    max_index: int = -1
    line_number: int = 0
    state: ParserState = ParserState.INIT

    def transition(self, state: ParserState) -> None:
        """Move to state; DONE and FAILED are terminal."""
        if self.finished:
            raise RuntimeError(f"Parse session already {self.state.value}, cannot move to {state.value}")
        self.state = state

    def observe_index(self, index: int) -> None:
        if index > self.max_index:
            self.max_index = index

    @property
    def finished(self) -> bool:
        return self.state in (ParserState.DONE, ParserState.FAILED)


@dataclass
class ParsedLine:
    """
    Result of parsing one record line.

    Attributes:
        vector: Sparse vector with unresolved dimensionality
        labels: Labels in the order they were encountered
        declared_count: Leading attribute count, None if not an integer
    """
    vector: SparseVector
    labels: List[str] = field(default_factory=list)
    declared_count: Optional[int] = None

    def __iter__(self) -> Iterator:
        return iter((self.vector, self.labels))


# A line format maps one record line to its vector and labels
LineFormat = Callable[[str, ParseSession, ParserOptions], ParsedLine]
