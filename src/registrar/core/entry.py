from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class CandidateState(str, Enum):
    """Resolution state of one candidate slot."""

    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"
    FAILED = "failed"


@dataclass
class Candidate:
    """A registered name and what it resolved to, if anything."""

    name: str
    state: CandidateState = CandidateState.UNRESOLVED
    impl: Optional[type] = None

    def resolve(self, impl: type) -> None:
        self._transition(CandidateState.RESOLVED)
        self.impl = impl

    def fail(self) -> None:
        self._transition(CandidateState.FAILED)

    def _transition(self, state: CandidateState) -> None:
        if self.state != CandidateState.UNRESOLVED:
            raise ValueError(f"Candidate '{self.name}' is already {self.state.value}.")
        self.state = state


class Entry:
    """
    Candidates and aliases known for a single restriction type.

    Both sequences only ever grow. Candidate names are matched exactly,
    aliases case-insensitively.
    """

    def __init__(self) -> None:
        self.candidates: List[Candidate] = []
        self.aliases: List[Tuple[str, str]] = []

    def add_name(self, name: str) -> Candidate:
        candidate = Candidate(name=name)
        self.candidates.append(candidate)
        return candidate

    def add_hit(self, name: str, impl: Optional[type]) -> Candidate:
        """Append a slot whose outcome is already known (None means failed)."""
        candidate = Candidate(name=name)
        if impl is None:
            candidate.fail()
        else:
            candidate.resolve(impl)
        self.candidates.append(candidate)
        return candidate

    def add_alias(self, alias: str, canonical_name: str) -> None:
        self.aliases.append((alias, canonical_name))

    def find_slot(self, name: str) -> Optional[int]:
        for pos, candidate in enumerate(self.candidates):
            if candidate.name == name:
                return pos
        return None

    def find_alias(self, value: str) -> Optional[str]:
        """Return the canonical name of the first alias matching `value`, ignoring case."""
        folded = value.casefold()
        for alias, canonical_name in self.aliases:
            if alias.casefold() == folded:
                return canonical_name
        return None

    def __len__(self) -> int:
        return len(self.candidates)
