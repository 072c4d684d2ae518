from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from registrar.core.entry import CandidateState, Entry
from registrar.core.naming import FACTORY_SUFFIX, ladder_names

Loader = Callable[[str], Optional[type]]


class ResolutionSource(str, Enum):
    """Which lookup step produced a resolution."""

    CACHE = "cache"
    LADDER = "ladder"
    ALIAS = "alias"
    NONE = "none"


@dataclass(frozen=True)
class Resolution:
    """Outcome of one lookup plus where to record it.

    `slot` is the index of the first candidate whose name matched the looked-up
    value, or None when the outcome needs a new slot.
    """

    impl: Optional[type]
    state: CandidateState
    slot: Optional[int]
    source: ResolutionSource

    @property
    def needs_write_back(self) -> bool:
        return self.source != ResolutionSource.CACHE


def try_load(load: Loader, name: str) -> Optional[type]:
    """Call the loader, treating any exception as "not loadable"."""
    try:
        return load(name)
    except Exception:
        return None


def resolve(
    entry: Optional[Entry],
    restriction: type,
    value: str,
    *,
    load: Loader,
    recurse: Callable[[str], Optional[type]],
    suffix: str = FACTORY_SUFFIX,
) -> Resolution:
    """
    Resolve `value` for `restriction` without touching the cache.

    Steps, first success wins:
    1. exact, case-sensitive match against the entry's candidates
    2. the load ladder from `ladder_names`
    3. the first case-insensitive alias match, resolved through `recurse`
    """
    slot: Optional[int] = None
    if entry is not None:
        slot = entry.find_slot(value)
        if slot is not None:
            candidate = entry.candidates[slot]
            if candidate.state != CandidateState.UNRESOLVED:
                return Resolution(candidate.impl, candidate.state, slot, ResolutionSource.CACHE)

    for name in ladder_names(restriction, value, suffix):
        impl = try_load(load, name)
        if impl is not None:
            return Resolution(impl, CandidateState.RESOLVED, slot, ResolutionSource.LADDER)

    if entry is not None and entry.aliases:
        canonical_name = entry.find_alias(value)
        if canonical_name is not None:
            impl = recurse(canonical_name)
            state = CandidateState.FAILED if impl is None else CandidateState.RESOLVED
            return Resolution(impl, state, slot, ResolutionSource.ALIAS)

    return Resolution(None, CandidateState.FAILED, slot, ResolutionSource.NONE)
