from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from registrar.core.entry import CandidateState, Entry
from registrar.core.loader import declared_aliases, load_by_name
from registrar.core.models import RegistrarSettings
from registrar.core.naming import canonical_name
from registrar.core.resolver import Loader, resolve, try_load
from registrar.utils.diagnostics import RegistrarError, RegistryDiagnostic
from registrar.utils.logging import create_logger

AliasReader = Callable[[type], Sequence[str]]


def is_assignable(impl: object, restriction: type) -> bool:
    """Return whether `impl` is a class implementing `restriction`."""
    if not isinstance(impl, type):
        return False
    try:
        return issubclass(impl, restriction)
    except TypeError:
        return False


@dataclass
class _AliasTrace:
    """Shared by every step of one lookup. Set when an alias chain hit `max_alias_depth`."""

    truncated: bool = False


class Registry:
    """
    Maps restriction types to the implementation classes known for them.

    Names are registered up front and resolved lazily on lookup. Every
    lookup outcome, including "not found", is cached per exact string.
    All public operations hold a reentrant lock, so lookups may run
    concurrently once registration is done.
    """

    def __init__(
        self,
        loader: Loader = load_by_name,
        alias_reader: AliasReader = declared_aliases,
        settings: Optional[RegistrarSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = settings or RegistrarSettings()
        self._load = loader
        self._alias_reader = alias_reader
        self._logger = logger or create_logger("registrar.registry", self.settings.log_level)
        self._entries: Dict[type, Entry] = {}
        self._diagnostics: List[RegistryDiagnostic] = []
        self._lock = threading.RLock()

    def register(self, restriction: type, name: str) -> None:
        """Register an implementation by name. Loading is deferred to the first lookup."""
        with self._lock:
            self._entry(restriction).add_name(name)

    def register_type(
        self,
        restriction: type,
        impl: type,
        aliases: Optional[Sequence[str]] = None,
    ) -> None:
        """
        Register an already loaded implementation under its canonical name.

        When `aliases` is None, the aliases declared on `impl` are used.
        """
        if aliases is None:
            aliases = self._alias_reader(impl)

        with self._lock:
            entry = self._entry(restriction)
            cname = canonical_name(impl)
            entry.add_hit(cname, impl)
            for alias in aliases:
                entry.add_alias(alias, cname)

    def register_alias(self, restriction: type, alias: str, name: str) -> None:
        """Register an alias for a canonical name. The restriction type must already be registered."""
        with self._lock:
            entry = self._entries.get(restriction)
            if entry is None:
                raise RegistrarError(
                    f"Cannot alias '{alias}' to '{name}' before any implementation is registered.",
                    restriction=canonical_name(restriction),
                    name=alias,
                )
            entry.add_alias(alias, name)

    def find_implementation(self, restriction: type, value: str) -> Optional[type]:
        """
        Find the implementation of `restriction` named by `value`.

        `value` may be a fully qualified class name, a name relative to the
        restriction's package, or an alias. Returns None when nothing matches.
        """
        with self._lock:
            return self._find(restriction, value, (), _AliasTrace())

    def find_all_implementations(self, restriction: type) -> List[type]:
        """Return every loadable registered implementation, without duplicates, in registration order."""
        with self._lock:
            entry = self._entries.get(restriction)
            if entry is None:
                return []

            found: List[type] = []
            for candidate in entry.candidates:
                if candidate.state == CandidateState.UNRESOLVED:
                    impl = try_load(self._load, candidate.name)
                    if impl is None:
                        self._report(
                            restriction,
                            candidate.name,
                            "ERR_LOAD_FAILED",
                            f"Failed to load class {candidate.name} for {canonical_name(restriction)}",
                            suggestion="Check that the registered name is a fully qualified class name.",
                        )
                        candidate.fail()
                        continue
                    if not is_assignable(impl, restriction):
                        self._report_invalid_assignment(restriction, candidate.name)
                        candidate.fail()
                        continue
                    candidate.resolve(impl)

                if candidate.state == CandidateState.FAILED:
                    continue

                # Linear scan; candidate lists are short.
                if not any(known is candidate.impl for known in found):
                    found.append(candidate.impl)
            return found

    def contains(self, restriction: type) -> bool:
        """Return whether an entry was ever created for `restriction`."""
        with self._lock:
            return restriction in self._entries

    def __contains__(self, restriction: object) -> bool:
        return self.contains(restriction)  # type: ignore[arg-type]

    def aliases(self, restriction: type) -> List[Tuple[str, str]]:
        """Return the (alias, canonical name) pairs registered for `restriction`."""
        with self._lock:
            entry = self._entries.get(restriction)
            return list(entry.aliases) if entry is not None else []

    def restrictions(self) -> List[type]:
        with self._lock:
            return list(self._entries)

    @property
    def diagnostics(self) -> List[RegistryDiagnostic]:
        with self._lock:
            return list(self._diagnostics)

    def _entry(self, restriction: type) -> Entry:
        entry = self._entries.get(restriction)
        if entry is None:
            entry = self._entries[restriction] = Entry()
        return entry

    def _find(self, restriction: type, value: str, chain: Tuple[str, ...], trace: _AliasTrace) -> Optional[type]:
        entry = self._entries.get(restriction)
        if entry is None:
            self._logger.debug(
                "Finding implementations for unregistered type: %s %s",
                canonical_name(restriction),
                value,
            )

        chain = chain + (value,)
        resolution = resolve(
            entry,
            restriction,
            value,
            load=self._load,
            recurse=lambda name: self._follow_alias(restriction, name, chain, trace),
            suffix=self.settings.factory_suffix,
        )
        if not resolution.needs_write_back:
            return resolution.impl

        impl = resolution.impl
        if impl is not None and not is_assignable(impl, restriction):
            self._report_invalid_assignment(restriction, value)
            impl = None

        # A depth abort only says something about the value the lookup started from.
        if trace.truncated and len(chain) > 1:
            return impl

        # Alias recursion may have created the entry; slots are append-only.
        entry = self._entry(restriction)
        if resolution.slot is None:
            entry.add_hit(value, impl)
        else:
            candidate = entry.candidates[resolution.slot]
            if impl is None:
                candidate.fail()
            else:
                candidate.resolve(impl)
        return impl

    def _follow_alias(
        self,
        restriction: type,
        name: str,
        chain: Tuple[str, ...],
        trace: _AliasTrace,
    ) -> Optional[type]:
        cycle = name in chain
        if cycle or len(chain) > self.settings.max_alias_depth:
            trace.truncated = trace.truncated or not cycle
            self._report(
                restriction,
                chain[0],
                "ERR_ALIAS_CYCLE",
                f"Alias chain {' -> '.join(chain + (name,))} for {canonical_name(restriction)} does not terminate",
                suggestion="Point aliases at canonical class names, not at other aliases.",
            )
            return None
        return self._find(restriction, name, chain, trace)

    def _report_invalid_assignment(self, restriction: type, name: str) -> None:
        self._report(
            restriction,
            name,
            "ERR_INVALID_ASSIGNMENT",
            f"Invalid entry for class {canonical_name(restriction)}: {name}",
            suggestion=f"The class must subclass {canonical_name(restriction)}.",
        )

    def _report(
        self,
        restriction: type,
        name: str,
        error_code: str,
        message: str,
        suggestion: Optional[str] = None,
    ) -> None:
        self._logger.warning(message)
        self._diagnostics.append(
            RegistryDiagnostic(
                restriction=canonical_name(restriction),
                name=name,
                error_code=error_code,
                message=message,
                suggestion=suggestion,
            )
        )
