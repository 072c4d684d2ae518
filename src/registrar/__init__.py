from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar, overload

from registrar.core.entry import CandidateState
from registrar.core.loader import declared_aliases, load_by_name
from registrar.core.models import RegistrarSettings
from registrar.core.naming import FACTORY_SUFFIX, canonical_name
from registrar.core.registry import Registry
from registrar.utils.diagnostics import RegistrarError, RegistryDiagnostic

DecoratedClass = TypeVar("DecoratedClass", bound=type)


@overload
def implementation(cls: DecoratedClass, /) -> DecoratedClass:
	...


@overload
def implementation(
	cls: None = None,
	/,
	*,
	aliases: Iterable[str] = (),
	**kwargs: Any,
) -> Callable[[DecoratedClass], DecoratedClass]:
	...


def implementation(
	cls: DecoratedClass | None = None,
	/,
	*,
	aliases: Iterable[str] = (),
	**kwargs: Any,
) -> DecoratedClass | Callable[[DecoratedClass], DecoratedClass]:
	"""Decorator that marks a class as a registrable implementation.

	Supports both bare and configured usage:
	- ``@implementation``
	- ``@implementation(aliases=["fast", "quick"])``

	The aliases are picked up by ``Registry.register_type``.
	"""

	def decorator(target: DecoratedClass) -> DecoratedClass:
		meta = {
			"aliases": [aliases] if isinstance(aliases, str) else list(aliases),
			"extra": dict(kwargs),
		}
		setattr(target, "_registrar_meta", meta)
		return target

	if isinstance(cls, type):
		return decorator(cls)

	return decorator


__all__ = [
	"CandidateState",
	"FACTORY_SUFFIX",
	"RegistrarError",
	"RegistrarSettings",
	"Registry",
	"RegistryDiagnostic",
	"canonical_name",
	"declared_aliases",
	"implementation",
	"load_by_name",
]
