import importlib
from typing import Any, List, Optional

_MISSING = object()


def _is_module_prefix(missing: str, module_name: str) -> bool:
    return module_name == missing or module_name.startswith(missing + ".")


def load_by_name(name: str) -> Optional[type]:
    """
    Resolve a dotted name such as `pkg.module.Class.Factory` to a class.

    The longest importable module prefix is imported and the remaining parts
    are looked up as attributes. Returns None when no such class exists.
    Errors raised while executing an existing module propagate.
    """
    parts = name.split(".")
    if not all(part.isidentifier() for part in parts):
        return None

    for split in range(len(parts), 0, -1):
        module_name = ".".join(parts[:split])
        try:
            target: Any = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            # A module we asked for is missing: try a shorter prefix.
            if e.name is None or _is_module_prefix(e.name, module_name):
                continue
            raise

        for attr in parts[split:]:
            target = getattr(target, attr, _MISSING)
            if target is _MISSING:
                return None

        return target if isinstance(target, type) else None

    return None


def declared_aliases(impl: type) -> List[str]:
    """Return the aliases declared with `@implementation(aliases=...)` on this exact class."""
    meta = vars(impl).get("_registrar_meta")
    if not meta:
        return []
    return list(meta.get("aliases", ()))
