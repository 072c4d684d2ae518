import sys
from typing import List

# Nested `Factory` class of the named class, e.g. `pkg.knn.KNN.Factory`.
FACTORY_SUFFIX = ".Factory"


def canonical_name(impl: type) -> str:
    """Return the dotted `module.qualname` under which a class is registered."""
    return f"{impl.__module__}.{impl.__qualname__}"


def restriction_package(restriction: type) -> str:
    """Return the package that unqualified names are resolved against.

    A restriction declared in a package's `__init__` uses that package;
    one declared in a plain module uses the module's parent package.
    """
    module_name = restriction.__module__
    module = sys.modules.get(module_name)
    if module is not None and hasattr(module, "__path__"):
        return module_name

    parent, _, _ = module_name.rpartition(".")
    return parent or module_name


def ladder_names(restriction: type, value: str, suffix: str = FACTORY_SUFFIX) -> List[str]:
    """Names tried, in order, when `value` is not already cached."""
    package = restriction_package(restriction)
    return [
        value + suffix,
        value,
        f"{package}.{value}{suffix}",
        f"{package}.{value}",
    ]
