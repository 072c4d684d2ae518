import importlib
import pytest
import sys
from pathlib import Path
from typing import Dict, List, Optional

# Ensure src/ is in the python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


class CountingLoader:
    """
    Fake load-by-name capability backed by a dict.
    Records every name it is asked for.
    """
    def __init__(self, classes: Optional[Dict[str, type]] = None, broken: Optional[Dict[str, Exception]] = None):
        self.classes = dict(classes or {})
        self.broken = dict(broken or {})
        self.calls: List[str] = []

    def __call__(self, name: str) -> Optional[type]:
        self.calls.append(name)
        if name in self.broken:
            raise self.broken[name]
        return self.classes.get(name)


class Algorithm:
    """Restriction type used across tests; resolves names relative to `algo`."""


# Pretend the restriction lives in algo/base.py so its package is `algo`.
Algorithm.__module__ = "algo.base"


class KMeans(Algorithm):
    pass


class KNNFactory(Algorithm):
    pass


class NotAnAlgorithm:
    pass


@pytest.fixture
def root_dir(tmp_path):
    """
    Returns a temporary directory to act as an import root for tests
    that need real modules on disk.
    """
    return tmp_path


@pytest.fixture
def make_package(tmp_path, monkeypatch):
    """
    Write a package of modules under tmp_path and put it on sys.path.
    Usage: make_package("shapes", {"__init__.py": "...", "circle.py": "..."})
    """
    created: List[str] = []

    def _make(name: str, files: Dict[str, str]) -> Path:
        package_dir = tmp_path / name
        package_dir.mkdir(parents=True, exist_ok=True)
        for relative, source in files.items():
            target = package_dir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(source)
        created.append(name)
        importlib.invalidate_caches()
        return package_dir

    monkeypatch.syspath_prepend(str(tmp_path))
    yield _make

    for name in created:
        for module_name in list(sys.modules):
            if module_name == name or module_name.startswith(name + "."):
                del sys.modules[module_name]
