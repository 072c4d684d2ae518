"""Pick a clustering algorithm by name or alias and run it: python cluster.py km 1 2 10 11"""
import sys
from pathlib import Path

from registrar.config.loader import load_config
from registrar.discovery.manifest import registry_from_config

sys.path.insert(0, str(Path(__file__).parent))

from clustering import Algorithm  # noqa: E402
from clustering.kmeans import KMeans  # noqa: E402


def build_registry():
    registry, diagnostics = registry_from_config(load_config(Path(__file__).parent / "registrar.yaml"))
    # Registering the class itself also registers its declared aliases.
    registry.register_type(Algorithm, KMeans)
    return registry, diagnostics


def main(argv):
    name, *values = argv
    registry, _ = build_registry()
    impl = registry.find_implementation(Algorithm, name)
    if impl is None:
        known = ", ".join(cls.__qualname__ for cls in registry.find_all_implementations(Algorithm))
        raise SystemExit(f"Unknown algorithm '{name}'. Known: {known}")
    print(impl().fit([float(v) for v in values]))


if __name__ == "__main__":
    main(sys.argv[1:])
