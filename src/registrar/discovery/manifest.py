from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from registrar.core.loader import load_by_name
from registrar.core.models import RegistrarSettings, ServiceSection
from registrar.core.registry import Registry
from registrar.core.resolver import Loader, try_load
from registrar.utils.diagnostics import RegistrarError, RegistryDiagnostic


def _manifest_diagnostic(restriction: str, error_code: str, message: str, suggestion: Optional[str] = None) -> RegistryDiagnostic:
    return RegistryDiagnostic(
        restriction=restriction,
        name="",
        error_code=error_code,
        message=message,
        severity="error",
        suggestion=suggestion,
    )


def apply_manifest(
    registry: Registry,
    services: Dict[str, Any],
    loader: Loader = load_by_name,
) -> List[RegistryDiagnostic]:
    """
    Register the implementations and aliases declared in a 'services' mapping.

    Keys are fully qualified restriction class names. Invalid sections are
    skipped and reported as diagnostics; valid ones are applied in order.
    """
    diagnostics: List[RegistryDiagnostic] = []

    if not isinstance(services, dict):
        diagnostics.append(
            _manifest_diagnostic("services", "ERR_INVALID_MANIFEST", "The 'services' section must be a mapping.")
        )
        return diagnostics

    for restriction_name, raw_section in services.items():
        try:
            section = ServiceSection.model_validate(raw_section or {})
        except ValidationError as e:
            diagnostics.append(
                _manifest_diagnostic(restriction_name, "ERR_INVALID_MANIFEST", f"Invalid service section: {e}")
            )
            continue

        restriction = try_load(loader, restriction_name)
        if restriction is None:
            diagnostics.append(
                _manifest_diagnostic(
                    restriction_name,
                    "ERR_UNKNOWN_RESTRICTION",
                    f"Restriction type '{restriction_name}' could not be loaded.",
                    suggestion="Use the fully qualified name of an importable class.",
                )
            )
            continue

        for name in section.implementations:
            registry.register(restriction, name)

        for alias, target in section.aliases.items():
            try:
                registry.register_alias(restriction, alias, target)
            except RegistrarError as e:
                diagnostics.append(
                    _manifest_diagnostic(
                        restriction_name,
                        "ERR_INVALID_MANIFEST",
                        e.message,
                        suggestion="List at least one implementation before declaring aliases.",
                    )
                )
                break

    return diagnostics


def registry_from_config(config: Dict[str, Any], loader: Loader = load_by_name) -> Tuple[Registry, List[RegistryDiagnostic]]:
    """Build a Registry from a loaded registrar.yaml and apply its service manifest."""
    settings = RegistrarSettings(**(config.get("registrar") or {}))
    registry = Registry(loader=loader, settings=settings)
    diagnostics = apply_manifest(registry, config.get("services") or {}, loader=loader)
    return registry, diagnostics
