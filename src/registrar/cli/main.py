import typer
from pathlib import Path
from pydantic import ValidationError

from registrar.cli.formatter import OutputFormatter
from registrar.config.loader import load_config
from registrar.core.loader import load_by_name
from registrar.core.naming import canonical_name
from registrar.core.registry import Registry
from registrar.core.resolver import try_load
from registrar.discovery.manifest import registry_from_config
from registrar.utils.diagnostics import RegistrarError

app = typer.Typer(name="registrar", help="Registrar CLI Interface", rich_markup_mode=None)

def _config_option():
    return typer.Option(
        Path("registrar.yaml"),
        "--config",
        "-c",
        help="Path to registrar.yaml with 'registrar' settings and a 'services' manifest.",
    )


def _load_registry(config_path: Path) -> Registry:
    try:
        config = load_config(config_path)
        registry, diagnostics = registry_from_config(config)
    except RegistrarError as e:
        OutputFormatter.log(str(e), severity="error")
        raise typer.Exit(code=1)
    except ValidationError as e:
        OutputFormatter.log(f"Invalid 'registrar' settings: {e}", severity="error")
        raise typer.Exit(code=1)

    OutputFormatter.print_diagnostics(diagnostics)
    return registry


def _load_restriction(name: str) -> type:
    restriction = try_load(load_by_name, name)
    if restriction is None:
        OutputFormatter.log(f"Error: Restriction type '{name}' could not be loaded.", severity="error")
        raise typer.Exit(code=1)
    return restriction


@app.command()
def resolve(
    restriction: str = typer.Argument(..., help="Fully qualified name of the restriction type."),
    value: str = typer.Argument(..., help="Class name, name relative to the restriction's package, or alias."),
    config: Path = _config_option(),
):
    """
    Resolve a name to an implementation of a restriction type.
    """
    registry = _load_registry(config)
    restriction_type = _load_restriction(restriction)

    impl = registry.find_implementation(restriction_type, value)
    OutputFormatter.print_diagnostics(registry.diagnostics)
    if impl is None:
        OutputFormatter.log(f"Error: No implementation of '{restriction}' found for '{value}'.", severity="error")
        raise typer.Exit(code=1)

    OutputFormatter.print_data(canonical_name(impl))


@app.command("list")
def list_implementations(
    restriction: str = typer.Argument(..., help="Fully qualified name of the restriction type."),
    config: Path = _config_option(),
    as_json: bool = typer.Option(False, "--json", help="Print canonical names as a JSON list."),
):
    """
    List every registered implementation of a restriction type.
    """
    registry = _load_registry(config)
    restriction_type = _load_restriction(restriction)

    implementations = registry.find_all_implementations(restriction_type)
    OutputFormatter.print_diagnostics(registry.diagnostics)

    if as_json:
        OutputFormatter.print_data(implementations)
        return

    if not implementations:
        OutputFormatter.log(f"No implementations registered for '{restriction}'.", severity="warning")
        return
    OutputFormatter.print_implementations(restriction_type, implementations)


@app.command()
def aliases(
    restriction: str = typer.Argument(..., help="Fully qualified name of the restriction type."),
    config: Path = _config_option(),
):
    """
    Show the alias table of a restriction type.
    """
    registry = _load_registry(config)
    restriction_type = _load_restriction(restriction)

    table = registry.aliases(restriction_type)
    if not table:
        OutputFormatter.log(f"No aliases registered for '{restriction}'.", severity="warning")
        return
    OutputFormatter.print_aliases(restriction_type, table)

if __name__ == "__main__":
    app()
