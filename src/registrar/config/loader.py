import os
import re
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional
from registrar.utils.diagnostics import RegistrarError

ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")

ALLOWED_KEYS = {"registrar", "services"}

def interpolate_env_vars(content: str, source: Optional[Path] = None) -> str:
    """
    Replace ${VAR} or ${VAR:default} with environment variables.

    A variable without a default must be set, since an empty class name would
    only surface later as a manifest error. `${VAR:}` opts into an empty value.
    """
    missing: List[str] = []

    def replace_match(match: re.Match) -> str:
        var_name, default_value = match.group(1), match.group(2)
        if var_name in os.environ:
            return os.environ[var_name]
        if default_value is None:
            missing.append(var_name)
            return ""
        return default_value

    result = ENV_VAR_PATTERN.sub(replace_match, content)
    if missing:
        where = f" in {source}" if source else ""
        names = ", ".join(dict.fromkeys(missing))
        raise RegistrarError(f"Unset environment variable(s) without default{where}: {names}")
    return result

def load_config(path: Path) -> Dict[str, Any]:
    """
    Load registrar.yaml with environment variable interpolation.

    Only the 'registrar' (settings) and 'services' (manifest) sections are kept.
    """
    if not path.exists():
        return {}

    content = path.read_text()
    interpolated_content = interpolate_env_vars(content, source=path)
    try:
        full_config = yaml.safe_load(interpolated_content) or {}
    except yaml.YAMLError as e:
        raise RegistrarError(f"Invalid YAML in {path}: {e}")

    if not isinstance(full_config, dict):
        raise RegistrarError(f"Expected a mapping at the top of {path}, got {type(full_config).__name__}.")

    return {k: v for k, v in full_config.items() if k in ALLOWED_KEYS}
