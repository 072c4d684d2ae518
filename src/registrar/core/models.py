from typing import Dict, List
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from registrar.core.naming import FACTORY_SUFFIX


class RegistrarSettings(BaseSettings):
    """
    Registry-level settings (the 'registrar' section in registrar.yaml).
    """
    model_config = SettingsConfigDict(env_prefix='REGISTRAR_', extra='ignore')

    log_level: str = "WARNING"
    factory_suffix: str = FACTORY_SUFFIX
    max_alias_depth: int = Field(default=8, ge=1)


class ServiceSection(BaseModel):
    """
    Implementations and aliases declared for one restriction type
    (an entry under the 'services' section in registrar.yaml).
    """
    model_config = ConfigDict(extra='forbid')

    implementations: List[str] = Field(default_factory=list)
    aliases: Dict[str, str] = Field(default_factory=dict)

    @field_validator("implementations")
    @classmethod
    def validate_implementations(cls, value: List[str]) -> List[str]:
        cleaned = [name.strip() for name in value]
        if any(not name for name in cleaned):
            raise ValueError("Implementation names cannot be empty.")
        return cleaned

    @field_validator("aliases")
    @classmethod
    def validate_aliases(cls, value: Dict[str, str]) -> Dict[str, str]:
        for alias, target in value.items():
            if not str(alias).strip() or not str(target).strip():
                raise ValueError("Aliases and their targets cannot be empty.")
        return {str(alias).strip(): str(target).strip() for alias, target in value.items()}
