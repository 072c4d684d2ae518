from typing import Literal, Optional
from pydantic import BaseModel

class RegistryDiagnostic(BaseModel):
    """
    A configuration defect found while registering or resolving.

    `name` is the registered name, alias or looked-up value at fault; it is
    empty for defects of a whole manifest section.
    """
    restriction: str
    name: str
    error_code: str
    message: str
    severity: Literal["warning", "error", "critical"] = "warning"
    suggestion: Optional[str] = None

    def __str__(self) -> str:
        where = f"{self.restriction}: '{self.name}'" if self.name else self.restriction
        return f"[{self.error_code}] {self.message} (for {where})"

class RegistrarError(Exception):
    """
    Raised for programming and configuration errors, such as aliasing
    against a restriction type that was never registered.
    """
    def __init__(self, message: str, restriction: Optional[str] = None, name: Optional[str] = None):
        self.message = message
        self.restriction = restriction
        self.name = name
        ctx = f" for '{restriction}'" if restriction else ""
        super().__init__(f"Registrar Error{ctx}: {message}")
