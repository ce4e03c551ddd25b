"""
parambox - checked key/value parameter containers

Provides:
- ParameterContainer for runtime-declared keys
- EnumParameterContainer for a closed Enum vocabulary
- ParameterHost for objects that forward accessors to a container
- Domain errors for undeclared and uninitialized parameters

Version: 1.0.0
"""

__version__ = "1.0.0"
__description__ = "Checked key/value parameter containers"

from .domain.entities.parameter_container import ParameterContainer, EnumParameterContainer
from .domain.entities.parameter_host import ParameterHost
from .domain.services.error_handler import (
    ErrorHandlingService,
    ParameterDomainError,
    UndeclaredParameterError,
    UninitializedParameterError,
)

__all__ = [
    "ParameterContainer",
    "EnumParameterContainer",
    "ParameterHost",
    "ErrorHandlingService",
    "ParameterDomainError",
    "UndeclaredParameterError",
    "UninitializedParameterError",
    "__version__",
    "__description__",
]
