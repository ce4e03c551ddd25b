"""
Parameter Host - composition helper for objects that carry parameters

Host classes list their vocabulary in PARAMETERS and get accessor methods
that forward to a private ParameterContainer.
"""

from typing import Any, Dict, Hashable, List, Mapping, Optional, Tuple

from parambox.domain.entities.parameter_container import ParameterContainer
from parambox.domain.services.error_handler import ErrorHandlingService


class ParameterHost:
    """
    Base class for objects holding a checked parameter container

    Every constructor keyword is treated as a parameter assignment; a host
    picks a non-default error handler through ERROR_HANDLER instead.
    """

    PARAMETERS: Tuple[Hashable, ...] = ()
    ERROR_HANDLER: Optional[ErrorHandlingService] = None

    def __init__(self, **parameters: Any):
        self._parameters = ParameterContainer(self.PARAMETERS, error_handler=self.ERROR_HANDLER)
        if parameters:
            self._parameters.set(parameters)

    @property
    def parameters(self) -> ParameterContainer:
        return self._parameters

    def set_parameters(self, assignments: Optional[Mapping[Hashable, Any]] = None, **kwargs: Any) -> None:
        self._parameters.set(assignments, **kwargs)

    def get_parameters(self, *keys: Hashable) -> Any:
        return self._parameters.get(*keys)

    def clear_parameters(self, *keys: Hashable) -> None:
        self._parameters.clear(*keys)

    def has_parameter(self, key: Hashable) -> bool:
        return self._parameters.exists(key)

    def declared_parameters(self) -> List[Hashable]:
        return self._parameters.list_declared_keys()

    def initialized_parameters(self) -> List[Hashable]:
        return self._parameters.list_initialized_keys()

    def parameter_snapshot(self) -> Dict[Hashable, Any]:
        return self._parameters.snapshot()
