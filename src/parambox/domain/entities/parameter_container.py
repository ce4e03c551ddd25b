"""
Parameter Container Entity - Checked Key/Value Store

A container owns a closed vocabulary of declared parameter names and the
values assigned under it. Reading or writing outside the vocabulary, or
reading a declared name before it is assigned, raises a domain error.

Two construction modes are provided:
- ParameterContainer: keys are any hashable and are declared at runtime
- EnumParameterContainer: keys are the members of an Enum class
"""

import logging
from enum import Enum
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Set, Type

from parambox.domain.services.error_handler import (
    ErrorHandlingService,
    get_default_error_handler,
    create_undeclared_error,
    create_uninitialized_error,
)

logger = logging.getLogger(__name__)


class ParameterContainer:
    """
    Checked key/value property container.

    Invariant: every key in the value mapping is also a declared key.
    Not thread-safe; callers sharing an instance must serialize access.
    """

    def __init__(
        self,
        initial_keys: Iterable[Hashable] = (),
        error_handler: Optional[ErrorHandlingService] = None,
    ):
        """
        Initialize the container.

        Args:
            initial_keys: Keys declared on creation
            error_handler: Service used to build and report errors; defaults
                to the shared handler that bootstrap() wires to logging
        """
        self.error_handler = error_handler or get_default_error_handler()
        self._declared: Set[Hashable] = set()
        self._values: Dict[Hashable, Any] = {}

        for key in initial_keys:
            self._declared.add(self._normalize_key(key))

    def _normalize_key(self, key: Hashable) -> Hashable:
        """Map a caller-supplied key onto its canonical form"""
        return key

    # Vocabulary

    def declare(self, *keys: Hashable) -> None:
        """Add keys to the vocabulary; re-declaring a key is a no-op"""
        for key in keys:
            self._declared.add(self._normalize_key(key))
        logger.debug(f"Declared parameters: {keys}")

    def undeclare(self, *keys: Hashable) -> None:
        """Remove keys from the vocabulary, dropping any assigned values"""
        for key in keys:
            key = self._normalize_key(key)
            self._declared.discard(key)
            self._values.pop(key, None)
        logger.debug(f"Undeclared parameters: {keys}")

    def is_declared(self, key: Hashable) -> bool:
        return self._normalize_key(key) in self._declared

    def exists(self, key: Hashable) -> bool:
        """Return True if the key currently has an assigned value"""
        return self._normalize_key(key) in self._values

    # Values

    def set(self, assignments: Optional[Mapping[Hashable, Any]] = None, **kwargs: Any) -> None:
        """
        Assign values to declared keys.

        Every key is checked before any value is written, so a batch with an
        undeclared key leaves the container untouched.

        Args:
            assignments: Mapping of key to value
            **kwargs: Additional string-keyed assignments, applied after the mapping

        Raises:
            UndeclaredParameterError: If any key is not declared
        """
        batch: Dict[Hashable, Any] = {}
        for key, value in list((assignments or {}).items()) + list(kwargs.items()):
            key = self._normalize_key(key)
            if key not in self._declared:
                raise create_undeclared_error(key, self.error_handler)
            batch[key] = value

        self._values.update(batch)
        logger.debug(f"Set parameters: {list(batch)}")

    def clear(self, *keys: Hashable) -> None:
        """Unset values without touching the vocabulary"""
        for key in keys:
            self._values.pop(self._normalize_key(key), None)
        logger.debug(f"Cleared parameters: {keys}")

    def get(self, *keys: Hashable) -> Any:
        """
        Read the values of one or more keys.

        Returns:
            The bare value when one key is requested, otherwise a list of
            values in request order

        Raises:
            UndeclaredParameterError: If a key is not declared
            UninitializedParameterError: If a declared key has no value
        """
        resolved = []
        for key in keys:
            key = self._normalize_key(key)
            if key not in self._declared:
                raise create_undeclared_error(key, self.error_handler)
            if key not in self._values:
                raise create_uninitialized_error(key, self.error_handler)
            resolved.append(self._values[key])

        if len(resolved) == 1:
            return resolved[0]
        return resolved

    # Enumeration

    def list_declared_keys(self) -> List[Hashable]:
        return list(self._declared)

    def list_initialized_keys(self) -> List[Hashable]:
        return list(self._values)

    def snapshot(self) -> Dict[Hashable, Any]:
        """Shallow copy of every assigned key/value pair, ready to pass to set()"""
        return dict(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(declared={sorted(map(repr, self._declared))}, "
            f"initialized={sorted(map(repr, self._values))})"
        )


class EnumParameterContainer(ParameterContainer):
    """
    Container whose vocabulary is the closed set of members of an Enum.

    Keys may be passed as members, member names or member values.
    """

    def __init__(
        self,
        keys: Type[Enum],
        declare_all: bool = True,
        error_handler: Optional[ErrorHandlingService] = None,
    ):
        self.key_type = keys
        super().__init__(keys if declare_all else (), error_handler=error_handler)

    def _normalize_key(self, key: Hashable) -> Hashable:
        if isinstance(key, self.key_type):
            return key
        if isinstance(key, str) and key in self.key_type.__members__:
            return self.key_type[key]
        try:
            return self.key_type(key)
        except ValueError:
            return key

    def declare(self, *keys: Hashable) -> None:
        """
        Add enum members to the vocabulary.

        Raises:
            UndeclaredParameterError: If a key is not a member of the enum
        """
        normalized = [self._normalize_key(key) for key in keys]
        for key in normalized:
            if not isinstance(key, self.key_type):
                raise create_undeclared_error(key, self.error_handler)
        super().declare(*normalized)
