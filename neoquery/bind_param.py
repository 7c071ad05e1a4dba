"""Registry of uniquely-named bound parameters.

A BindParam maps parameter names to values. Statement builders add values
through `get_unique_name_and_add`, which never overwrites an existing entry:
when the preferred name is taken, the value is stored under the first free
``<name>__<n>`` variant and the caller interpolates whatever name was used.
"""

from collections.abc import Mapping
from typing import Any

from .utils import sanitize_identifier


class BindParam:
    """A mapping of parameter name to value with unique names.

    Attributes:
        SUFFIX_SEPARATOR: Separator placed before the uniqueness counter.
    """

    SUFFIX_SEPARATOR = "__"

    def __init__(self, *objects: Mapping[str, Any] | None) -> None:
        """Initialize the registry.

        Args:
            *objects: Mappings whose entries seed the registry. Entries are
                copied; on overlapping keys the later mapping wins.
        """
        self._params: dict[str, Any] = {}
        for obj in objects:
            if obj:
                self._params.update(obj)

    @classmethod
    def acquire(cls, bind_param: "BindParam | Mapping[str, Any] | None" = None) -> "BindParam":
        """Return the given registry, or wrap a plain mapping into a new one.

        Args:
            bind_param: An existing BindParam, a plain mapping, or None.

        Returns:
            The same instance when a BindParam is given, a new one otherwise.
        """
        if isinstance(bind_param, BindParam):
            return bind_param
        return cls(bind_param)

    def clone(self) -> "BindParam":
        """Return an independent copy of this registry."""
        return BindParam(self._params)

    def add(self, values: Mapping[str, Any]) -> "BindParam":
        """Add every entry of a mapping under a unique name.

        Args:
            values: Mapping of preferred name to value.

        Returns:
            This registry, for chaining.
        """
        for key, value in values.items():
            self.get_unique_name_and_add(key, value)
        return self

    def get_unique_name(self, preferred_name: str) -> str:
        """Return a free name derived from the preferred one.

        The preferred name is returned as-is when free. Otherwise the smallest
        counter ``n >= 1`` is appended so that ``<name>__<n>`` is free.

        Args:
            preferred_name: The name the caller would like to use.

        Returns:
            A name not present in this registry.
        """
        name = sanitize_identifier(str(preferred_name))
        if name not in self._params:
            return name

        counter = 1
        while f"{name}{self.SUFFIX_SEPARATOR}{counter}" in self._params:
            counter += 1
        return f"{name}{self.SUFFIX_SEPARATOR}{counter}"

    def get_unique_name_and_add(self, preferred_name: str, value: Any) -> str:
        """Store a value under a unique name derived from the preferred one.

        Args:
            preferred_name: The name the caller would like to use.
            value: The value to bind.

        Returns:
            The name actually used.
        """
        name = self.get_unique_name(preferred_name)
        self._params[name] = value
        return name

    def remove(self, *names: str) -> "BindParam":
        """Remove entries by name, ignoring names that are not present."""
        for name in names:
            self._params.pop(name, None)
        return self

    def get(self) -> dict[str, Any]:
        """Return the current mapping, suitable for query parameters."""
        return self._params

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __len__(self) -> int:
        return len(self._params)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BindParam):
            return self._params == other._params
        if isinstance(other, Mapping):
            return self._params == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BindParam({self._params!r})"
