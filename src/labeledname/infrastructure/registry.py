"""NameRegistry — in-memory registration server for destination names.

Plays the part of the external registry a reporter registers metrics
with: names must be concrete (no patterns) and unique by canonical name.
Queries accept pattern names and return matches in registration order.

Not thread-safe. Callers that share a registry across threads own the
locking.
"""

from __future__ import annotations

import logging
from typing import Any

from labeledname.domain.objectname import ObjectName

logger = logging.getLogger(__name__)


class NameAlreadyRegisteredError(ValueError):
    """A name with the same canonical form is already registered."""

    def __init__(self, name: ObjectName) -> None:
        super().__init__(f"Already registered: {name}")
        self.name = name


class NameRegistry:
    """Registry of concrete :class:`ObjectName` entries."""

    def __init__(self) -> None:
        self._entries: dict[ObjectName, Any] = {}

    def register(self, name: ObjectName, obj: Any = None) -> ObjectName:
        """Register *obj* under *name*.

        Raises:
            ValueError: *name* is a pattern.
            NameAlreadyRegisteredError: *name* is already registered.
        """
        if name.is_pattern:
            raise ValueError(f"Cannot register a pattern name: {name}")
        if name in self._entries:
            raise NameAlreadyRegisteredError(name)
        self._entries[name] = obj
        logger.debug("Registered %s", name)
        return name

    def is_registered(self, name: ObjectName) -> bool:
        return name in self._entries

    def get(self, name: ObjectName) -> Any:
        return self._entries[name]

    def query_names(self, pattern: ObjectName | None = None) -> list[ObjectName]:
        """Registered names matching *pattern* (all names when None)."""
        if pattern is None:
            return list(self._entries)
        if not pattern.is_pattern:
            return [name for name in self._entries if name == pattern]
        return [name for name in self._entries if pattern.matches(name)]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
