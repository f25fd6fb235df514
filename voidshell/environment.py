"""The shell's variable table, kept in key order."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from voidshell.strutils import atoi

_FROM_PROCESS = object()


class Environment:
    """Shell variables ordered by key.

    A variable may exist without a value (exported but never assigned);
    such variables keep ``None`` as their value.
    """

    def __init__(self) -> None:
        self._vars: dict[str, str | None] = {}

    @classmethod
    def from_envp(
        cls,
        envp: Iterable[str],
        inherited_shlvl: str | None | object = _FROM_PROCESS,
    ) -> Environment:
        """Build a table from ``KEY=VALUE`` entries and bump SHLVL.

        ``inherited_shlvl`` is the SHLVL the shell was started with; when it
        is not given, it is read from the process environment.
        """
        environment = cls()
        for entry in envp:
            environment.push_entry(entry)
        if inherited_shlvl is _FROM_PROCESS:
            inherited_shlvl = os.environ.get("SHLVL")
        environment.update_shell_level(inherited_shlvl)
        return environment

    def get(self, key: str) -> str | None:
        """Return the value of ``key``, or None if it is unset or has no value."""
        return self._vars.get(key)

    def update(self, key: str, value: str | None) -> bool:
        """Change an existing variable; return whether ``key`` existed.

        A ``None`` value leaves the current value untouched.
        """
        if key not in self._vars:
            return False
        if value is not None:
            self._vars[key] = value
        return True

    def insert(self, key: str, value: str | None) -> None:
        """Set ``key``, adding it if it does not exist yet."""
        if not self.update(key, value):
            self._vars[key] = value

    def push_entry(self, entry: str) -> None:
        """Add a ``KEY=VALUE`` entry; an entry without ``=`` has no value."""
        key, equal, value = entry.partition("=")
        self.insert(key, value if equal else None)

    def remove(self, key: str) -> None:
        """Drop ``key`` if present."""
        self._vars.pop(key, None)

    def update_shell_level(self, inherited: str | None) -> None:
        """Set SHLVL one above ``inherited``, or to 1 when nothing was inherited."""
        level = 1 if inherited is None else atoi(inherited) + 1
        self.insert("SHLVL", str(level))

    def to_vector(self) -> list[str]:
        """Return the variables as ``KEY=VALUE`` strings, bare keys for valueless ones."""
        return [key if value is None else f"{key}={value}" for key, value in self.items()]

    def items(self) -> Iterator[tuple[str, str | None]]:
        """Yield ``(key, value)`` pairs in key order."""
        for key in sorted(self._vars):
            yield key, self._vars[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._vars))

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __len__(self) -> int:
        return len(self._vars)