"""Domain models for run-all.

Unlike pure value objects, a :class:`RunGroup` is filled in token by
token while the parser scans, so the models here are mutable
dataclasses.  They still carry zero I/O: the environment snapshot is
handed in by the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

_NO_SCOPE: Mapping[str, str | None] = MappingProxyType({})


# ---------------------------------------------------------------------------
# Package config overrides
# ---------------------------------------------------------------------------

class PackageConfig(dict[str, dict[str, str | None]]):
    """Two-level mapping: package name → variable name → value.

    Reading an unknown package yields a shared read-only empty mapping
    instead of raising, and does not insert the package; writing
    through it raises :class:`TypeError`.  Scopes are created on first
    write through :meth:`overwrite`, the only write path.

    A value is ``None`` when a ``--pkg:var`` directive ended the
    command line without a value.
    """

    def __missing__(self, package: str) -> Mapping[str, str | None]:
        return _NO_SCOPE

    def overwrite(self, package: str, variable: str, value: str | None) -> None:
        """Set ``self[package][variable] = value``; last write wins."""
        scope = self.get(package)
        if scope is None:
            scope = self[package] = {}
        scope[variable] = value

    def to_dict(self) -> dict[str, dict[str, str | None]]:
        return {package: dict(scope) for package, scope in self.items()}


# ---------------------------------------------------------------------------
# Run group
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class RunGroup:
    """A set of task patterns sharing an execution mode and error policy."""

    continue_on_error: bool = False
    """Keep running the remaining tasks when one of them fails."""

    parallel: bool = False
    """Run the group's tasks concurrently instead of one after another."""

    patterns: list[str] = field(default_factory=list)
    """Task names or glob patterns, in the order they were given."""

    print_label: bool = False
    """Prefix each output line with the task name."""

    print_name: bool = False
    """Print the task name before running it."""

    @classmethod
    def from_values(cls, values: Mapping[str, Any] | None = None) -> RunGroup:
        """Build a group from a partial mapping of field names.

        Unknown field names raise :class:`TypeError`, as the dataclass
        constructor does.  A supplied ``patterns`` sequence is copied so
        the group never aliases caller state.
        """
        kwargs = dict(values or {})
        if "patterns" in kwargs:
            kwargs["patterns"] = list(kwargs["patterns"])
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "continueOnError": self.continue_on_error,
            "parallel": self.parallel,
            "patterns": list(self.patterns),
            "printLabel": self.print_label,
            "printName": self.print_name,
        }


# ---------------------------------------------------------------------------
# Parse result
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class ArgumentSet:
    """Parsed CLI arguments: global flags plus ordered run groups.

    ``groups`` is append-only and never empty; :attr:`last_group` is
    always the most recently appended group.
    """

    groups: list[RunGroup]
    package_config: PackageConfig
    single_mode: bool = False
    """Fixed at construction; forbids defining more than one run group."""

    help: bool = False
    version: bool = False
    silent: bool = False

    def __post_init__(self) -> None:
        if not self.groups:
            raise ValueError("ArgumentSet requires at least one run group")

    @property
    def last_group(self) -> RunGroup:
        return self.groups[-1]

    def add_group(self, values: Mapping[str, Any] | None = None) -> RunGroup:
        """Append a new group built from *values* and return it."""
        group = RunGroup.from_values(values)
        self.groups.append(group)
        return group

    def to_dict(self) -> dict[str, Any]:
        return {
            "groups": [group.to_dict() for group in self.groups],
            "help": self.help,
            "version": self.version,
            "silent": self.silent,
            "singleMode": self.single_mode,
            "packageConfig": self.package_config.to_dict(),
        }
