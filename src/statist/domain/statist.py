"""Statist protocol: contract for anything that reports its state."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Statist(Protocol):
    """Entity that can report a named state.

    Structural: any object with name() and state_string() qualifies,
    no base class needed. Heterogeneous statists share one Lineup.

    state_string() should read as the state "since" the time it was set,
    e.g. "pump: running since 2024-05-01T10:00:00+00:00". The format is
    a convention; Lineup treats it as an opaque line.
    """

    def name(self) -> str:
        """Identifying name. Unique names encouraged, not enforced."""
        ...

    def state_string(self) -> str:
        """Current state rendered as text."""
        ...


@runtime_checkable
class Musterer(Protocol):
    """Something that can sound off all its members as one report."""

    def muster(self) -> str:
        """Every member's state string, each followed by a line feed."""
        ...

    def muster_with_greeting(self, greeting: str) -> str:
        """Same as muster(), preceded by a greeting line."""
        ...
