"""Lineup: ordered registry of Statists."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

from statist.domain.formatting import NEW_LINE

if TYPE_CHECKING:
    from collections.abc import Iterator

    from statist.domain.statist import Statist

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Lineup:
    """Insertion-ordered, immutable sequence of Statists.

    Holds references only; the Statists' lifetime belongs to the caller.
    enlist() and desert() return a new Lineup, the receiver is untouched.
    Names are not required to be unique.

    Attributes:
        members: Statists in enlistment order
    """

    members: tuple[Statist, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.members, tuple):
            raise TypeError(f"members must be tuple, got {type(self.members).__name__}")

    @classmethod
    def empty(cls) -> Lineup:
        """Create empty lineup."""
        return cls()

    def enlist(self, statist: Statist) -> Lineup:
        """Return a new Lineup with statist appended at the end.

        No validation: duplicates by name or identity are allowed.
        """
        logger.debug("enlist %r at index %d", statist.name(), len(self.members))
        return Lineup(members=(*self.members, statist))

    def desert(self, statist: Statist) -> Lineup:
        """Return a Lineup without the first member named like statist.

        Scans left to right and removes only the first match, keeping the
        order of the rest. Later members with the same name stay enlisted,
        so unique names are encouraged.

        Args:
            statist: Statist whose name() selects the member to remove

        Returns:
            New Lineup, or self when no member matches
        """
        target = statist.name()
        for i, member in enumerate(self.members):
            if member.name() == target:
                logger.debug("desert %r from index %d", target, i)
                return Lineup(members=self.members[:i] + self.members[i + 1 :])

        logger.debug("desert %r: no member with that name", target)
        return self

    def muster(self) -> str:
        """Concatenate every member's state string, each followed by a line feed.

        Members are visited in current order. An exception raised by a member
        aborts the muster and propagates unchanged.

        Returns:
            Multi-line report ("" for an empty lineup)
        """
        return "".join(member.state_string() + NEW_LINE for member in self.members)

    def muster_with_greeting(self, greeting: str) -> str:
        """Same as muster(), preceded by greeting and a line feed.

        An empty greeting still produces the leading line feed.
        """
        return greeting + NEW_LINE + self.muster()

    def names(self) -> tuple[str, ...]:
        """Names of all members in order."""
        return tuple(member.name() for member in self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Statist]:
        return iter(self.members)

    def __contains__(self, item: object) -> bool:
        return item in self.members

    @overload
    def __getitem__(self, index: int) -> Statist: ...

    @overload
    def __getitem__(self, index: slice) -> Lineup: ...

    def __getitem__(self, index: int | slice) -> Statist | Lineup:
        if isinstance(index, slice):
            return Lineup(members=self.members[index])
        return self.members[index]


def new_lineup() -> Lineup:
    """Create an empty Lineup."""
    return Lineup.empty()


def enlist(statist: Statist, lineup: Lineup) -> Lineup:
    """Push statist onto lineup and return the new Lineup."""
    return lineup.enlist(statist)


def desert(statist: Statist, lineup: Lineup) -> Lineup:
    """Remove the first member sharing statist's name, or return lineup as is."""
    return lineup.desert(statist)
