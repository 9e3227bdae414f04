"""Timed state: a state and the time it was set."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from statist.domain.exceptions import InvalidStatistError


@dataclass(frozen=True, slots=True)
class StateRecord:
    """A state together with the time it was set.

    Read as "state since time".

    Attributes:
        state: Free-form state text
        since: When the state was set (timezone-aware)
    """

    state: str
    since: datetime

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.state is None:
            raise TypeError("state must not be None")
        if not isinstance(self.since, datetime):
            raise TypeError(f"since must be datetime, got {type(self.since).__name__}")
        if self.since.utcoffset() is None:
            raise ValueError("since must be timezone-aware")

    def __str__(self) -> str:
        """Format as '<state> since <ISO time>'."""
        return f"{self.state} since {self.since.isoformat(timespec='seconds')}"


class TimedStatist:
    """Statist that remembers its latest state and when it was set.

    Only the latest state is kept; set_state() replaces it.

    Example:
        pump = TimedStatist("pump")
        pump.set_state("running")
        lineup = new_lineup().enlist(pump)
    """

    __slots__ = ("_name", "_record")

    def __init__(self, name: str) -> None:
        """Initialize statist.

        Args:
            name: Identifying name (must not be empty)

        Raises:
            InvalidStatistError: If name is empty
        """
        if not name:
            raise InvalidStatistError("name must not be empty")

        self._name = name
        self._record: StateRecord | None = None

    def name(self) -> str:
        return self._name

    def state(self) -> StateRecord | None:
        """Latest state, or None if never set."""
        return self._record

    def set_state(self, state: str, at: datetime | None = None) -> StateRecord:
        """Replace the current state.

        Args:
            state: New state text
            at: When it was set (default: now, UTC)

        Returns:
            The new StateRecord
        """
        self._record = StateRecord(state=state, since=at if at is not None else datetime.now(UTC))
        return self._record

    def state_string(self) -> str:
        if self._record is None:
            return f"{self._name}: <no state>"
        return f"{self._name}: {self._record}"

    def __repr__(self) -> str:
        return f"TimedStatist({self._name!r})"
